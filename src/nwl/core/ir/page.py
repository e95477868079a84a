"""
Page, document, and project configuration types.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator, model_validator

from ..naming import to_camel_case
from .elements import Element, NwlModel
from .layout import Layout


class StateDefinition(NwlModel):
    """
    A page-level state field.

    Compiles to one `useState` hook. `value_type` (YAML `type`) is
    informational only.
    """

    name: str
    value_type: str | None = Field(default=None, alias="type")
    initial: Any = None


class Page(NwlModel):
    """
    One routable page, compiled to one component.

    Attributes:
        name: Page name; its PascalCase form names the component
        layout: Optional layout wrapping all children
        style: Utility classes for the layout wrapper
        children: Top-level elements in render order
        state: State fields in hook-declaration order
        css_theme: Base theme name (`default` is the built-in theme)
        css_override: Override stylesheet file under the themes directory
    """

    name: str
    layout: Layout | None = None
    style: list[str] = Field(default_factory=list)
    children: list[Element] = Field(default_factory=list)
    state: list[StateDefinition] = Field(default_factory=list)
    css_theme: str | None = None
    css_override: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("page name must not be empty")
        return v

    @model_validator(mode="after")
    def validate_unique_state(self) -> Page:
        """State names must map to distinct accessors (`first_name` and `firstName` collide)."""
        seen: dict[str, str] = {}
        for definition in self.state:
            accessor = to_camel_case(definition.name)
            if accessor in seen:
                raise ValueError(
                    f"duplicate state name: {definition.name} (same accessor as {seen[accessor]})"
                )
            seen[accessor] = definition.name
        return self

    @property
    def state_names(self) -> list[str]:
        return [definition.name for definition in self.state]


class Document(NwlModel):
    """Ordered collection of pages compiled together."""

    pages: list[Page] = Field(default_factory=list)


class RouteConfig(NwlModel):
    """Maps a URL path to a page file (relative to the project root)."""

    path: str
    page: str


class ProjectConfig(NwlModel):
    """
    Contents of a project's nwl.yaml.

    Route order is significant: it fixes the order of component imports
    and route entries in the generated router.
    """

    name: str
    routes: list[RouteConfig] = Field(default_factory=list)
    css_theme: str | None = None
    css_override: str | None = None
    src_dir: str = "src"
    themes_dir: str = "themes"

    @property
    def has_stylesheet(self) -> bool:
        """Whether the project declares a theme or an override."""
        return self.css_theme is not None or self.css_override is not None
