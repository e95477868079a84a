"""
Layout types for NWL pages.

A layout arranges a page's (or a layout element's) children along one of
four strategies and carries extra utility classes for the wrapper.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LayoutType(str, Enum):
    """Arrangement strategy for a layout wrapper."""

    COLUMN = "column"
    ROW = "row"
    STACK = "stack"
    GRID = "grid"


LAYOUT_BASE_CLASSES: dict[LayoutType, str] = {
    LayoutType.COLUMN: "flex flex-col",
    LayoutType.ROW: "flex flex-row",
    LayoutType.STACK: "relative",
    LayoutType.GRID: "grid",
}


class Layout(BaseModel):
    """
    Layout attached to a page or a layout element.

    Attributes:
        layout_type: Arrangement strategy (YAML key `type`)
        columns: Column count, only meaningful for grid layouts
        properties: Extra utility classes for the wrapper
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    layout_type: LayoutType = Field(alias="type")
    columns: int | None = None
    properties: list[str] = Field(default_factory=list)

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: int | None) -> int | None:
        """Grid columns must be positive."""
        if v is not None and v < 1:
            raise ValueError(f"columns must be a positive integer, got: {v}")
        return v

    def classes(self) -> list[str]:
        """Utility classes derived from the layout, base classes first."""
        classes = [LAYOUT_BASE_CLASSES[self.layout_type]]
        if self.layout_type == LayoutType.GRID and self.columns is not None:
            classes.append(f"grid-cols-{self.columns}")
        classes.extend(self.properties)
        return classes
