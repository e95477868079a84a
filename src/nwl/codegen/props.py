"""
JSX attribute and class-name formatting.

Handler and expression strings from the page document are opaque: they
are spliced into the output verbatim and never parsed.
"""

from __future__ import annotations

import json
from collections.abc import Iterable

from ..core.naming import Binding


def format_style(style: Iterable[str]) -> str:
    """Space-join utility classes."""
    return " ".join(token for token in style if token)


def join_classes(*parts: str | None) -> str:
    """Join class fragments, skipping empty ones. Structural classes go first."""
    return " ".join(part for part in parts if part)


def js_string(value: str) -> str:
    """Double-quoted JavaScript string literal."""
    return json.dumps(value, ensure_ascii=False)


def js_single_quoted(value: str) -> str:
    """Single-quoted JavaScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def arrow(params: str, *statements: str | None) -> str | None:
    """
    Arrow function running `statements` in order.

    Returns None when there is nothing to run, a concise body for a single
    statement, and a block body otherwise.
    """
    body = [statement.rstrip(";") for statement in statements if statement]
    if not body:
        return None
    if len(body) == 1:
        return f"({params}) => {body[0]}"
    return f"({params}) => {{ {'; '.join(body)}; }}"


def binding_of(name: str | None) -> Binding | None:
    return Binding(name) if name else None


class Props:
    """
    Ordered JSX attribute list.

    `None` values are skipped so optional fields can be passed straight
    through.
    """

    def __init__(self) -> None:
        self._items: list[str] = []

    def text(self, name: str, value: str | int | None) -> Props:
        """String attribute: name="value"."""
        if value is not None:
            self._items.append(f'{name}="{value}"')
        return self

    def expr(self, name: str, expression: str | int | None) -> Props:
        """Expression attribute: name={expression}."""
        if expression is not None:
            self._items.append(f"{name}={{{expression}}}")
        return self

    def flag(self, name: str, enabled: bool | None = True) -> Props:
        """Boolean attribute written bare."""
        if enabled:
            self._items.append(name)
        return self

    def class_name(self, *parts: str | None) -> Props:
        """className from joined fragments, omitted when empty."""
        classes = join_classes(*parts)
        if classes:
            self.text("className", classes)
        return self

    def extend(self, other: Props) -> Props:
        """Append another attribute list after this one."""
        self._items.extend(other._items)
        return self

    def __bool__(self) -> bool:
        return bool(self._items)

    def render(self) -> str:
        return "".join(f" {item}" for item in self._items)


def tag(name: str, props: Props | None = None) -> str:
    """Self-closing tag."""
    return f"<{name}{props.render() if props else ''} />"


def open_tag(name: str, props: Props | None = None) -> str:
    return f"<{name}{props.render() if props else ''}>"


def element(name: str, content: str, props: Props | None = None) -> str:
    """Tag with inline content on one line."""
    return f"{open_tag(name, props)}{content}</{name}>"
