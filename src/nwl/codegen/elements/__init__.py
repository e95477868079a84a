"""
Element code generation.

Importing this package registers one renderer per element kind.
"""

from . import compound, containers, content, forms, inputs, navigation, overlays  # noqa: F401
from .registry import (
    element_union_members,
    generate_element,
    get_renderer,
    registered_types,
    render_children,
    render_element,
    renders,
)

__all__ = [
    "element_union_members",
    "generate_element",
    "get_renderer",
    "registered_types",
    "render_children",
    "render_element",
    "renders",
]
