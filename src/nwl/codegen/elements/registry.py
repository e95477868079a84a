"""
Element renderer registry and dispatch.

Each element kind has exactly one renderer, registered with `@renders`.
Dispatch looks up the element's concrete class; a class without a
renderer raises `UnsupportedElement` before anything is written.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar, get_args

from ...core import ir
from ...core.errors import UnsupportedElement
from ..emitter import JsxWriter

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=ir.ElementBase)
Renderer = Callable[[E, JsxWriter], None]

_RENDERERS: dict[type[ir.ElementBase], Renderer] = {}


def renders(*element_types: type[E]) -> Callable[[Renderer], Renderer]:
    """Register the decorated function as the renderer for `element_types`."""

    def decorator(func: Renderer) -> Renderer:
        for element_type in element_types:
            if element_type in _RENDERERS:
                raise ValueError(f"Renderer already registered for {element_type.__name__}")
            _RENDERERS[element_type] = func
        return func

    return decorator


def get_renderer(element: ir.ElementBase) -> Renderer:
    renderer = _RENDERERS.get(type(element))
    if renderer is None:
        raise UnsupportedElement(element.element)
    return renderer


def registered_types() -> set[type[ir.ElementBase]]:
    return set(_RENDERERS)


def element_union_members() -> set[type[ir.ElementBase]]:
    """Concrete classes of the `Element` union."""
    union, _discriminator = get_args(ir.Element)
    return set(get_args(union))


def render_element(element: ir.ElementBase, out: JsxWriter) -> None:
    """
    Render one element into `out` at its current level.

    The element is rendered into a scratch writer first so a failure deep in
    the subtree leaves `out` untouched.
    """
    renderer = get_renderer(element)
    scratch = JsxWriter()
    renderer(element, scratch)
    out.extend(scratch)


def render_children(children: Iterable[ir.ElementBase], out: JsxWriter) -> None:
    for child in children:
        render_element(child, out)


def generate_element(element: ir.ElementBase, indent_level: int = 0) -> str:
    """
    Generate the markup fragment for one element.

    Args:
        element: Element to lower.
        indent_level: Nesting level of the fragment's first line.

    Raises:
        UnsupportedElement: No renderer for the element's kind.
    """
    out = JsxWriter(indent_level)
    render_element(element, out)
    return out.render()
