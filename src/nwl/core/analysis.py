"""
Read-only walks over the element tree.

Used by the page generator before emitting hooks (implicit state,
bind references) and by the style resolver (inline style collection).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from . import ir
from .naming import to_camel_case

MENU_STATE = "menuOpen"


def iter_elements(elements: Iterable[ir.ElementBase]) -> Iterator[ir.ElementBase]:
    """Yield every element in document order, parents before children."""
    for element in elements:
        yield element
        children = getattr(element, "children", None)
        if children:
            yield from iter_elements(children)


def needs_menu_state(page: ir.Page) -> bool:
    """Whether any navigation menu on the page asks for hamburger behavior."""
    return any(
        isinstance(element, ir.NavigationMenuElement) and element.hamburger is True
        for element in iter_elements(page.children)
    )


@dataclass(frozen=True)
class ImplicitState:
    """A state hook the page needs that its author did not declare."""

    name: str
    initial: bool | int | str | None


def implicit_state(page: ir.Page) -> list[ImplicitState]:
    """
    State hooks required by elements rather than by the state list.

    Declared ahead of user state, in this order. A hook whose accessor the
    page already declares is left to the declared state.
    """
    declared = {to_camel_case(name) for name in page.state_names}
    required: list[ImplicitState] = []
    if needs_menu_state(page) and MENU_STATE not in declared:
        required.append(ImplicitState(name=MENU_STATE, initial=False))
    return required


@dataclass(frozen=True)
class StateReference:
    """An element attribute that names a page state field."""

    element: str
    attribute: str
    name: str


def state_references(elements: Iterable[ir.ElementBase]) -> list[StateReference]:
    """Collect `bind`, `open` and `data` references in document order.

    Form `validation` keys name the fields they check, so each key counts too.
    """
    references: list[StateReference] = []
    for element in iter_elements(elements):
        for attribute in ("bind", "open", "data"):
            value = getattr(element, attribute, None)
            if isinstance(value, str) and value:
                references.append(StateReference(element.element, attribute, value))
        if isinstance(element, ir.FormElement) and element.validation:
            references.extend(
                StateReference(element.element, "validation", field) for field in element.validation
            )
    return references


def undeclared_references(page: ir.Page) -> list[StateReference]:
    """
    References to state the page neither declares nor synthesizes.

    Names are compared by accessor, so `first_name` and `firstName` match.
    """
    known = {to_camel_case(name) for name in page.state_names}
    known.update(state.name for state in implicit_state(page))
    return [
        ref for ref in state_references(page.children) if to_camel_case(ref.name) not in known
    ]
