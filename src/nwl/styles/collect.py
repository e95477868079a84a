"""
Inline style collection from page documents.

Only elements that carry a fixed structural class contribute: their
`style` lists are attributed to that class's selector.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core import ir
from ..core.analysis import iter_elements

STRUCTURAL_SELECTORS: dict[type[ir.ElementBase], str] = {
    ir.ButtonElement: ".Button",
    ir.CardElement: ".Card",
    ir.ListElement: ".List",
    ir.CheckboxElement: ".Checkbox-root",
    ir.SelectElement: ".Select-trigger",
    ir.RadioGroupElement: ".RadioGroup",
    ir.ToggleElement: ".Switch-root",
    ir.FormElement: ".Form",
    ir.FieldElement: ".Field-root",
    ir.BadgeElement: ".Badge",
    ir.TagElement: ".Tag",
    ir.AlertElement: ".Alert",
    ir.SpinnerElement: ".Spinner",
    ir.CounterElement: ".NumberField-root",
}


def collect_inline_styles(pages: Iterable[ir.Page]) -> dict[str, list[str]]:
    """
    Utility classes per structural selector, in document order.

    Lists from several elements of the same kind are concatenated, so a
    later element's class wins when two set the same property.
    """
    styles: dict[str, list[str]] = {}
    for page in pages:
        for element in iter_elements(page.children):
            selector = STRUCTURAL_SELECTORS.get(type(element))
            if selector and element.style:
                styles.setdefault(selector, []).extend(element.style)
    return styles
