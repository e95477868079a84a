"""
Renderers for elements that hold other elements.
"""

from __future__ import annotations

from ...core import ir
from ...core.naming import to_camel_case
from ..emitter import JsxWriter
from ..props import Props, arrow, element, format_style, open_tag
from .registry import render_children, renders


@renders(ir.CardElement)
def render_card(card: ir.CardElement, out: JsxWriter) -> None:
    with out.block(open_tag("div", Props().class_name("Card", format_style(card.style))), "</div>"):
        render_children(card.children, out)


@renders(ir.ContainerElement)
def render_container(container: ir.ContainerElement, out: JsxWriter) -> None:
    with out.block(open_tag("div", Props().class_name(format_style(container.style))), "</div>"):
        render_children(container.children, out)


@renders(ir.LayoutElement)
def render_layout(layout: ir.LayoutElement, out: JsxWriter) -> None:
    props = Props().class_name(format_style(layout.layout.classes()), format_style(layout.style))
    with out.block(open_tag("div", props), "</div>"):
        render_children(layout.children, out)


@renders(ir.ListElement)
def render_list(list_element: ir.ListElement, out: JsxWriter) -> None:
    props = Props().class_name("List", format_style(list_element.style))
    with out.block(open_tag("div", props), "</div>"):
        if list_element.data:
            _render_data_rows(list_element, out)
            return
        for index, item in enumerate(list_element.items):
            row = Props().text("key", f"list-item-{index}").text("className", "List-item")
            row.expr("onClick", arrow("", item.on_click))
            out.line(element("div", item.content, row))


def _render_data_rows(list_element: ir.ListElement, out: JsxWriter) -> None:
    source = to_camel_case(list_element.data or "")
    with out.block(f"{{{source}.map((item, index) => (", "))}"):
        row = Props().expr("key", "index").text("className", "List-item")
        with out.block(open_tag("div", row), "</div>"):
            if list_element.children:
                render_children(list_element.children, out)
            else:
                out.line("{item}")


@renders(ir.FieldsetElement)
def render_fieldset(fieldset: ir.FieldsetElement, out: JsxWriter) -> None:
    props = Props().class_name("Fieldset-root", format_style(fieldset.style))
    with out.block(open_tag("Fieldset.Root", props), "</Fieldset.Root>"):
        if fieldset.legend:
            out.line(
                element("Fieldset.Legend", fieldset.legend, Props().text("className", "Fieldset-legend"))
            )
        render_children(fieldset.children, out)
