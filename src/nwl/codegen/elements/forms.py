"""
Renderers for forms and form fields.
"""

from __future__ import annotations

from ...core import ir
from ..emitter import JsxWriter
from ..forms import captcha_widget, needs_submit_handler, submit_handler_body
from ..props import Props, element, format_style, open_tag, tag
from .registry import render_children, renders


@renders(ir.FormElement)
def render_form(form: ir.FormElement, out: JsxWriter) -> None:
    props = Props().class_name("Form", format_style(form.style))
    if needs_submit_handler(form):
        out.line(f"<Form{props.render()} onSubmit={{(e) => {{")
        with out.indented():
            out.lines(*submit_handler_body(form))
        opening = "}}>"
    else:
        opening = open_tag("Form", props)
    with out.block(opening, "</Form>"):
        render_children(form.children, out)
        if form.captcha is not None:
            out.line(captcha_widget(form.captcha))


@renders(ir.FieldElement)
def render_field(field: ir.FieldElement, out: JsxWriter) -> None:
    root = Props().text("name", field.name).class_name("Field-root", format_style(field.style))
    with out.block(open_tag("Field.Root", root), "</Field.Root>"):
        if field.label:
            out.line(element("Field.Label", field.label, Props().text("className", "Field-label")))
        control = Props().text("placeholder", field.placeholder).text("className", "Field-control")
        out.line(tag("Field.Control", control))
        out.line(tag("Field.Error", Props().text("className", "Field-error")))
