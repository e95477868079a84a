"""
Renderers for elements built from a list of entries: tabs and accordions.
"""

from __future__ import annotations

from ...core import ir
from ..emitter import JsxWriter
from ..props import Props, arrow, binding_of, element, format_style, js_string, open_tag, tag
from .registry import renders

TAB_CLASS = "cursor-pointer whitespace-nowrap py-4 px-1 border-b-2"
TAB_ACTIVE_CLASS = "border-blue-500 text-blue-600"
TAB_INACTIVE_CLASS = "border-transparent text-gray-500"


@renders(ir.TabsElement)
def render_tabs(tabs: ir.TabsElement, out: JsxWriter) -> None:
    """
    Tabs as a radio group styled as a tab strip.

    Bound tabs check the entry equal to the accessor and set the entry's own
    value on change. Unbound tabs start with the first entry active.
    """
    binding = binding_of(tabs.bind)
    group = tabs.bind or "tabs"
    with out.block(open_tag("div", Props().class_name(format_style(tabs.style))), "</div>"):
        if tabs.label:
            out.line(element("p", tabs.label))
        with out.block('<nav className="flex space-x-8" role="tablist">', "</nav>"):
            for index, tab in enumerate(tabs.options):
                value = js_string(tab.value)
                radio = Props().text("type", "radio").text("name", group).text("value", tab.value)
                radio.text("className", "sr-only")
                label = Props()
                if binding:
                    active = f"{binding.accessor} === {value}"
                    radio.expr("checked", active)
                    radio.expr("onChange", arrow("", binding.set(value), tabs.on_change))
                    label.expr(
                        "className",
                        f"`{TAB_CLASS} ${{{active} ? {js_string(TAB_ACTIVE_CLASS)} "
                        f": {js_string(TAB_INACTIVE_CLASS)}}}`",
                    )
                else:
                    radio.flag("defaultChecked", index == 0)
                    radio.expr("onChange", arrow("", tabs.on_change))
                    label.class_name(TAB_CLASS, TAB_ACTIVE_CLASS if index == 0 else TAB_INACTIVE_CLASS)
                with out.block(open_tag("label", label), "</label>"):
                    out.line(tag("input", radio))
                    if tab.icon:
                        out.line(element("span", tab.icon, Props().text("className", "mr-2")))
                    out.line(tab.display)


@renders(ir.AccordionElement)
def render_accordion(accordion: ir.AccordionElement, out: JsxWriter) -> None:
    root = Props().class_name(format_style(accordion.style)).flag("multiple", accordion.multiple)
    with out.block(open_tag("Accordion.Root", root), "</Accordion.Root>"):
        for index, item in enumerate(accordion.items):
            with out.block(f'<Accordion.Item value="item-{index}">', "</Accordion.Item>"):
                with out.block("<Accordion.Header>", "</Accordion.Header>"):
                    with out.block("<Accordion.Trigger>", "</Accordion.Trigger>"):
                        if item.icon:
                            out.line(element("span", item.icon, Props().text("className", "mr-2")))
                        out.line(item.title)
                with out.block("<Accordion.Panel>", "</Accordion.Panel>"):
                    out.line(item.content)
