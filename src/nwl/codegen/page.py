"""
Page component generation.

Lowers one Page to a React function component: imports, one combined
`useState` declaration line, and the rendered element tree.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from ..core import ir
from ..core.analysis import StateReference, implicit_state, undeclared_references
from ..core.naming import Binding, component_name
from .elements import render_children
from .emitter import JsxWriter
from .props import Props, format_style, js_string, open_tag

logger = logging.getLogger(__name__)

COMPONENT_LIBRARY = "@base-ui/react"
COMPONENT_IMPORTS = (
    "Button",
    "Checkbox",
    "Select",
    "Radio",
    "RadioGroup",
    "Switch",
    "Separator",
    "NumberField",
    "Dialog",
    "Menu",
    "Accordion",
    "Form",
    "Field",
    "Fieldset",
    "Tooltip",
    "Popover",
)


def to_js_literal(value: Any) -> str:
    """
    Serialize a YAML scalar or collection as a JavaScript literal.

    Examples:
        >>> to_js_literal(0)
        '0'
        >>> to_js_literal([1, "a", None])
        '[1, "a", null]'
    """
    if value is None:
        return "null"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return repr(value)
    if isinstance(value, str):
        return js_string(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(to_js_literal(item) for item in value) + "]"
    if isinstance(value, dict):
        entries = (f"{js_string(str(key))}: {to_js_literal(item)}" for key, item in value.items())
        return "{" + ", ".join(entries) + "}"
    return js_string(str(value))


def state_hooks(page: ir.Page) -> list[str]:
    """Hook declarators, implicit state first, then declared state in order."""
    hooks = [Binding(state.name).hook(to_js_literal(state.initial)) for state in implicit_state(page)]
    hooks.extend(Binding(state.name).hook(to_js_literal(state.initial)) for state in page.state)
    return hooks


def import_lines(has_hooks: bool) -> list[str]:
    react = "import React, { useState } from 'react';" if has_hooks else "import React from 'react';"
    return [
        react,
        "import {",
        *(f"  {name}," for name in COMPONENT_IMPORTS),
        f"}} from '{COMPONENT_LIBRARY}';",
    ]


class PageGenerator:
    """
    Generates the component module for one page.

    Bind references that name undeclared state are reported through
    `warnings` and logged; the component is still generated.
    """

    def __init__(self, page: ir.Page):
        self.page = page
        self.component = component_name(page.name)
        self.warnings: list[str] = []

    def _check_references(self) -> None:
        for ref in undeclared_references(self.page):
            self.warnings.append(self._describe(ref))
            logger.warning(self.warnings[-1])

    def _describe(self, ref: StateReference) -> str:
        return (
            f"Page '{self.page.name}': {ref.element} {ref.attribute} "
            f"'{ref.name}' does not name a declared state field"
        )

    def generate(self) -> str:
        """
        Generate component source.

        Raises:
            UnsupportedElement: A child element has no renderer.
        """
        self._check_references()
        hooks = state_hooks(self.page)

        out = JsxWriter()
        out.lines(*import_lines(bool(hooks)))
        out.line()
        with out.block(f"export default function {self.component}() {{", "}"):
            if hooks:
                out.line(f"const {', '.join(hooks)};")
                out.line()
            with out.block("return (", ");"):
                with out.block("<>", "</>"):
                    self._render_body(out)

        logger.debug("Generated component %s", self.component)
        return out.render() + "\n"

    def _render_body(self, out: JsxWriter) -> None:
        if self.page.layout is None:
            render_children(self.page.children, out)
            return
        wrapper = Props().class_name(
            format_style(self.page.style), format_style(self.page.layout.classes())
        )
        with out.block(open_tag("div", wrapper), "</div>"):
            render_children(self.page.children, out)


def generate_page(page: ir.Page) -> str:
    """Generate the component module for `page`."""
    return PageGenerator(page).generate()
