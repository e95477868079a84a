"""Tests for page component generation."""

from __future__ import annotations

import logging
import math

import pytest
from pydantic import ValidationError

from nwl.codegen import PageGenerator, generate_page, to_js_literal
from nwl.codegen.page import COMPONENT_IMPORTS, state_hooks
from nwl.core import ir
from nwl.core.errors import UnsupportedElement
from nwl.core.loader import parse_page


class TestJsLiteral:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (0, "0"),
            (2.5, "2.5"),
            ("", '""'),
            ('say "hi"', '"say \\"hi\\""'),
            ([1, "a", None], '[1, "a", null]'),
            ({"x": 1, "y": [True]}, '{"x": 1, "y": [true]}'),
        ],
    )
    def test_literals(self, value, expected: str) -> None:
        assert to_js_literal(value) == expected

    def test_non_finite(self) -> None:
        assert to_js_literal(math.inf) == "Infinity"
        assert to_js_literal(math.nan) == "NaN"


class TestStateHooks:
    def test_declared_order(self) -> None:
        page = ir.Page.model_validate(
            {"name": "p", "state": [{"name": "count", "initial": 0}, {"name": "user_name", "initial": ""}]}
        )
        assert state_hooks(page) == [
            "[count, setCount] = useState(0)",
            '[userName, setUserName] = useState("")',
        ]

    def test_menu_state_first(self) -> None:
        page = ir.Page.model_validate(
            {
                "name": "p",
                "state": [{"name": "count", "initial": 0}],
                "children": [{"element": "navigation-menu", "hamburger": True}],
            }
        )
        assert state_hooks(page)[0] == "[menuOpen, setMenuOpen] = useState(false)"

    def test_declared_menu_state_wins(self) -> None:
        page = ir.Page.model_validate(
            {
                "name": "p",
                "state": [{"name": "menu_open", "initial": True}],
                "children": [{"element": "navigation-menu", "hamburger": True}],
            }
        )
        assert state_hooks(page) == ["[menuOpen, setMenuOpen] = useState(true)"]

    def test_declared_menu_state_renders_one_hook(self) -> None:
        page = ir.Page.model_validate(
            {
                "name": "p",
                "state": [{"name": "menuOpen", "initial": True}],
                "children": [{"element": "navigation-menu", "hamburger": True}],
            }
        )
        source = generate_page(page)
        assert source.count("setMenuOpen] = useState(") == 1
        assert "const [menuOpen, setMenuOpen] = useState(true);" in source

    def test_state_names_sharing_an_accessor_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate state name: firstName"):
            ir.Page.model_validate(
                {"name": "p", "state": [{"name": "first_name"}, {"name": "firstName"}]}
            )

    def test_missing_initial_is_null(self) -> None:
        page = ir.Page.model_validate({"name": "p", "state": [{"name": "user"}]})
        assert state_hooks(page) == ["[user, setUser] = useState(null)"]


class TestPageGenerator:
    def test_home_page(self, home_page: ir.Page) -> None:
        source = generate_page(home_page)
        expected_imports = "\n".join(f"  {name}," for name in COMPONENT_IMPORTS)
        assert source == (
            "import React from 'react';\n"
            "import {\n"
            f"{expected_imports}\n"
            "} from '@base-ui/react';\n"
            "\n"
            "export default function Home() {\n"
            "  return (\n"
            "    <>\n"
            "      <h1>Hi</h1>\n"
            '      <Button className="Button" onClick={() => doThing()}>Go</Button>\n'
            "    </>\n"
            "  );\n"
            "}\n"
        )

    def test_no_use_state_without_state(self, home_page: ir.Page) -> None:
        assert "useState" not in generate_page(home_page)

    def test_state_declaration(self) -> None:
        page = ir.Page.model_validate({"name": "counter", "state": [{"name": "count", "initial": 0}]})
        source = generate_page(page)
        assert "import React, { useState } from 'react';" in source
        assert "  const [count, setCount] = useState(0);\n\n  return (" in source
        assert "export default function Counter() {" in source

    def test_binding_uses_mutator(self, about_page_yaml: str) -> None:
        source = generate_page(parse_page(about_page_yaml))
        assert "export default function AboutUs() {" in source
        assert 'const [email, setEmail] = useState("");' in source
        assert "onChange={(e) => setEmail(e.target.value)}" in source

    def test_layout_wrapper(self) -> None:
        page = ir.Page.model_validate(
            {
                "name": "p",
                "layout": {"type": "column"},
                "style": ["p-8"],
                "children": [{"element": "text", "content": "x"}],
            }
        )
        source = generate_page(page)
        assert '      <div className="p-8 flex flex-col">\n        <p>x</p>\n      </div>\n' in source

    def test_undeclared_binding_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        page = ir.Page.model_validate({"name": "p", "children": [{"element": "input", "bind": "ghost"}]})
        generator = PageGenerator(page)
        with caplog.at_level(logging.WARNING, logger="nwl.codegen.page"):
            source = generator.generate()
        assert "value={ghost}" in source
        assert generator.warnings == ["Page 'p': input bind 'ghost' does not name a declared state field"]
        assert "ghost" in caplog.text

    def test_undeclared_validation_field_warns(self) -> None:
        page = ir.Page.model_validate(
            {
                "name": "p",
                "state": [{"name": "username", "initial": ""}],
                "children": [
                    {
                        "element": "form",
                        "validation": {"username": [{"required": True}], "pasword": [{"required": True}]},
                    }
                ],
            }
        )
        generator = PageGenerator(page)
        generator.generate()
        assert generator.warnings == [
            "Page 'p': form validation 'pasword' does not name a declared state field"
        ]

    def test_unsupported_child(self) -> None:
        class Marquee(ir.ElementBase):
            element: str = "marquee"

        page = ir.Page.model_construct(name="p", children=[Marquee()], state=[], layout=None, style=[])
        with pytest.raises(UnsupportedElement):
            generate_page(page)
