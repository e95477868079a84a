"""Tests for element renderer registration and dispatch."""

from __future__ import annotations

import pytest

from nwl.codegen.elements import (
    element_union_members,
    generate_element,
    registered_types,
    render_element,
)
from nwl.codegen.elements.registry import renders
from nwl.codegen.emitter import JsxWriter
from nwl.core import ir
from nwl.core.errors import CodegenError, UnsupportedElement


class MarqueeElement(ir.ElementBase):
    element: str = "marquee"


class TestRegistry:
    def test_every_union_member_has_a_renderer(self) -> None:
        missing = element_union_members() - registered_types()
        assert not missing, sorted(cls.__name__ for cls in missing)

    def test_union_covers_all_kinds(self) -> None:
        assert len(element_union_members()) == 46

    def test_duplicate_registration_rejected(self) -> None:
        with pytest.raises(ValueError, match="already registered"):
            renders(ir.HeadingElement)(lambda element, out: None)


class TestDispatch:
    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(UnsupportedElement, match="Unsupported element type: marquee") as exc_info:
            generate_element(MarqueeElement())
        assert exc_info.value.kind == "marquee"
        assert isinstance(exc_info.value, CodegenError)

    def test_failure_leaves_no_partial_output(self) -> None:
        card = ir.CardElement.model_construct(
            children=[ir.HeadingElement(content="kept out"), MarqueeElement()]
        )
        out = JsxWriter()
        out.line("<main>")
        with pytest.raises(UnsupportedElement):
            render_element(card, out)
        assert out.render() == "<main>"
