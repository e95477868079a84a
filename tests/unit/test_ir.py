"""Tests for the NWL document model."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from nwl.core import ir

element_adapter: TypeAdapter[ir.Element] = TypeAdapter(ir.Element)


class TestElementUnion:
    def test_discriminates_on_element_tag(self) -> None:
        element = element_adapter.validate_python({"element": "badge", "content": "New"})
        assert isinstance(element, ir.BadgeElement)

    def test_modal_is_a_dialog(self) -> None:
        element = element_adapter.validate_python({"element": "modal", "title": "Confirm"})
        assert isinstance(element, ir.DialogElement)
        assert element.element == "modal"

    def test_unknown_tag_rejected(self) -> None:
        with pytest.raises(ValidationError):
            element_adapter.validate_python({"element": "marquee", "content": "x"})

    def test_camel_case_keys(self) -> None:
        element = element_adapter.validate_python(
            {"element": "pagination", "perPage": 20, "onChange": "load(page)"}
        )
        assert element.per_page == 20
        assert element.on_change == "load(page)"

    def test_snake_case_keys_accepted(self) -> None:
        element = element_adapter.validate_python({"element": "button", "content": "Go", "on_click": "go()"})
        assert element.on_click == "go()"

    def test_nested_children(self) -> None:
        card = element_adapter.validate_python(
            {
                "element": "card",
                "children": [{"element": "container", "children": [{"element": "text", "content": "x"}]}],
            }
        )
        assert isinstance(card.children[0], ir.ContainerElement)
        assert isinstance(card.children[0].children[0], ir.TextElement)

    def test_tab_value_written_as_id(self) -> None:
        tabs = element_adapter.validate_python(
            {"element": "tabs", "options": [{"id": "one", "label": "One"}, {"id": "two"}]}
        )
        assert [tab.value for tab in tabs.options] == ["one", "two"]
        assert tabs.options[1].display == "two"

    def test_elements_are_frozen(self) -> None:
        heading = ir.HeadingElement(content="Hi")
        with pytest.raises(ValidationError):
            heading.content = "Bye"

    def test_rating_defaults_to_five_stars(self) -> None:
        assert ir.RatingElement().max == 5

    def test_negative_min_length_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ir.ValidationRule(min_length=-1)


class TestLayout:
    def test_grid_classes(self) -> None:
        layout = ir.Layout(type="grid", columns=3, properties=["gap-4"])
        assert layout.classes() == ["grid", "grid-cols-3", "gap-4"]

    def test_columns_ignored_outside_grid(self) -> None:
        layout = ir.Layout(type="row", columns=3)
        assert layout.classes() == ["flex flex-row"]

    @pytest.mark.parametrize(
        "layout_type, expected",
        [("column", "flex flex-col"), ("row", "flex flex-row"), ("stack", "relative"), ("grid", "grid")],
    )
    def test_base_classes(self, layout_type: str, expected: str) -> None:
        assert ir.Layout(type=layout_type).classes()[0] == expected

    def test_columns_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ir.Layout(type="grid", columns=0)


class TestPage:
    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ir.Page(name="  ")

    def test_duplicate_state_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate state name"):
            ir.Page(name="p", state=[ir.StateDefinition(name="a"), ir.StateDefinition(name="a")])

    def test_state_type_alias(self) -> None:
        state = ir.StateDefinition.model_validate({"name": "count", "type": "number", "initial": 0})
        assert state.value_type == "number"
        assert state.initial == 0

    def test_theme_keys_in_either_spelling(self) -> None:
        page = ir.Page.model_validate({"name": "p", "css_theme": "dark", "cssOverride": "extra.css"})
        assert page.css_theme == "dark"
        assert page.css_override == "extra.css"


class TestProjectConfig:
    def test_defaults(self) -> None:
        config = ir.ProjectConfig(name="demo")
        assert config.routes == []
        assert config.src_dir == "src"
        assert config.themes_dir == "themes"
        assert not config.has_stylesheet

    def test_has_stylesheet_with_override_only(self) -> None:
        assert ir.ProjectConfig(name="demo", css_override="default").has_stylesheet
