"""Tests for tabs, accordions, overlays, and navigation renderers."""

from __future__ import annotations

import pytest

from nwl.codegen.elements.navigation import breakpoint_prefix


class TestTabs:
    def test_bound_tabs(self, render) -> None:
        jsx = render(
            {
                "element": "tabs",
                "bind": "tab",
                "options": [{"id": "a", "label": "A"}, {"id": "b"}],
            }
        )
        lines = jsx.splitlines()
        assert lines[1] == '  <nav className="flex space-x-8" role="tablist">'
        assert lines[2] == (
            "    <label className={`cursor-pointer whitespace-nowrap py-4 px-1 border-b-2 "
            '${tab === "a" ? "border-blue-500 text-blue-600" : "border-transparent text-gray-500"}`}>'
        )
        assert lines[3] == (
            '      <input type="radio" name="tab" value="a" className="sr-only" '
            'checked={tab === "a"} onChange={() => setTab("a")} />'
        )
        assert lines[4] == "      A"
        assert "      b" in lines

    def test_unbound_first_tab_active(self, render) -> None:
        jsx = render({"element": "tabs", "options": [{"id": "a"}, {"id": "b"}]})
        assert jsx.count("defaultChecked") == 1
        assert 'name="tabs"' in jsx
        assert (
            '<label className="cursor-pointer whitespace-nowrap py-4 px-1 border-b-2 '
            'border-blue-500 text-blue-600">'
        ) in jsx

    def test_tab_icon(self, render) -> None:
        jsx = render({"element": "tabs", "options": [{"id": "a", "icon": "*"}]})
        assert '<span className="mr-2">*</span>' in jsx


class TestAccordion:
    def test_items(self, render) -> None:
        jsx = render(
            {
                "element": "accordion",
                "multiple": True,
                "items": [{"title": "Q1", "content": "A1"}, {"title": "Q2", "content": "A2"}],
            }
        )
        lines = jsx.splitlines()
        assert lines[0] == "<Accordion.Root multiple>"
        assert lines[1] == '  <Accordion.Item value="item-0">'
        assert "        Q1" in lines
        assert "      A1" in lines
        assert '  <Accordion.Item value="item-1">' in lines


class TestOverlays:
    def test_controlled_dialog(self, render) -> None:
        jsx = render(
            {"element": "dialog", "open": "showDialog", "title": "Confirm", "onClose": "cancel()"}
        )
        assert jsx.splitlines() == [
            "<Dialog.Root open={showDialog} onOpenChange={(open) => setShowDialog(open)}>",
            "  <Dialog.Portal>",
            '    <Dialog.Backdrop className="Dialog-backdrop" />',
            '    <Dialog.Popup className="Dialog-popup">',
            '      <Dialog.Title className="Dialog-title">Confirm</Dialog.Title>',
            '      <Dialog.Close className="Dialog-close" onClick={() => cancel()}>',
            '        <span className="sr-only">Close</span>',
            "      </Dialog.Close>",
            "    </Dialog.Popup>",
            "  </Dialog.Portal>",
            "</Dialog.Root>",
        ]

    def test_modal_alias_uncontrolled(self, render) -> None:
        jsx = render({"element": "modal", "children": [{"element": "text", "content": "Body"}]})
        assert jsx.splitlines()[:3] == [
            "<Dialog.Root>",
            "  <Dialog.Trigger asChild>",
            '    <Button className="Button">Open dialog</Button>',
        ]
        assert "      <p>Body</p>" in jsx.splitlines()

    def test_tooltip_side(self, render) -> None:
        jsx = render({"element": "tooltip", "content": "Help", "trigger": "?", "side": "top"})
        assert '<Tooltip.Positioner side="top" sideOffset={8}>' in jsx
        assert '<Tooltip.Popup className="Tooltip-popup">' in jsx

    def test_popover_title(self, render) -> None:
        jsx = render({"element": "popover", "content": "Body", "title": "Info", "open": "pop"})
        assert "<Popover.Root open={pop} onOpenChange={(open) => setPop(open)}>" in jsx
        assert '<Popover.Title className="Popover-title">Info</Popover.Title>' in jsx
        assert "<Popover.Positioner sideOffset={8}>" in jsx


class TestNavigation:
    @pytest.mark.parametrize(
        "width, prefix",
        [(None, "md"), (500, "sm"), (640, "sm"), (768, "md"), (900, "lg"), (1280, "xl")],
    )
    def test_breakpoint_prefix(self, width: int | None, prefix: str) -> None:
        assert breakpoint_prefix(width) == prefix

    def test_nav(self, render) -> None:
        jsx = render(
            {
                "element": "nav",
                "sticky": True,
                "logo": "Acme",
                "links": [{"label": "Home", "href": "/", "active": True}],
            }
        )
        lines = jsx.splitlines()
        assert lines[0] == '<nav className="flex items-center justify-between px-6 py-4 sticky top-0 z-50 bg-black">'
        assert '<a href="/" className="text-xl font-bold text-white">Acme</a>' in jsx
        assert 'className="text-sm font-medium transition-colors text-blue-400" aria-current="page">Home</a>' in jsx

    def test_menu_without_hamburger(self, render) -> None:
        jsx = render({"element": "navigation-menu", "items": [{"label": "Docs", "href": "/docs"}]})
        assert '<div className="flex gap-4">' in jsx
        assert "Menu.Root" not in jsx
        assert "menuOpen" not in jsx

    def test_hamburger_menu(self, render) -> None:
        jsx = render(
            {
                "element": "navigation-menu",
                "hamburger": True,
                "mobileBreakpoint": 1024,
                "items": [{"label": "Docs", "href": "/docs"}],
            }
        )
        assert '<div className="hidden lg:flex gap-4">' in jsx
        assert (
            '<Button className="Button lg:hidden" aria-label="Toggle menu" '
            "onClick={() => setMenuOpen(!menuOpen)}>"
        ) in jsx
        assert "<Menu.Root open={menuOpen} onOpenChange={(open) => setMenuOpen(open)}>" in jsx
        assert "onClick={() => setMenuOpen(false)}>Docs</a>" in jsx
