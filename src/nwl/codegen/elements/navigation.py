"""
Renderers for site navigation bars.
"""

from __future__ import annotations

from ...core import ir
from ...core.analysis import MENU_STATE
from ...core.naming import Binding
from ..emitter import JsxWriter
from ..props import Props, element, format_style, open_tag
from .registry import renders

DEFAULT_BREAKPOINT = "md"
BREAKPOINTS = ((640, "sm"), (768, "md"), (1024, "lg"))

HAMBURGER_ICON = (
    '<svg className="w-5 h-5" fill="none" stroke="currentColor" viewBox="0 0 24 24" '
    'strokeWidth="2" strokeLinecap="round" strokeLinejoin="round">'
    '<path d="M4 6h16M4 12h16M4 18h16"></path></svg>'
)


def breakpoint_prefix(width: int | None) -> str:
    """Responsive prefix for a pixel breakpoint: <=640 sm, <=768 md, <=1024 lg, else xl."""
    if width is None:
        return DEFAULT_BREAKPOINT
    for limit, prefix in BREAKPOINTS:
        if width <= limit:
            return prefix
    return "xl"


@renders(ir.NavElement)
def render_nav(nav: ir.NavElement, out: JsxWriter) -> None:
    props = Props().class_name(
        format_style(nav.style),
        "flex items-center justify-between px-6 py-4",
        "sticky top-0 z-50" if nav.sticky else None,
        "bg-transparent" if nav.transparent else "bg-black",
    )
    with out.block(open_tag("nav", props), "</nav>"):
        if nav.logo:
            logo = Props().text("href", "/").text("className", "text-xl font-bold text-white")
            out.line(element("a", nav.logo, logo))
        with out.block('<div className="flex items-center gap-6">', "</div>"):
            for link in nav.links:
                state = "text-blue-400" if link.active else "text-white hover:text-blue-400"
                props = Props().text("href", link.href).text(
                    "className", f"text-sm font-medium transition-colors {state}"
                )
                props.text("aria-current", "page" if link.active else None)
                out.line(element("a", link.label, props))


@renders(ir.NavigationMenuElement)
def render_navigation_menu(menu: ir.NavigationMenuElement, out: JsxWriter) -> None:
    """
    Navigation bar with an optional collapsible mobile menu.

    With `hamburger`, links hide below the breakpoint and a toggle button
    opens a menu driven by the page's implicit `menuOpen` state.
    """
    prefix = breakpoint_prefix(menu.mobile_breakpoint)
    menu_state = Binding(MENU_STATE)
    wrapper = Props().class_name("NavigationMenu", format_style(menu.style))
    with out.block(open_tag("div", wrapper), "</div>"):
        nav = (
            '<nav className="NavigationMenu-nav flex items-center justify-between px-6 py-4 '
            'bg-gray-900 border-b border-gray-700">'
        )
        with out.block(nav, "</nav>"):
            links_class = f"hidden {prefix}:flex gap-4" if menu.hamburger else "flex gap-4"
            with out.block(open_tag("div", Props().text("className", links_class)), "</div>"):
                for link in menu.items:
                    props = Props().text("href", link.href or "#").text("className", "NavigationMenu-link")
                    out.line(element("a", link.label, props))
            if menu.hamburger:
                toggle = Props().text("className", f"Button {prefix}:hidden").text("aria-label", "Toggle menu")
                toggle.expr("onClick", f"() => {menu_state.set(f'!{menu_state.accessor}')}")
                with out.block(open_tag("Button", toggle), "</Button>"):
                    out.line(HAMBURGER_ICON)
        if menu.hamburger:
            _render_mobile_menu(menu, menu_state, out)


def _render_mobile_menu(menu: ir.NavigationMenuElement, state: Binding, out: JsxWriter) -> None:
    root = Props().expr("open", state.accessor).expr("onOpenChange", f"(open) => {state.set('open')}")
    popup = Props().class_name(
        "Popover-popup min-w-[200px] p-1 bg-white border rounded-lg shadow-lg",
        format_style(menu.mobile_style),
    )
    with out.block(open_tag("Menu.Root", root), "</Menu.Root>"):
        with out.block("<Menu.Portal>", "</Menu.Portal>"):
            with out.block('<Menu.Positioner sideOffset={8} className="z-50">', "</Menu.Positioner>"):
                with out.block(open_tag("Menu.Popup", popup), "</Menu.Popup>"):
                    out.line('<Menu.Arrow className="fill-white" />')
                    for index, link in enumerate(menu.items):
                        with out.block(f"<Menu.Item key={{{index}}} asChild>", "</Menu.Item>"):
                            anchor = Props().text("href", link.href).text(
                                "className",
                                "flex items-center px-3 py-2 text-sm text-gray-700 "
                                "hover:bg-gray-100 rounded cursor-pointer",
                            )
                            anchor.expr("onClick", f"() => {state.set('false')}")
                            out.line(element("a", link.label, anchor))
