"""
Renderers for overlay elements: dialogs, tooltips, popovers.

An overlay with `open` is controlled by that state field; without it the
overlay manages its own visibility.
"""

from __future__ import annotations

from ...core import ir
from ..emitter import JsxWriter
from ..props import Props, arrow, binding_of, element, format_style, open_tag, tag
from .registry import render_children, renders


def _open_props(open_state: str | None) -> Props:
    props = Props()
    binding = binding_of(open_state)
    if binding:
        props.expr("open", binding.accessor)
        props.expr("onOpenChange", arrow("open", binding.set("open")))
    return props


def _positioner(component: str, side: str | None) -> str:
    return open_tag(f"{component}.Positioner", Props().text("side", side).expr("sideOffset", 8))


@renders(ir.DialogElement)
def render_dialog(dialog: ir.DialogElement, out: JsxWriter) -> None:
    with out.block(open_tag("Dialog.Root", _open_props(dialog.open)), "</Dialog.Root>"):
        if dialog.open is None:
            with out.block("<Dialog.Trigger asChild>", "</Dialog.Trigger>"):
                out.line(element("Button", "Open dialog", Props().text("className", "Button")))
        with out.block("<Dialog.Portal>", "</Dialog.Portal>"):
            out.line(tag("Dialog.Backdrop", Props().text("className", "Dialog-backdrop")))
            popup = Props().class_name("Dialog-popup", format_style(dialog.style))
            with out.block(open_tag("Dialog.Popup", popup), "</Dialog.Popup>"):
                if dialog.title:
                    out.line(element("Dialog.Title", dialog.title, Props().text("className", "Dialog-title")))
                render_children(dialog.children, out)
                if dialog.on_close:
                    close = Props().text("className", "Dialog-close")
                    close.expr("onClick", arrow("", dialog.on_close))
                    with out.block(open_tag("Dialog.Close", close), "</Dialog.Close>"):
                        out.line(element("span", "Close", Props().text("className", "sr-only")))


@renders(ir.TooltipElement)
def render_tooltip(tooltip: ir.TooltipElement, out: JsxWriter) -> None:
    with out.block("<Tooltip.Provider>", "</Tooltip.Provider>"):
        with out.block(open_tag("Tooltip.Root", _open_props(tooltip.open)), "</Tooltip.Root>"):
            if tooltip.trigger:
                with out.block("<Tooltip.Trigger>", "</Tooltip.Trigger>"):
                    out.line(tooltip.trigger)
            with out.block("<Tooltip.Portal>", "</Tooltip.Portal>"):
                with out.block(_positioner("Tooltip", tooltip.side), "</Tooltip.Positioner>"):
                    popup = Props().class_name("Tooltip-popup", format_style(tooltip.style))
                    with out.block(open_tag("Tooltip.Popup", popup), "</Tooltip.Popup>"):
                        out.line(tooltip.content)


@renders(ir.PopoverElement)
def render_popover(popover: ir.PopoverElement, out: JsxWriter) -> None:
    with out.block(open_tag("Popover.Root", _open_props(popover.open)), "</Popover.Root>"):
        if popover.trigger:
            with out.block("<Popover.Trigger>", "</Popover.Trigger>"):
                out.line(popover.trigger)
        with out.block("<Popover.Portal>", "</Popover.Portal>"):
            with out.block(_positioner("Popover", popover.side), "</Popover.Positioner>"):
                popup = Props().class_name("Popover-popup", format_style(popover.style))
                with out.block(open_tag("Popover.Popup", popup), "</Popover.Popup>"):
                    if popover.title:
                        out.line(
                            element("Popover.Title", popover.title, Props().text("className", "Popover-title"))
                        )
                    out.line(popover.content)
