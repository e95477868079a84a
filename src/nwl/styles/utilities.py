"""
Utility-class to CSS declaration table.

Only classes listed here are folded into the processed stylesheet; any
other utility class is left for the runtime utility engine.
"""

from __future__ import annotations

Declaration = tuple[str, str]

_FONT_SIZES = {
    "text-xs": "0.75rem",
    "text-sm": "0.875rem",
    "text-base": "1rem",
    "text-lg": "1.125rem",
    "text-xl": "1.25rem",
    "text-2xl": "1.5rem",
    "text-3xl": "1.875rem",
    "text-4xl": "2.25rem",
    "text-5xl": "3rem",
}

_FONT_WEIGHTS = {
    "font-normal": "400",
    "font-medium": "500",
    "font-semibold": "600",
    "font-bold": "700",
}

_TEXT_COLORS = {
    "text-white": "#ffffff",
    "text-black": "#000000",
    "text-gray-300": "#d1d5db",
    "text-gray-400": "#9ca3af",
    "text-gray-500": "#6b7280",
    "text-gray-600": "#4b5563",
    "text-gray-700": "#374151",
    "text-gray-900": "#111827",
    "text-blue-400": "#60a5fa",
    "text-blue-500": "#3b82f6",
    "text-blue-600": "#2563eb",
    "text-cyan-400": "#22d3ee",
    "text-orange-500": "#f97316",
    "text-green-400": "#4ade80",
    "text-green-600": "#16a34a",
    "text-red-500": "#ef4444",
    "text-red-600": "#dc2626",
    "text-yellow-400": "#facc15",
}

_BACKGROUNDS = {
    "bg-transparent": "transparent",
    "bg-white": "#ffffff",
    "bg-black": "#000000",
    "bg-gray-50": "#f9fafb",
    "bg-gray-100": "#f3f4f6",
    "bg-gray-200": "#e5e7eb",
    "bg-gray-800": "#1f2937",
    "bg-gray-900": "#111827",
    "bg-blue-500": "#3b82f6",
    "bg-blue-600": "#2563eb",
    "bg-blue-700": "#1d4ed8",
    "bg-green-400": "#4ade80",
    "bg-green-500": "#22c55e",
    "bg-red-500": "#ef4444",
}

# Spacing scale step -> rem
_SPACING = {
    "0": "0",
    "1": "0.25rem",
    "2": "0.5rem",
    "3": "0.75rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "8": "2rem",
    "10": "2.5rem",
    "12": "3rem",
    "16": "4rem",
    "20": "5rem",
}

_SPACING_SIDES: dict[str, tuple[str, ...]] = {
    "": ("",),
    "x": ("-left", "-right"),
    "y": ("-top", "-bottom"),
    "t": ("-top",),
    "b": ("-bottom",),
    "l": ("-left",),
    "r": ("-right",),
}

_LAYOUT: dict[str, tuple[Declaration, ...]] = {
    "block": (("display", "block"),),
    "inline-block": (("display", "inline-block"),),
    "hidden": (("display", "none"),),
    "flex": (("display", "flex"),),
    "inline-flex": (("display", "inline-flex"),),
    "grid": (("display", "grid"),),
    "flex-row": (("flex-direction", "row"),),
    "flex-col": (("flex-direction", "column"),),
    "flex-wrap": (("flex-wrap", "wrap"),),
    "flex-1": (("flex", "1 1 0%"),),
    "items-center": (("align-items", "center"),),
    "items-start": (("align-items", "flex-start"),),
    "items-end": (("align-items", "flex-end"),),
    "justify-center": (("justify-content", "center"),),
    "justify-between": (("justify-content", "space-between"),),
    "justify-end": (("justify-content", "flex-end"),),
    "text-center": (("text-align", "center"),),
    "text-left": (("text-align", "left"),),
    "text-right": (("text-align", "right"),),
    "mx-auto": (("margin-left", "auto"), ("margin-right", "auto")),
    "border": (("border-width", "1px"),),
    "border-2": (("border-width", "2px"),),
    "rounded": (("border-radius", "0.25rem"),),
    "rounded-md": (("border-radius", "0.375rem"),),
    "rounded-lg": (("border-radius", "0.5rem"),),
    "rounded-xl": (("border-radius", "0.75rem"),),
    "rounded-full": (("border-radius", "9999px"),),
    "w-5": (("width", "1.25rem"),),
    "h-5": (("height", "1.25rem"),),
    "w-full": (("width", "100%"),),
    "h-full": (("height", "100%"),),
    "min-w-280": (("min-width", "70rem"),),
    "max-w-md": (("max-width", "28rem"),),
    "max-w-2xl": (("max-width", "42rem"),),
    "max-w-4xl": (("max-width", "56rem"),),
    "shadow": (("box-shadow", "0 1px 3px 0 rgb(0 0 0 / 0.1)"),),
    "shadow-lg": (("box-shadow", "0 10px 15px -3px rgb(0 0 0 / 0.1)"),),
    "cursor-pointer": (("cursor", "pointer"),),
    "overflow-hidden": (("overflow", "hidden"),),
    "underline": (("text-decoration", "underline"),),
    "text-decoration-none": (("text-decoration", "none"),),
}


def _build_table() -> dict[str, tuple[Declaration, ...]]:
    table: dict[str, tuple[Declaration, ...]] = {}
    table.update({name: (("font-size", size),) for name, size in _FONT_SIZES.items()})
    table.update({name: (("font-weight", weight),) for name, weight in _FONT_WEIGHTS.items()})
    table.update({name: (("color", color),) for name, color in _TEXT_COLORS.items()})
    table.update({name: (("background-color", color),) for name, color in _BACKGROUNDS.items()})
    for prefix, box in (("p", "padding"), ("m", "margin")):
        for side, suffixes in _SPACING_SIDES.items():
            for step, size in _SPACING.items():
                table[f"{prefix}{side}-{step}"] = tuple((f"{box}{suffix}", size) for suffix in suffixes)
    for step, size in _SPACING.items():
        table[f"gap-{step}"] = (("gap", size),)
    table.update(_LAYOUT)
    return table


UTILITY_CLASSES: dict[str, tuple[Declaration, ...]] = _build_table()


def resolve_utility(name: str) -> tuple[Declaration, ...]:
    """
    CSS declarations for a utility class; empty for unknown classes.

    Examples:
        >>> resolve_utility("text-xl")
        (('font-size', '1.25rem'),)
        >>> resolve_utility("px-4")
        (('padding-left', '1rem'), ('padding-right', '1rem'))
    """
    return UTILITY_CLASSES.get(name, ())
