"""
JSX code generation for NWL pages and projects.
"""

from .base import (
    ComponentGenerator,
    Generator,
    GeneratorResult,
    RouterGenerator,
    StylesheetGenerator,
)
from .elements import generate_element
from .page import PageGenerator, generate_page, to_js_literal
from .router import RouteEntry, generate_router

__all__ = [
    "ComponentGenerator",
    "Generator",
    "GeneratorResult",
    "PageGenerator",
    "RouteEntry",
    "RouterGenerator",
    "StylesheetGenerator",
    "generate_element",
    "generate_page",
    "generate_router",
    "to_js_literal",
]
