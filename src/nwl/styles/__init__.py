"""
Stylesheet resolution for NWL projects.
"""

from .collect import STRUCTURAL_SELECTORS, collect_inline_styles
from .css import (
    PRECEDENCE,
    CssRule,
    ProcessedCss,
    merge_rules,
    parse_css,
    resolve,
    resolve_styles,
)
from .utilities import UTILITY_CLASSES, resolve_utility

__all__ = [
    "PRECEDENCE",
    "STRUCTURAL_SELECTORS",
    "UTILITY_CLASSES",
    "CssRule",
    "ProcessedCss",
    "collect_inline_styles",
    "merge_rules",
    "parse_css",
    "resolve",
    "resolve_styles",
    "resolve_utility",
]
