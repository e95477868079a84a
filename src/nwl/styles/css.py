"""
Stylesheet resolution: base theme, override theme, inline utility styles.

Rules are merged property by property in `PRECEDENCE` order, lowest
first. The parser handles the flat subset of CSS the themes use: one
selector per block and `property: value;` declarations. At-rules other
than top-level `@import` are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .utilities import resolve_utility

logger = logging.getLogger(__name__)

# Lowest to highest
PRECEDENCE = ("Base Theme", "Override Theme", "YAML Inline Styles")

BANNER = (
    "/* Processed CSS - Generated by NWL Compiler */\n"
    f"/* Precedence: {' < '.join(PRECEDENCE)} */\n"
)

DEFAULT_THEME = "default"
DEFAULT_OVERRIDE_FILE = "theme.override.css"
DEFAULT_THEME_PATH = Path(__file__).parent / "themes" / "default.css"


def selector_key(selector: str) -> tuple[str, str]:
    """
    Normalized merge key: (selector before the first `:`, pseudo part).

    Whitespace around either part is ignored, so `.Button` and `.Button `
    collide while `.Button` and `.Button:hover` stay distinct.
    """
    base, _, pseudo = selector.partition(":")
    return base.strip(), pseudo.strip()


@dataclass
class CssRule:
    selector: str
    properties: dict[str, str] = field(default_factory=dict)

    @property
    def is_pseudo(self) -> bool:
        return ":" in self.selector

    @property
    def key(self) -> tuple[str, str]:
        return selector_key(self.selector)

    def render(self) -> str:
        declarations = "".join(f"  {name}: {value};\n" for name, value in self.properties.items())
        return f"{self.selector} {{\n{declarations}}}\n"


@dataclass
class ProcessedCss:
    """Resolved stylesheet: `@import` lines, then rules in output order."""

    rules: list[CssRule] = field(default_factory=list)
    import_statements: list[str] = field(default_factory=list)

    def get(self, selector: str) -> CssRule | None:
        key = selector_key(selector)
        return next((rule for rule in self.rules if rule.key == key), None)

    def render(self) -> str:
        parts = [BANNER, "\n"]
        if self.import_statements:
            parts.append("".join(f"{statement}\n" for statement in self.import_statements))
            parts.append("\n")
        parts.extend(f"{rule.render()}\n" for rule in self.rules)
        return "".join(parts)


# =============================================================================
# Parsing
# =============================================================================


class _RuleCollector:
    def __init__(self) -> None:
        self.rules: list[CssRule] = []
        self.selector: str | None = None
        self.properties: dict[str, str] = {}

    def start(self, selector: str) -> None:
        self.flush()
        self.selector = selector
        self.properties = {}

    def declare(self, body: str) -> None:
        for declaration in body.split(";"):
            name, sep, value = declaration.partition(":")
            if sep and name.strip() and value.strip():
                self.properties[name.strip()] = value.strip()

    def flush(self) -> None:
        if self.selector and not self.selector.startswith("@"):
            self.rules.append(CssRule(self.selector, self.properties))
        self.selector = None
        self.properties = {}


def parse_css(text: str) -> ProcessedCss:
    """
    Parse stylesheet text into rules, tolerating malformed lines.

    A blank line or a closing brace ends the current rule. Lines outside a
    rule that are not `@import` statements are skipped.
    """
    collector = _RuleCollector()
    imports: list[str] = []
    in_comment = False

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if in_comment:
            if "*/" not in line:
                continue
            in_comment = False
            line = line.split("*/", 1)[1].strip()
        if line.startswith("/*"):
            if "*/" not in line:
                in_comment = True
                continue
            line = line.split("*/", 1)[1].strip()
            if not line:
                continue
        if not line:
            collector.flush()
            continue
        if collector.selector is None and line.startswith("@import"):
            imports.append(line if line.endswith(";") else f"{line};")
            continue
        if "{" in line:
            selector, _, line = line.partition("{")
            collector.start(selector.strip())
            line = line.strip()
        if collector.selector is None:
            continue
        closed = line.endswith("}")
        collector.declare(line.rstrip("}"))
        if closed:
            collector.flush()

    collector.flush()
    return ProcessedCss(rules=collector.rules, import_statements=imports)


# =============================================================================
# Merging
# =============================================================================


def _copy_rules(rules: Iterable[CssRule]) -> tuple[list[CssRule], dict[tuple[str, str], CssRule]]:
    copied = [CssRule(rule.selector, dict(rule.properties)) for rule in rules]
    index: dict[tuple[str, str], CssRule] = {}
    for rule in copied:
        index.setdefault(rule.key, rule)
    return copied, index


def merge_rules(base: Iterable[CssRule], override: Iterable[CssRule]) -> list[CssRule]:
    """
    Layer `override` onto `base`.

    Same-key rules merge their properties with override values winning;
    other override rules are appended in their own order.
    """
    merged, index = _copy_rules(base)
    for rule in override:
        target = index.get(rule.key)
        if target is None:
            target = CssRule(rule.selector)
            merged.append(target)
            index[rule.key] = target
        target.properties.update(rule.properties)
    return merged


def apply_inline_styles(
    rules: Iterable[CssRule], inline: Mapping[str, Iterable[str]]
) -> list[CssRule]:
    """
    Set the declarations of each selector's utility classes on its rule.

    The rule is created when missing. Unknown utility classes are dropped.
    """
    merged, index = _copy_rules(rules)
    for selector, classes in inline.items():
        declarations = [decl for name in classes for decl in resolve_utility(name)]
        if not declarations:
            continue
        key = selector_key(selector)
        target = index.get(key)
        if target is None:
            target = CssRule(selector.strip())
            merged.append(target)
            index[key] = target
        target.properties.update(declarations)
    return merged


def resolve(
    base_css: str,
    override_css: str | None = None,
    inline: Mapping[str, Iterable[str]] | None = None,
) -> ProcessedCss:
    """
    Resolve stylesheet text layers into one stylesheet.

    Args:
        base_css: Base theme text
        override_css: Override theme text, if any
        inline: Utility classes per selector from the page documents
    """
    base = parse_css(base_css)
    rules = base.rules
    imports = list(base.import_statements)
    if override_css is not None:
        override = parse_css(override_css)
        rules = merge_rules(rules, override.rules)
        imports.extend(s for s in override.import_statements if s not in imports)
    rules = apply_inline_styles(rules, inline or {})
    return ProcessedCss(rules=rules, import_statements=imports)


# =============================================================================
# Project files
# =============================================================================


def load_default_theme() -> str:
    return DEFAULT_THEME_PATH.read_text(encoding="utf-8")


def _read_theme(themes_dir: Path, css_theme: str | None) -> str:
    if css_theme is None or css_theme == DEFAULT_THEME:
        return load_default_theme()
    theme_path = themes_dir / f"{css_theme}.css"
    if not theme_path.is_file():
        logger.info("Theme file %s not found, using the built-in theme", theme_path)
        return load_default_theme()
    logger.debug("Using theme %s", theme_path)
    return theme_path.read_text(encoding="utf-8")


def _read_override(themes_dir: Path, css_override: str | None) -> str | None:
    if css_override is None:
        return None
    name = DEFAULT_OVERRIDE_FILE if css_override == DEFAULT_THEME else css_override
    override_path = themes_dir / name
    if not override_path.is_file():
        logger.info("Override file %s not found, skipping", override_path)
        return None
    logger.debug("Using override %s", override_path)
    return override_path.read_text(encoding="utf-8")


def resolve_styles(
    project_dir: Path,
    css_theme: str | None,
    css_override: str | None,
    inline: Mapping[str, Iterable[str]] | None = None,
    themes_dir: str = "themes",
) -> ProcessedCss:
    """
    Resolve a project's stylesheet from its theme files.

    `css_theme` names `<themes_dir>/<name>.css`, or the built-in theme when
    absent or `default`. `css_override` names a file under `themes_dir`;
    `default` means `theme.override.css`. Missing files never fail the build.
    """
    directory = project_dir / themes_dir
    return resolve(
        _read_theme(directory, css_theme),
        _read_override(directory, css_override),
        inline,
    )
