"""
Indentation-aware text assembly for generated JSX/TSX.

Renderers never build indentation by hand: they append lines to a
`JsxWriter` and open/close nested blocks, and the writer prefixes each
line with two spaces per nesting level when rendered.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

INDENT = "  "


class JsxWriter:
    """
    Line buffer with a current nesting level.

    Example:
        out = JsxWriter()
        with out.block('<div className="Card">', "</div>"):
            out.line("<h1>Hi</h1>")
        out.render()
        # '<div className="Card">\\n  <h1>Hi</h1>\\n</div>'
    """

    def __init__(self, level: int = 0):
        if level < 0:
            raise ValueError(f"level must not be negative, got: {level}")
        self.level = level
        self._lines: list[tuple[int, str]] = []

    def line(self, text: str = "") -> None:
        """Append one line at the current level."""
        self._lines.append((self.level, text))

    def lines(self, *texts: str) -> None:
        for text in texts:
            self.line(text)

    def open(self, text: str) -> None:
        """Append an opening line and nest subsequent lines one level deeper."""
        self.line(text)
        self.level += 1

    def close(self, text: str) -> None:
        """Leave one nesting level and append a closing line."""
        if self.level == 0:
            raise ValueError(f"close without matching open: {text}")
        self.level -= 1
        self.line(text)

    @contextmanager
    def block(self, opening: str, closing: str) -> Iterator[JsxWriter]:
        self.open(opening)
        yield self
        self.close(closing)

    @contextmanager
    def indented(self) -> Iterator[JsxWriter]:
        self.level += 1
        yield self
        self.level -= 1

    def extend(self, other: JsxWriter) -> None:
        """Append another writer's lines, nested under the current level."""
        base = min((level for level, _ in other._lines), default=0)
        for level, text in other._lines:
            self._lines.append((self.level + level - base, text))

    def __len__(self) -> int:
        return len(self._lines)

    def render(self) -> str:
        """Join the buffered lines; blank lines carry no indentation."""
        return "\n".join(INDENT * level + text if text else "" for level, text in self._lines)
