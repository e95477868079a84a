"""
Error types for NWL page loading, code generation, and project builds.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class NwlError(Exception):
    """Base exception for all NWL errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class ParseError(NwlError):
    """
    Raised when a page or project document cannot be read into the model.

    Examples:
    - Malformed YAML syntax
    - Missing `page:` root key
    - Unknown `element:` tag
    - Field of the wrong type (e.g. `rows: many`)
    """

    pass


class ProjectError(NwlError):
    """
    Raised when a required project input is missing.

    Examples:
    - No nwl.yaml in the project directory
    - Route pointing at a page file that does not exist
    """

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(message)


class CodegenError(NwlError):
    """
    Raised when a page cannot be lowered to component source.

    Examples:
    - Element kind without a renderer
    """

    pass


class UnsupportedElement(CodegenError):
    """Raised when no renderer is registered for an element kind."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unsupported element type: {kind}")


class BuildError(NwlError):
    """
    Raised when a project build aborts.

    Examples:
    - A route's page failed to parse
    - A page contained an unsupported element
    - Output directory could not be written
    """

    def __init__(self, message: str, route: str | None = None):
        self.route = route
        super().__init__(message)


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        file: Path to the document where the error occurred
        line: Line number (1-indexed), 0 when unknown
        column: Column number (1-indexed), 0 when unknown
    """

    file: Path
    line: int = 0
    column: int = 0

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "pages/home.yaml:10:5"
        """
        if self.line:
            return f"{self.file}:{self.line}:{self.column}"
        return str(self.file)
