"""
YAML loading for NWL pages, documents, and project configuration.

Page files have a `page:` root key. Document files hold several pages
under `pages:`. The project configuration lives in `nwl.yaml` at the
project root.

Default location: {project_root}/nwl.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from . import ir
from .errors import ErrorContext, ParseError, ProjectError

logger = logging.getLogger(__name__)

PROJECT_FILE = "nwl.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_project_config_path(project_root: Path) -> Path:
    """Get the nwl.yaml file path."""
    return project_root / PROJECT_FILE


def project_config_exists(project_root: Path) -> bool:
    """Check if a nwl.yaml exists in the project."""
    return get_project_config_path(project_root).exists()


# =============================================================================
# Parsing helpers
# =============================================================================


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)


def _safe_load(text: str, source: Path | None) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        context = None
        mark = getattr(e, "problem_mark", None)
        if source is not None:
            context = ErrorContext(
                file=source,
                line=mark.line + 1 if mark else 0,
                column=mark.column + 1 if mark else 0,
            )
        raise ParseError(f"Invalid YAML: {e}", context) from e


def _context(source: Path | None) -> ErrorContext | None:
    return ErrorContext(file=source) if source is not None else None


def _page_from_data(data: Any, source: Path | None) -> ir.Page:
    if not isinstance(data, dict) or "page" not in data:
        raise ParseError("Expected a mapping with a 'page' key", _context(source))
    try:
        return ir.Page.model_validate(data["page"])
    except ValidationError as e:
        raise ParseError(
            f"Invalid page schema: {_format_validation_error(e)}", _context(source)
        ) from e


# =============================================================================
# Loading
# =============================================================================


def parse_page(text: str, source: Path | None = None) -> ir.Page:
    """Parse a single-page YAML document.

    Args:
        text: YAML text with a `page:` root key.
        source: File the text came from, used in error locations.

    Raises:
        ParseError: Malformed YAML or schema violation.
    """
    return _page_from_data(_safe_load(text, source), source)


def parse_document(text: str, source: Path | None = None) -> ir.Document:
    """Parse YAML holding either one page or a `pages:` list.

    The single-page form is tried first.

    Raises:
        ParseError: Neither form matches, or the `pages:` list is empty.
    """
    data = _safe_load(text, source)
    if isinstance(data, dict) and "page" in data:
        return ir.Document(pages=[_page_from_data(data, source)])
    if isinstance(data, dict) and isinstance(data.get("pages"), list):
        if not data["pages"]:
            raise ParseError("Document has no pages", _context(source))
        return ir.Document(pages=[_page_from_data(entry, source) for entry in data["pages"]])
    raise ParseError("Expected a 'page' or 'pages' root key", _context(source))


def load_page(path: Path) -> ir.Page:
    """Load a page file.

    Raises:
        ProjectError: File does not exist.
        ParseError: File is not a valid page.
    """
    if not path.is_file():
        raise ProjectError(f"Page file not found: {path}", path=path)
    logger.debug("Loading page %s", path)
    return parse_page(path.read_text(encoding="utf-8"), source=path)


def load_document(path: Path) -> ir.Document:
    """Load a page or multi-page document file.

    Raises:
        ProjectError: File does not exist.
        ParseError: File is not a valid page or document.
    """
    if not path.is_file():
        raise ProjectError(f"File not found: {path}", path=path)
    return parse_document(path.read_text(encoding="utf-8"), source=path)


def load_project_config(project_root: Path) -> ir.ProjectConfig:
    """Load ProjectConfig from nwl.yaml.

    Args:
        project_root: Root directory of the NWL project.

    Raises:
        ProjectError: nwl.yaml does not exist.
        ParseError: nwl.yaml is empty, malformed, or fails the schema.
    """
    config_path = get_project_config_path(project_root)

    if not config_path.is_file():
        raise ProjectError(f"Project configuration not found: {config_path}", path=config_path)

    data = _safe_load(config_path.read_text(encoding="utf-8"), config_path)
    if not data:
        raise ParseError("Empty project configuration", _context(config_path))
    if not isinstance(data, dict):
        raise ParseError("Project configuration must be a mapping", _context(config_path))

    try:
        config = ir.ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ParseError(
            f"Invalid project configuration: {_format_validation_error(e)}",
            _context(config_path),
        ) from e

    logger.debug("Loaded project %s with %d route(s)", config.name, len(config.routes))
    return config
