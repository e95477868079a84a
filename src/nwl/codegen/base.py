"""
Generators that write a project's build outputs.

Each generator produces one kind of artifact:
- ComponentGenerator writes one page component
- StylesheetGenerator writes the processed stylesheet
- RouterGenerator writes the entry module
"""

from __future__ import annotations

import logging
import posixpath
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..core import ir
from ..core.naming import component_name, module_name
from ..styles import collect_inline_styles, resolve_styles
from .page import PageGenerator
from .router import RouteEntry, generate_router

logger = logging.getLogger(__name__)

ENTRY_MODULE = "main.tsx"
COMPONENT_SUFFIX = ".tsx"
STYLESHEET_FILE = "processed.css"


@dataclass
class GeneratorResult:
    """
    Result from a generator execution.

    Attributes:
        files_created: Files written, in write order
        artifacts: Data to share with later generators
        warnings: Non-fatal problems to show the user
    """

    files_created: list[Path] = field(default_factory=list)
    artifacts: dict[str, Any] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def add_file(self, path: Path) -> None:
        self.files_created.append(path)

    def add_artifact(self, key: str, value: Any) -> None:
        self.artifacts[key] = value

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def merge(self, other: GeneratorResult) -> None:
        """Merge another result into this one."""
        self.files_created.extend(other.files_created)
        self.artifacts.update(other.artifacts)
        self.warnings.extend(other.warnings)


class Generator(ABC):
    """
    Base class for project output generators.

    Args:
        project: Project configuration
        project_dir: Project root; output paths are resolved against it
    """

    def __init__(self, project: ir.ProjectConfig, project_dir: Path):
        self.project = project
        self.project_dir = project_dir

    @property
    def src_dir(self) -> Path:
        return self.project_dir / self.project.src_dir

    @property
    def themes_dir(self) -> Path:
        return self.project_dir / self.project.themes_dir

    @abstractmethod
    def generate(self) -> GeneratorResult:
        pass

    def _ensure_dir(self, path: Path) -> None:
        """Ensure a directory exists."""
        path.mkdir(parents=True, exist_ok=True)

    def _write_file(self, path: Path, content: str) -> None:
        """Write content to a file, creating parent directories if needed."""
        self._ensure_dir(path.parent)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", path)


class ComponentGenerator(Generator):
    """Writes `<src_dir>/<module>.tsx` for one routed page."""

    def __init__(self, project: ir.ProjectConfig, project_dir: Path, page: ir.Page, path: str):
        super().__init__(project, project_dir)
        self.page = page
        self.path = path

    def generate(self) -> GeneratorResult:
        result = GeneratorResult()
        generator = PageGenerator(self.page)
        source = generator.generate()

        output = self.src_dir / f"{module_name(self.page.name)}{COMPONENT_SUFFIX}"
        self._write_file(output, source)
        result.add_file(output)
        for warning in generator.warnings:
            result.add_warning(warning)
        result.add_artifact(
            "route",
            RouteEntry(
                path=self.path,
                component=component_name(self.page.name),
                module=module_name(self.page.name),
            ),
        )
        return result


class StylesheetGenerator(Generator):
    """Writes `<themes_dir>/processed.css` from the theme layers and page styles."""

    def __init__(
        self,
        project: ir.ProjectConfig,
        project_dir: Path,
        pages: Sequence[ir.Page],
        css_theme: str | None,
        css_override: str | None,
    ):
        super().__init__(project, project_dir)
        self.pages = pages
        self.css_theme = css_theme
        self.css_override = css_override

    @property
    def output_path(self) -> Path:
        return self.themes_dir / STYLESHEET_FILE

    def generate(self) -> GeneratorResult:
        result = GeneratorResult()
        processed = resolve_styles(
            self.project_dir,
            self.css_theme,
            self.css_override,
            collect_inline_styles(self.pages),
            themes_dir=self.project.themes_dir,
        )
        self._write_file(self.output_path, processed.render())
        result.add_file(self.output_path)
        result.add_artifact("stylesheet", self.output_path)
        return result


def stylesheet_import(src_dir: str, themes_dir: str) -> str:
    """
    Import path of the processed stylesheet as seen from the entry module.

    Examples:
        >>> stylesheet_import("src", "themes")
        '../themes/processed.css'
    """
    relative = posixpath.relpath(posixpath.join(themes_dir, STYLESHEET_FILE), src_dir)
    return relative if relative.startswith(".") else f"./{relative}"


class RouterGenerator(Generator):
    """Writes `<src_dir>/main.tsx` for the accumulated routes."""

    def __init__(
        self,
        project: ir.ProjectConfig,
        project_dir: Path,
        routes: list[RouteEntry],
        with_stylesheet: bool = False,
    ):
        super().__init__(project, project_dir)
        self.routes = routes
        self.with_stylesheet = with_stylesheet

    def generate(self) -> GeneratorResult:
        result = GeneratorResult()
        stylesheet = None
        if self.with_stylesheet:
            stylesheet = stylesheet_import(self.project.src_dir, self.project.themes_dir)
        output = self.src_dir / ENTRY_MODULE
        self._write_file(output, generate_router(self.routes, stylesheet))
        result.add_file(output)
        return result
