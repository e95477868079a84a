"""
Project builds and single-file compilation.

A build reads nwl.yaml, compiles every routed page into its own component
module, optionally resolves the project stylesheet, and writes the router
entry module. The first fatal error aborts the build; files written before
it stay on disk.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .codegen import (
    ComponentGenerator,
    GeneratorResult,
    RouterGenerator,
    StylesheetGenerator,
    generate_page,
)
from .core import ir
from .core.errors import BuildError, NwlError, ProjectError
from .core.loader import (
    PROJECT_FILE,
    load_document,
    load_page,
    load_project_config,
    parse_document,
)

logger = logging.getLogger(__name__)


def effective_theme(project: ir.ProjectConfig, pages: Sequence[ir.Page]) -> tuple[str | None, str | None]:
    """
    Theme and override for the build.

    Project settings win; otherwise the first page that declares one
    supplies it.
    """
    css_theme = project.css_theme
    if css_theme is None:
        css_theme = next((page.css_theme for page in pages if page.css_theme is not None), None)
    css_override = project.css_override
    if css_override is None:
        css_override = next((page.css_override for page in pages if page.css_override is not None), None)
    return css_theme, css_override


def build_project(project_dir: Path) -> GeneratorResult:
    """
    Build an NWL project in place.

    Args:
        project_dir: Directory containing nwl.yaml

    Returns:
        GeneratorResult listing every file written and all warnings

    Raises:
        ProjectError: nwl.yaml is missing.
        ParseError: nwl.yaml is malformed.
        BuildError: A route failed; the cause is chained.
    """
    project = load_project_config(project_dir)
    logger.info("Building project %s (%d routes)", project.name, len(project.routes))

    result = GeneratorResult()
    pages: list[ir.Page] = []
    routes = []
    for route in project.routes:
        try:
            page = load_page(project_dir / route.page)
            component = ComponentGenerator(project, project_dir, page, route.path).generate()
        except (NwlError, OSError) as e:
            raise BuildError(f"Route '{route.path}': {e}", route=route.path) from e
        pages.append(page)
        routes.append(component.artifacts["route"])
        result.merge(component)

    css_theme, css_override = effective_theme(project, pages)
    with_stylesheet = css_theme is not None or css_override is not None
    try:
        if with_stylesheet:
            result.merge(
                StylesheetGenerator(project, project_dir, pages, css_theme, css_override).generate()
            )
        result.merge(RouterGenerator(project, project_dir, routes, with_stylesheet).generate())
    except OSError as e:
        raise BuildError(f"Failed to write build output: {e}") from e

    logger.info("Wrote %d files", len(result.files_created))
    return result


def compile_document(document: ir.Document) -> str:
    """Component source for every page of a document, in order."""
    return "\n".join(generate_page(page) for page in document.pages)


def compile_source(text: str, source: Path | None = None) -> str:
    """
    Compile page YAML text to component source.

    Raises:
        ParseError: The text is not a valid page or document.
        UnsupportedElement: An element has no renderer.
    """
    return compile_document(parse_document(text, source))


def compile_file(path: Path) -> str:
    """Compile a page or multi-page document file."""
    return compile_document(load_document(path))


# =============================================================================
# Scaffolding
# =============================================================================

PROJECT_TEMPLATE = """\
name: {name}
routes:
  - path: /
    page: pages/home.yaml
css_theme: default
css_override: default
"""

HOME_PAGE_TEMPLATE = """\
page:
  name: Home
  layout:
    type: column
    properties: [gap-4, p-6]
  state:
    - name: count
      type: number
      initial: 0
  children:
    - element: heading
      content: Welcome to {name}
      style: [text-3xl, font-bold]
    - element: text
      content: Edit pages/home.yaml and run `nwl build` to see your changes.
    - element: counter
      bind: count
      min: 0
    - element: button
      content: Reset
      onClick: setCount(0)
"""

OVERRIDE_TEMPLATE = """\
/* Project overrides: properties here replace the base theme's */

.Button {
  border-radius: 0.5rem;
}
"""


def scaffold_project(target: Path, name: str) -> list[Path]:
    """
    Write a minimal project skeleton into `target`.

    Raises:
        ProjectError: `target` exists and is not an empty directory.
    """
    if target.exists() and (not target.is_dir() or any(target.iterdir())):
        raise ProjectError(f"Directory is not empty: {target}", path=target)

    files = {
        target / PROJECT_FILE: PROJECT_TEMPLATE.format(name=name),
        target / "pages" / "home.yaml": HOME_PAGE_TEMPLATE.format(name=name),
        target / "themes" / "theme.override.css": OVERRIDE_TEMPLATE,
    }
    for path, content in files.items():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", path)
    return list(files)
