"""Shared pytest fixtures for NWL tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import TypeAdapter

from nwl.codegen import generate_element
from nwl.core import ir

ELEMENT_ADAPTER: TypeAdapter[ir.Element] = TypeAdapter(ir.Element)

HOME_PAGE = """\
page:
  name: Home
  children:
    - element: heading
      content: Hi
    - element: button
      content: Go
      onClick: doThing()
"""

ABOUT_PAGE = """\
page:
  name: about_us
  state:
    - name: email
      type: string
      initial: ""
  children:
    - element: input
      bind: email
      placeholder: you@example.com
"""


@pytest.fixture
def home_page() -> ir.Page:
    """Page named Home with a heading and a click-wired button."""
    return ir.Page(
        name="Home",
        children=[
            ir.HeadingElement(content="Hi"),
            ir.ButtonElement(content="Go", on_click="doThing()"),
        ],
    )


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[..., Path]:
    """
    Return a factory that writes a project tree under tmp_path.

    Usage:
        project = write_project({"nwl.yaml": "...", "pages/home.yaml": "..."})
    """

    def _write(files: dict[str, str]) -> Path:
        for relative, content in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dedent(content), encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def two_route_project(write_project: Callable[..., Path]) -> Path:
    """Project with `/` -> home and `/about` -> about_us, no theme."""
    return write_project(
        {
            "nwl.yaml": """\
                name: demo
                routes:
                  - path: /
                    page: pages/home.yaml
                  - path: /about
                    page: pages/about.yaml
                """,
            "pages/home.yaml": HOME_PAGE,
            "pages/about.yaml": ABOUT_PAGE,
        }
    )


@pytest.fixture
def render() -> Callable[..., str]:
    """
    Return a function that validates an element mapping and renders it.

    Usage:
        jsx = render({"element": "heading", "content": "Hi"})
    """

    def _render(data: dict, indent_level: int = 0) -> str:
        return generate_element(ELEMENT_ADAPTER.validate_python(data), indent_level)

    return _render


@pytest.fixture
def about_page_yaml() -> str:
    """YAML for about_us: one `email` state field bound to an input."""
    return ABOUT_PAGE
