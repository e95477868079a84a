"""Package version lookup.

An installed distribution reports its own metadata. A source checkout that
was never installed reads the `[project]` table of the neighbouring
pyproject.toml instead.
"""

from __future__ import annotations

import tomllib
from importlib import metadata
from pathlib import Path

DISTRIBUTION = "nwl"
UNKNOWN_VERSION = "0.0.0"

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def version_from_pyproject(path: Path) -> str | None:
    """Return `project.version` from a pyproject file, or None when absent."""
    if not path.is_file():
        return None
    with path.open("rb") as handle:
        project = tomllib.load(handle).get("project", {})
    if project.get("name") != DISTRIBUTION:
        return None
    return project.get("version")


def get_version() -> str:
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return version_from_pyproject(PYPROJECT) or UNKNOWN_VERSION


__version__ = get_version()
