"""
Router/entry module generation.

The entry module bootstraps React, imports every page component, and maps
each route path to its component in declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass

from .emitter import JsxWriter

BOOTSTRAP_IMPORTS = (
    "import React from 'react';",
    "import ReactDOM from 'react-dom/client';",
    "import { BrowserRouter, Routes, Route } from 'react-router-dom';",
    "import './index.css';",
)


@dataclass(frozen=True)
class RouteEntry:
    """One route of the generated router."""

    path: str
    component: str
    module: str

    @property
    def import_line(self) -> str:
        return f"import {self.component} from './{self.module}';"

    @property
    def route_line(self) -> str:
        return f'<Route path="{self.path}" element={{<{self.component} />}} />'


def generate_router(routes: list[RouteEntry], stylesheet: str | None = None) -> str:
    """
    Generate the entry module.

    Args:
        routes: Route entries in declaration order.
        stylesheet: Import path of the processed stylesheet, if one was built.

    Component imports are de-duplicated when several paths share a page;
    route entries are not.
    """
    out = JsxWriter()
    out.lines(*BOOTSTRAP_IMPORTS)
    if stylesheet:
        out.line(f"import '{stylesheet}';")
    out.line()

    seen: set[str] = set()
    for route in routes:
        if route.import_line not in seen:
            seen.add(route.import_line)
            out.line(route.import_line)
    out.line()

    with out.block("ReactDOM.createRoot(document.getElementById('root')!).render(", ");"):
        with out.block("<React.StrictMode>", "</React.StrictMode>"):
            with out.block("<BrowserRouter>", "</BrowserRouter>"):
                with out.block("<Routes>", "</Routes>"):
                    for route in routes:
                        out.line(route.route_line)
    return out.render() + "\n"
