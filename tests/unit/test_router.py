"""Tests for router/entry module generation."""

from __future__ import annotations

from nwl.codegen import RouteEntry, generate_router

HOME = RouteEntry(path="/", component="Home", module="home")
ABOUT = RouteEntry(path="/about", component="AboutUs", module="aboutus")


class TestRouteEntry:
    def test_lines(self) -> None:
        assert ABOUT.import_line == "import AboutUs from './aboutus';"
        assert ABOUT.route_line == '<Route path="/about" element={<AboutUs />} />'


class TestGenerateRouter:
    def test_two_routes_in_order(self) -> None:
        source = generate_router([HOME, ABOUT])
        assert source == (
            "import React from 'react';\n"
            "import ReactDOM from 'react-dom/client';\n"
            "import { BrowserRouter, Routes, Route } from 'react-router-dom';\n"
            "import './index.css';\n"
            "\n"
            "import Home from './home';\n"
            "import AboutUs from './aboutus';\n"
            "\n"
            "ReactDOM.createRoot(document.getElementById('root')!).render(\n"
            "  <React.StrictMode>\n"
            "    <BrowserRouter>\n"
            "      <Routes>\n"
            '        <Route path="/" element={<Home />} />\n'
            '        <Route path="/about" element={<AboutUs />} />\n'
            "      </Routes>\n"
            "    </BrowserRouter>\n"
            "  </React.StrictMode>\n"
            ");\n"
        )

    def test_stylesheet_import(self) -> None:
        source = generate_router([HOME], stylesheet="../themes/processed.css")
        assert "import './index.css';\nimport '../themes/processed.css';\n" in source

    def test_shared_page_imported_once(self) -> None:
        alias = RouteEntry(path="/home", component="Home", module="home")
        source = generate_router([HOME, alias])
        assert source.count("import Home from './home';") == 1
        assert source.count("element={<Home />}") == 2

    def test_no_routes(self) -> None:
        assert "<Routes>\n      </Routes>" in generate_router([])
