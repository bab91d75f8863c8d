"""Pytest configuration and shared fixtures for the docrender test suite.

This module registers the test markers and provides the sample documents
shared across the unit tests.
"""

import json
from pathlib import Path

import pytest

from docrender.ast import (
    Alignment,
    Cell,
    Document,
    Note,
    Para,
    Plain,
    Row,
    Space,
    Str,
    Table,
    TableBody,
    TableHead,
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


def _cell(text: str) -> Cell:
    return Cell([Plain([Str(text)])], alignment=Alignment.DEFAULT)


@pytest.fixture
def footnote_document() -> Document:
    """Document that references the same footnote body twice."""
    return Document([
        Para([Str("First"), Note([Para([Str("x")])])]),
        Para([Str("Second"), Note([Para([Str("x")])])]),
    ])


@pytest.fixture
def nested_footnote_document() -> Document:
    """Document with a footnote nested inside another footnote's body."""
    return Document([
        Para([Str("Outer"), Note([Para([Str("body"), Note([Para([Str("y")])])])])]),
    ])


@pytest.fixture
def table_document() -> Document:
    """Document holding a 2-column table with one head row and two body rows."""
    table = Table(
        head=TableHead([Row([_cell("A"), _cell("B")])]),
        bodies=[TableBody([Row([_cell("1"), _cell("2")]), Row([_cell("3"), _cell("4")])])],
    )
    return Document([table])


@pytest.fixture
def simple_document() -> Document:
    """Document with a title and a single paragraph."""
    return Document([Para([Str("Hello"), Space(), Str("world")])], meta={"title": "Greeting"})


PANDOC_JSON = {
    "pandoc-api-version": [1, 23, 1],
    "meta": {
        "title": {"t": "MetaInlines", "c": [{"t": "Str", "c": "My"}, {"t": "Space"}, {"t": "Str", "c": "Doc"}]},
        "draft": {"t": "MetaBool", "c": True},
    },
    "blocks": [
        {"t": "Header", "c": [1, ["intro", [], []], [{"t": "Str", "c": "Intro"}]]},
        {
            "t": "Para",
            "c": [
                {"t": "Str", "c": "See"},
                {"t": "Space"},
                {"t": "Link", "c": [["", [], []], [{"t": "Str", "c": "docs"}], ["https://example.com", ""]]},
                {"t": "Note", "c": [{"t": "Para", "c": [{"t": "Str", "c": "Footnote."}]}]},
            ],
        },
        {"t": "CodeBlock", "c": [["", ["python"], []], "print(1)"]},
        {
            "t": "OrderedList",
            "c": [
                [3, {"t": "LowerRoman"}, {"t": "Period"}],
                [[{"t": "Plain", "c": [{"t": "Str", "c": "three"}]}]],
            ],
        },
    ],
}


@pytest.fixture
def pandoc_json() -> dict:
    """Pandoc JSON AST as produced by ``pandoc -t json``."""
    return json.loads(json.dumps(PANDOC_JSON))


@pytest.fixture
def pandoc_json_file(tmp_path: Path, pandoc_json: dict) -> Path:
    """Pandoc JSON AST written to a temporary file."""
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(pandoc_json), encoding="utf-8")
    return path
