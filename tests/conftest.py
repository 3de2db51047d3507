"""Shared fixtures for menuwalk tests."""

import json

import pytest

from menuwalk.model import Catalog


class ScriptedReader:
    """Line reader that replays canned operator input."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def read_line(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)


@pytest.fixture
def catalog_data():
    """Two-tier catalog document."""
    return {
        "menu": [
            {
                "id": 1,
                "name": "A",
                "description": "Top level A",
                "price": 10,
                "children": [{"id": 2, "name": "A1", "price": 5}],
            },
            {"id": 3, "name": "B", "price": 1234.5},
        ]
    }


@pytest.fixture
def catalog(catalog_data):
    """Parsed two-tier catalog."""
    return Catalog.model_validate(catalog_data)


@pytest.fixture
def catalog_file(tmp_path, catalog_data):
    """Catalog document written to a temporary file."""
    path = tmp_path / "options.json"
    path.write_text(json.dumps(catalog_data), encoding="utf-8")
    return path


@pytest.fixture
def scripted_reader():
    """Factory for ScriptedReader instances."""
    return ScriptedReader
