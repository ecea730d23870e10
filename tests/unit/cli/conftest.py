"""Fixtures for CLI command tests."""

import json

import pytest


@pytest.fixture
def repo_dir(tmp_path):
    """A small checkout: src/App.js imports src/utils/math.js."""
    root = tmp_path / "demo"
    (root / "src" / "utils").mkdir(parents=True)
    (root / "src" / "App.js").write_text(
        'import { add } from "./utils/math";\nexport default function App() {}\n'
    )
    (root / "src" / "utils" / "math.js").write_text("export const add = (a, b) => a + b;\n")
    (root / "src" / "utils" / "math.css").write_text(".sum { color: red; }\n")
    return root


@pytest.fixture
def listing_file(tmp_path):
    path = tmp_path / "listing.json"
    path.write_text(json.dumps([
        {"path": "src/App.js", "type": "blob", "size": 120},
        {"path": "src/utils/math.js", "type": "blob", "size": 80},
    ]))
    return path
