import json

import pytest


@pytest.fixture
def definition_file(tmp_path):
    """Write a JSON graph definition and return its path."""
    def _write(data, name="graph.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_definition():
    return {
        "name": "pipeline",
        "nodes": [
            {"name": "load", "shape": "box"},
            {"name": "clean", "label": "Clean \"raw\" rows", "style": "dashed"},
            {"name": "report", "color": "red", "url": "http://example.com/r"},
        ],
        "edges": [
            {"source": "load", "target": "clean", "label": "rows"},
            {"source": "clean", "target": "report", "style": "bold", "color": "blue"},
        ],
    }


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Point settings at tmp_path and clear DOTGRAPH_* overrides."""
    for key in ("GRAPH_NAME", "GRAPH_KIND", "INDENT", "LOG_LEVEL"):
        monkeypatch.delenv(f"DOTGRAPH_{key}", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DOTGRAPH_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("DOTGRAPH_LOG_FILE", str(tmp_path / "logs" / "dotgraph.log"))
    return tmp_path
