from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def make_project(tmp_path):
    """Build a project tree from a {relative_path: content} mapping."""

    def _make(files):
        for rel, content in files.items():
            p = tmp_path / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(content, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def fake_response():
    def _make(status_code):
        r = MagicMock()
        r.status_code = status_code
        return r

    return _make


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr("secret_audit.cli.load_env_file", lambda: False)
