"""Pytest configuration and fixtures for prebuilt-apis tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from prebuilt_apis.exceptions import DuplicateNameError, GlobError


class RecordingHost:
    """In-memory build host: serves a fixed file list and records registrations."""

    def __init__(self, files: list[str]) -> None:
        self.files = list(files)
        self.patterns: list[str] = []
        self.registered: list = []

    def glob(self, pattern: str) -> list[str]:
        self.patterns.append(pattern)
        return [f for f in self.files if Path(f).match(pattern) and f.count("/") == pattern.count("/")]

    def register(self, declaration) -> None:
        if any(d.name == declaration.name for d in self.registered):
            raise DuplicateNameError(declaration.name)
        self.registered.append(declaration)


class BrokenGlobHost(RecordingHost):
    """A host whose directory cannot be scanned."""

    def glob(self, pattern: str) -> list[str]:
        self.patterns.append(pattern)
        raise GlobError(f"failed to glob {pattern!r}: permission denied")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep PREBUILT_APIS_* variables from the outer shell out of the tests."""
    for var in ("PREBUILT_APIS_ROOT", "PREBUILT_APIS_DIR", "PREBUILT_APIS_NAME", "PREBUILT_APIS_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_tree(tmp_path: Path):
    """Create empty files under tmp_path and return the root."""

    def _make(*paths: str) -> Path:
        for rel in paths:
            p = tmp_path / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text("", encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def recording_host():
    """Factory for `RecordingHost` instances."""
    return RecordingHost


@pytest.fixture
def broken_glob_host():
    return BrokenGlobHost
