"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Engine fixtures (dispatcher, resolver, rule engine)
- Settings isolated from the developer's environment
- A small source tree factory for batch validation tests
"""

from pathlib import Path
from typing import Callable, Dict, Union

import pytest

from token_guard.classifiers import ClassificationDispatcher
from token_guard.core.config import Settings
from token_guard.rules import RuleEngine, create_default_engine
from token_guard.suggestions import SuggestionResolver


# ---------------------------------------------------------------------------
# ENGINE FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def dispatcher() -> ClassificationDispatcher:
    return ClassificationDispatcher()


@pytest.fixture
def resolver() -> SuggestionResolver:
    """Exact-match-only resolver (the default threshold)."""
    return SuggestionResolver()


@pytest.fixture
def engine() -> RuleEngine:
    """Rule engine with all five rules and no exceptions."""
    return create_default_engine()


# ---------------------------------------------------------------------------
# SETTINGS
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep TOKEN_GUARD_* variables from the shell out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("TOKEN_GUARD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build Settings without reading any .env file."""

    def _make(**overrides) -> Settings:
        overrides.setdefault("EXCEPTIONS", [])
        return Settings(_env_file=None, **overrides)

    return _make


# ---------------------------------------------------------------------------
# SOURCE TREES
# ---------------------------------------------------------------------------

@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, Union[str, bytes]]], Path]:
    """
    Write a file tree under tmp_path.

    Keys are relative paths, values are text (utf-8) or raw bytes.
    """

    def _make(files: Dict[str, Union[str, bytes]]) -> Path:
        root = tmp_path / "repo"
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        root.mkdir(parents=True, exist_ok=True)
        return root

    return _make
