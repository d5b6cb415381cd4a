"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from sentcheck.rules import RuleSet, load_preset


@pytest.fixture
def default_rules() -> RuleSet:
    """The permissive rule set: every field at its default."""
    return RuleSet()


@pytest.fixture(scope="session")
def english() -> RuleSet:
    return load_preset("english")


@pytest.fixture(scope="session")
def french() -> RuleSet:
    return load_preset("french")


@pytest.fixture(scope="session")
def german() -> RuleSet:
    return load_preset("german")


@pytest.fixture
def write_file(tmp_path: Path):
    """Write a UTF-8 file under tmp_path and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
