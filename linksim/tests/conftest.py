"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import List

import pytest

from linksim.config.config_loader import load_reference_corpus
from linksim.config.settings import ReferencePair


@pytest.fixture
def config_dir() -> Path:
    """Return path to the bundled config directory."""
    return Path(__file__).resolve().parent.parent / "config"


@pytest.fixture
def reference_pairs(config_dir: Path) -> List[ReferencePair]:
    """Load the bundled reference corpus."""
    return list(load_reference_corpus(config_dir / "reference_pairs.yaml"))


@pytest.fixture
def write_yaml(tmp_path: Path):
    """Write a YAML string to a temporary file and return its path."""

    def _write(content: str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
