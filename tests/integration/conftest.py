"""Fixtures for tests that use the real filesystem."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory writing a config file under tmp_path and returning its path."""

    def factory(text: str, name: str = "app.conf") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return factory
