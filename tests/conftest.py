"""Shared fixtures for the simpleconf test suite."""

from __future__ import annotations

import io
from typing import IO, Any

import pytest

from simpleconf import Config, loads

SAMPLE = """; I am just a comment.
    # Me too!
[foo]
 a = Hello, World!    
b=1337
c= on
[bar]
trololo\t\t\t= 1.5
file =     /dev/zero"""


class RecordingOpener:
    """File opener that records calls and returns in-memory streams."""

    def __init__(self, content: bytes = b"", error: OSError | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[tuple[str, str, int, str | None]] = []

    def __call__(self, path: str, mode: str, perm: int, encoding: str | None) -> IO[Any]:
        self.calls.append((path, mode, perm, encoding))
        if self.error is not None:
            raise self.error
        if "b" in mode:
            return io.BytesIO(self.content)
        return io.StringIO(self.content.decode(encoding or "utf-8"))


@pytest.fixture
def sample_text() -> str:
    """The reference document exercising comments, whitespace and every value type."""
    return SAMPLE


@pytest.fixture
def sample_config(sample_text: str) -> Config:
    return loads(sample_text)


@pytest.fixture
def recording_opener() -> RecordingOpener:
    return RecordingOpener(content=b"payload")
