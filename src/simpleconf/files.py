"""File opener capability used by ``Config.get_file``."""

from __future__ import annotations

import logging
import os
from typing import IO, Any, Protocol

__all__ = ["FileOpener", "open_file"]

logger = logging.getLogger(__name__)


class FileOpener(Protocol):
    """Anything that can open a path and hand back a file object.

    Implementations must raise ``OSError`` (or a subclass) on failure.
    """

    def __call__(self, path: str, mode: str, perm: int, encoding: str | None) -> IO[Any]: ...


def open_file(path: str, mode: str = "r", perm: int = 0o666, encoding: str | None = None) -> IO[Any]:
    """Open ``path`` with the builtin ``open``.

    ``perm`` is applied (subject to the process umask) only when the mode
    creates the file.
    """

    def _opener(file: str, flags: int) -> int:
        return os.open(file, flags, perm)

    logger.debug("Opening %s (mode=%s)", path, mode)
    return open(path, mode, encoding=encoding, opener=_opener)
