"""Line-oriented parser for the simpleconf format.

A document is a sequence of lines. After stripping surrounding
whitespace each line is one of:

* blank, ignored;
* a comment, starting with ``;`` or ``#``. Comments only exist on their
  own line, so ``a = 1 ; note`` stores the value ``1 ; note``;
* a section header ``[name]`` with a non-empty name and nothing after
  the closing bracket;
* a key-value pair ``key = value``, split at the first ``=``. The key
  must not be empty and the pair must follow a section header.

Example::

    [foo]
    test = Hello, World!
    answer = 42

    ; a comment
    # another comment
    [bar]
    trololo = bla.. ; part of the value
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import IO, Iterable

from simpleconf.config import Config, Section
from simpleconf.errors import (
    ConfigNotFoundError,
    EmptyKeyError,
    EmptySectionNameError,
    MalformedSectionHeaderError,
    NoActiveSectionError,
    NotAKeyValuePairError,
    TrailingDataAfterSectionHeaderError,
)
from simpleconf.files import FileOpener

__all__ = ["parse", "loads", "load", "load_file", "COMMENT_PREFIXES"]

logger = logging.getLogger(__name__)

COMMENT_PREFIXES = (";", "#")


def _parse_section_header(line: str, lineno: int) -> str:
    """Return the name in a ``[name]`` line that is known to start with '['."""
    name, closing, rest = line[1:].partition("]")
    if not closing:
        raise MalformedSectionHeaderError(line=lineno)
    if rest:
        raise TrailingDataAfterSectionHeaderError(line=lineno)
    if not name:
        raise EmptySectionNameError(line=lineno)
    return name


def parse(lines: Iterable[str], *, opener: FileOpener | None = None) -> Config:
    """Parse an iterable of text lines into a Config.

    Parsing is all-or-nothing: the first structural error aborts it and
    nothing is returned.

    Args:
        lines: Lines of text, with or without their line terminators.
        opener: File opener handed to the resulting Config.

    Returns:
        The parsed Config.

    Raises:
        ParseError: One of its subclasses, carrying the 1-based line number.
    """
    config = Config(opener=opener)
    section: Section | None = None
    section_name = ""
    lineno = 0

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue

        if line.startswith("["):
            name = _parse_section_header(line, lineno)
            if section is not None:
                _commit(config, section_name, section)
            section = {}
            section_name = name
            continue

        key, sep, value = line.partition("=")
        if not sep:
            raise NotAKeyValuePairError(line=lineno)
        key = key.strip()
        if not key:
            raise EmptyKeyError(line=lineno)
        if section is None:
            raise NoActiveSectionError(line=lineno)
        section[key] = value.strip()

    if section is not None:
        _commit(config, section_name, section)

    logger.debug("Parsed %d line(s) into %d section(s)", lineno, len(config))
    return config


def _commit(config: Config, name: str, section: Section) -> None:
    if name in config:
        logger.debug("Section [%s] redefined, replacing previous contents", name)
    config[name] = section


def loads(text: str, *, opener: FileOpener | None = None) -> Config:
    """Parse a whole document held in a string.

    Lines end at LF, CRLF or CR. No other character splits a line, so form
    feeds and Unicode separators stay inside values.
    """
    return parse(io.StringIO(text, newline=None), opener=opener)


def load(stream: IO[str], *, opener: FileOpener | None = None) -> Config:
    """Parse a text stream line by line.

    Errors raised while reading the stream propagate unchanged.
    """
    return parse(stream, opener=opener)


def load_file(
    path: str | os.PathLike[str],
    encoding: str = "utf-8",
    *,
    opener: FileOpener | None = None,
) -> Config:
    """Read and parse a configuration file.

    Raises:
        ConfigNotFoundError: If ``path`` is not an existing file.
        ParseError: If the file content is invalid.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigNotFoundError(config_path=str(path))

    logger.debug("Loading configuration from %s", file_path)
    with file_path.open(encoding=encoding) as f:
        return load(f, opener=opener)
