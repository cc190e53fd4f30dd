"""simpleconf - parser and typed accessors for a minimal INI-like format."""

from __future__ import annotations

# Parsing
from simpleconf.parser import load, load_file, loads, parse

# Config
from simpleconf.config import FALSE_LITERALS, TRUE_LITERALS, Config, Section

# Files
from simpleconf.files import FileOpener, open_file

# Errors
from simpleconf.errors import (
    ConfigNotFoundError,
    EmptyKeyError,
    EmptySectionNameError,
    ErrorCodes,
    MalformedSectionHeaderError,
    NoActiveSectionError,
    NotAKeyValuePairError,
    NotBoolError,
    NotFoundError,
    NotNumericError,
    ParseError,
    SimpleconfError,
    TrailingDataAfterSectionHeaderError,
)

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "parse",
    "loads",
    "load",
    "load_file",
    # Config
    "Config",
    "Section",
    "TRUE_LITERALS",
    "FALSE_LITERALS",
    # Files
    "FileOpener",
    "open_file",
    # Errors
    "ErrorCodes",
    "SimpleconfError",
    "ConfigNotFoundError",
    "ParseError",
    "MalformedSectionHeaderError",
    "TrailingDataAfterSectionHeaderError",
    "EmptySectionNameError",
    "NotAKeyValuePairError",
    "EmptyKeyError",
    "NoActiveSectionError",
    "NotFoundError",
    "NotBoolError",
    "NotNumericError",
]
