"""Error hierarchy for the simpleconf parser and accessors."""

from __future__ import annotations

from typing import Any

__all__ = [
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
    "ErrorCodes",
]


class SimpleconfError(Exception):
    """Base error for everything raised by simpleconf."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(SimpleconfError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        return self.details["config_path"]


# === Parse errors ===


class ParseError(SimpleconfError):
    """Base for structural errors found while parsing. Always carries a line number."""

    def __init__(self, code: str, message: str, line: int, **kwargs: Any) -> None:
        super().__init__(
            code=code,
            message=f"{message} at line {line}",
            details={"line": line},
            **kwargs,
        )

    @property
    def line(self) -> int:
        """1-based line number of the offending line."""
        return self.details["line"]


class MalformedSectionHeaderError(ParseError):
    """Raised when a section header has no closing ']'."""

    def __init__(self, line: int, **kwargs: Any) -> None:
        super().__init__(
            code="MALFORMED_SECTION_HEADER",
            message="Missing closing ']' in section header",
            line=line,
            **kwargs,
        )


class TrailingDataAfterSectionHeaderError(ParseError):
    """Raised when anything follows the closing ']' of a section header."""

    def __init__(self, line: int, **kwargs: Any) -> None:
        super().__init__(
            code="TRAILING_DATA_AFTER_SECTION_HEADER",
            message="Unexpected data after closing ']'",
            line=line,
            **kwargs,
        )


class EmptySectionNameError(ParseError):
    """Raised for a '[]' header."""

    def __init__(self, line: int, **kwargs: Any) -> None:
        super().__init__(
            code="EMPTY_SECTION_NAME",
            message="Empty section name",
            line=line,
            **kwargs,
        )


class NotAKeyValuePairError(ParseError):
    """Raised when a line is neither a comment, a section header nor a key-value pair."""

    def __init__(self, line: int, **kwargs: Any) -> None:
        super().__init__(
            code="NOT_A_KEY_VALUE_PAIR",
            message="Expected a comment, a section header or a key-value pair",
            line=line,
            **kwargs,
        )


class EmptyKeyError(ParseError):
    """Raised when the text before '=' is blank."""

    def __init__(self, line: int, **kwargs: Any) -> None:
        super().__init__(code="EMPTY_KEY", message="Empty key", line=line, **kwargs)


class NoActiveSectionError(ParseError):
    """Raised when a key-value pair appears before the first section header."""

    def __init__(self, line: int, **kwargs: Any) -> None:
        super().__init__(
            code="NO_ACTIVE_SECTION",
            message="Key-value pair outside of any section",
            line=line,
            **kwargs,
        )


# === Accessor errors ===


class NotFoundError(SimpleconfError):
    """Raised when a section or key does not exist.

    ``key`` is None when the section itself is missing.
    """

    def __init__(self, section: str, key: str | None = None, **kwargs: Any) -> None:
        if key is None:
            message = f"Section not found: [{section}]"
        else:
            message = f"Key not found: [{section}] {key}"
        super().__init__(
            code="NOT_FOUND",
            message=message,
            details={"section": section, "key": key},
            **kwargs,
        )

    @property
    def section(self) -> str:
        return self.details["section"]

    @property
    def key(self) -> str | None:
        return self.details["key"]


class NotBoolError(SimpleconfError):
    """Raised when a stored value is not one of the recognized boolean literals."""

    def __init__(self, section: str, key: str, value: str, **kwargs: Any) -> None:
        super().__init__(
            code="NOT_BOOL",
            message=f"Could not interpret [{section}] {key} = {value!r} as bool",
            details={"section": section, "key": key, "value": value},
            **kwargs,
        )

    @property
    def value(self) -> str:
        """The raw text that failed conversion."""
        return self.details["value"]


class NotNumericError(SimpleconfError):
    """Raised when a stored value cannot be parsed as an int or float."""

    def __init__(
        self,
        section: str,
        key: str,
        value: str,
        expected_type: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="NOT_NUMERIC",
            message=f"Could not interpret [{section}] {key} = {value!r} as {expected_type}",
            details={
                "section": section,
                "key": key,
                "value": value,
                "expected_type": expected_type,
            },
            **kwargs,
        )

    @property
    def value(self) -> str:
        """The raw text that failed conversion."""
        return self.details["value"]

    @property
    def expected_type(self) -> str:
        return self.details["expected_type"]


class ErrorCodes:
    """All simpleconf error codes as constants.

    Example:
        if error.code == ErrorCodes.NOT_FOUND:
            use_fallback()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    MALFORMED_SECTION_HEADER = "MALFORMED_SECTION_HEADER"
    TRAILING_DATA_AFTER_SECTION_HEADER = "TRAILING_DATA_AFTER_SECTION_HEADER"
    EMPTY_SECTION_NAME = "EMPTY_SECTION_NAME"
    NOT_A_KEY_VALUE_PAIR = "NOT_A_KEY_VALUE_PAIR"
    EMPTY_KEY = "EMPTY_KEY"
    NO_ACTIVE_SECTION = "NO_ACTIVE_SECTION"
    NOT_FOUND = "NOT_FOUND"
    NOT_BOOL = "NOT_BOOL"
    NOT_NUMERIC = "NOT_NUMERIC"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
