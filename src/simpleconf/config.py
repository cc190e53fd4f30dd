"""Parsed configuration and its typed accessors."""

from __future__ import annotations

import re
from typing import IO, Any

from simpleconf.errors import NotBoolError, NotFoundError, NotNumericError
from simpleconf.files import FileOpener, open_file

__all__ = ["Config", "Section", "TRUE_LITERALS", "FALSE_LITERALS"]

Section = dict[str, str]

TRUE_LITERALS = frozenset({"true", "on", "yes", "y", "1"})
FALSE_LITERALS = frozenset({"false", "off", "no", "n", "0"})

# ASCII digits only, no "_" separators.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class Config(dict[str, Section]):
    """Mapping of section name to section, with typed ``get_*`` accessors.

    The mapping can be inspected directly (``config["foo"]["a"]``). None of
    the accessors modify it, so a finished Config may be shared between
    threads without locking.

    Every ``*_default`` accessor returns its fallback only when the section
    or key is missing. A stored value that fails conversion still raises.
    """

    def __init__(
        self,
        sections: dict[str, Section] | None = None,
        *,
        opener: FileOpener | None = None,
    ) -> None:
        super().__init__(sections or {})
        self._opener: FileOpener = opener or open_file

    # -- strings --

    def get_section(self, name: str) -> Section:
        """Return the raw section called ``name``.

        Raises:
            NotFoundError: If no such section exists.
        """
        try:
            return self[name]
        except KeyError:
            raise NotFoundError(section=name) from None

    def get_string(self, section: str, key: str) -> str:
        """Return the value stored under ``[section] key``.

        Raises:
            NotFoundError: If the section or the key does not exist.
        """
        values = self.get_section(section)
        try:
            return values[key]
        except KeyError:
            raise NotFoundError(section=section, key=key) from None

    def get_string_default(self, section: str, key: str, default: str) -> str:
        try:
            return self.get_string(section, key)
        except NotFoundError:
            return default

    # -- numbers --

    def get_int(self, section: str, key: str) -> int:
        """Parse ``[section] key`` as a base-10 integer.

        Raises:
            NotFoundError: If the section or the key does not exist.
            NotNumericError: If the value is not an integer literal.
        """
        value = self.get_string(section, key)
        if not _INT_PATTERN.fullmatch(value):
            raise NotNumericError(section, key, value, "int")
        return int(value, 10)

    def get_int_default(self, section: str, key: str, default: int) -> int:
        try:
            return self.get_int(section, key)
        except NotFoundError:
            return default

    def get_float(self, section: str, key: str) -> float:
        """Parse ``[section] key`` as a float.

        Raises:
            NotFoundError: If the section or the key does not exist.
            NotNumericError: If the value is not a float literal.
        """
        value = self.get_string(section, key)
        if not _FLOAT_PATTERN.fullmatch(value):
            raise NotNumericError(section, key, value, "float")
        return float(value)

    def get_float_default(self, section: str, key: str, default: float) -> float:
        try:
            return self.get_float(section, key)
        except NotFoundError:
            return default

    # -- booleans --

    def get_bool(self, section: str, key: str) -> bool:
        """Interpret ``[section] key`` as a boolean.

        ``true``, ``on``, ``yes``, ``y`` and ``1`` are true; ``false``,
        ``off``, ``no``, ``n`` and ``0`` are false. Matching ignores case.

        Raises:
            NotFoundError: If the section or the key does not exist.
            NotBoolError: For any other value.
        """
        value = self.get_string(section, key)
        lowered = value.lower()
        if lowered in TRUE_LITERALS:
            return True
        if lowered in FALSE_LITERALS:
            return False
        raise NotBoolError(section, key, value)

    def get_bool_default(self, section: str, key: str, default: bool) -> bool:
        try:
            return self.get_bool(section, key)
        except NotFoundError:
            return default

    # -- files --

    def get_file(
        self,
        section: str,
        key: str,
        mode: str = "r",
        *,
        perm: int = 0o666,
        encoding: str | None = None,
        opener: FileOpener | None = None,
    ) -> IO[Any]:
        """Open the file whose path is stored under ``[section] key``.

        The returned file object belongs to the caller, who must close it
        (typically with a ``with`` block).

        Args:
            section: Section name.
            key: Key holding the path.
            mode: Mode string passed to the opener, as for ``open``.
            perm: Permission bits used when the file is created.
            encoding: Text encoding for text modes.
            opener: Overrides the opener this Config was built with.

        Raises:
            NotFoundError: If the section or the key does not exist.
            OSError: If the file cannot be opened.
        """
        path = self.get_string(section, key)
        return (opener or self._opener)(path, mode, perm, encoding)

    def get_file_readonly(self, section: str, key: str, *, opener: FileOpener | None = None) -> IO[Any]:
        """Like ``get_file`` but always opens for binary reading."""
        return self.get_file(section, key, "rb", opener=opener)
