"""Tests for the simpleconf public API surface."""

import simpleconf


class TestPublicAPI:
    """Every public component must be importable from ``import simpleconf``."""

    def test_all_names_resolve(self):
        for name in simpleconf.__all__:
            assert getattr(simpleconf, name) is not None, name

    def test_all_has_no_duplicates(self):
        assert len(simpleconf.__all__) == len(set(simpleconf.__all__))

    def test_entry_points(self):
        from simpleconf import Config, load, load_file, loads, parse

        assert callable(parse)
        assert callable(loads)
        assert callable(load)
        assert callable(load_file)
        assert issubclass(Config, dict)

    def test_errors_exported(self):
        from simpleconf import NotBoolError, NotFoundError, NotNumericError, ParseError, SimpleconfError

        for cls in (NotBoolError, NotFoundError, NotNumericError, ParseError):
            assert issubclass(cls, SimpleconfError)

    def test_version(self):
        assert isinstance(simpleconf.__version__, str)
