"""Tests for pycompdb.domain.patterns."""

from __future__ import annotations

import pytest

from pycompdb.domain.errors import ConfigError, PatternError
from pycompdb.domain.patterns import PatternSet


def test_any_pattern_matches() -> None:
    patterns = PatternSet([r".*\.c$", r".*\.cpp$"])

    assert patterns.matches("src/a.c")
    assert patterns.matches("src/b.cpp")
    assert not patterns.matches("src/c.h")


def test_patterns_are_not_anchored() -> None:
    assert PatternSet(["test"]).matches("src/tests/a.c")


def test_empty_set_matches_nothing() -> None:
    patterns = PatternSet([])

    assert not patterns
    assert not patterns.matches("")
    assert not patterns.matches("src/a.c")


def test_invalid_pattern_is_an_error() -> None:
    with pytest.raises(PatternError) as info:
        PatternSet([r".*\.c$", "(unclosed"])

    assert info.value.pattern == "(unclosed"
    assert isinstance(info.value, ConfigError)
