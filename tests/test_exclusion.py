"""Tests for skip-list matching."""

import pytest

from photoframe.config import ConfigError, ExclusionPatternError
from photoframe.export.exclusion import ExclusionMatcher


def test_pattern_must_match_whole_path() -> None:
    matcher = ExclusionMatcher(["Trip"])

    assert matcher.matches("Trip")
    assert not matcher.matches("Trip/Day1")
    assert not matcher.matches("Old Trip")


def test_any_pattern_excludes() -> None:
    matcher = ExclusionMatcher(["Trip/.*", "Screenshots"])

    assert matcher.matches("Trip/Day1")
    assert matcher.matches("Screenshots")
    assert not matcher.matches("Family")


def test_no_patterns_match_nothing() -> None:
    assert not ExclusionMatcher().matches("anything")


def test_invalid_pattern_fails_at_construction() -> None:
    with pytest.raises(ExclusionPatternError) as excinfo:
        ExclusionMatcher(["ok", "(unclosed"])

    assert isinstance(excinfo.value, ConfigError)
    assert excinfo.value.pattern == "(unclosed"
    assert "(unclosed" in str(excinfo.value)
