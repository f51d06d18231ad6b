"""Whole-path exclusion of albums by regular expression."""

from __future__ import annotations

import re
from typing import Iterable, List, Pattern

from photoframe.config.exceptions import ExclusionPatternError


class ExclusionMatcher:
    """Decide whether an album path is on the skip list."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        """Compile the skip patterns.

        Args:
            patterns: Regular expressions that must match a whole album path.

        Raises:
            ExclusionPatternError: If any pattern fails to compile.
        """
        compiled: List[Pattern[str]] = []
        for pattern in patterns:
            try:
                compiled.append(re.compile(pattern))
            except re.error as exc:
                raise ExclusionPatternError(pattern, str(exc)) from exc
        self._patterns = tuple(compiled)

    def matches(self, path: str) -> bool:
        """Return True when ``path`` wholly matches at least one pattern."""
        return any(pattern.fullmatch(path) for pattern in self._patterns)


__all__ = ["ExclusionMatcher"]
