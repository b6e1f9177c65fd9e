"""Text matchers used to recognise license-like comments."""

from __future__ import annotations

import re
from re import Pattern
from typing import Iterable, Protocol, Sequence, Tuple, Union

from .errors import ConfigurationError

PATTERN_FLAGS = re.IGNORECASE | re.MULTILINE

DEFAULT_PATTERN_SOURCE = (
    r"^!|^@(preserve|cc_on)\b|\b(MIT|MPL|GPL|License|Copyright)\b|\W\(c\)|©"
)

DEFAULT_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(DEFAULT_PATTERN_SOURCE, PATTERN_FLAGS),
)


class TextMatcher(Protocol):
    """Predicate over a comment body."""

    def matches(self, text: str) -> bool:
        ...


class RegexMatcher:
    """Matches when any of the configured patterns is found in the text."""

    def __init__(self, patterns: Iterable[Pattern[str]]):
        self.patterns: Tuple[Pattern[str], ...] = tuple(patterns)

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)

    def __repr__(self) -> str:
        return f"RegexMatcher({describe_patterns(self.patterns)!r})"


def compile_pattern(pattern: Union[str, Pattern[str]]) -> Pattern[str]:
    """Compile a pattern string with case-insensitive, multiline semantics.

    Already-compiled patterns are returned unchanged so callers keep control
    over their flags.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern, PATTERN_FLAGS)
    except re.error as exc:
        raise ConfigurationError(
            f"Invalid license pattern {pattern!r}: {exc}",
            hint="Patterns use Python regular expression syntax",
        ) from exc


def compile_patterns(
    patterns: Iterable[Union[str, Pattern[str]]]
) -> Tuple[Pattern[str], ...]:
    compiled = tuple(compile_pattern(pattern) for pattern in patterns)
    if not compiled:
        raise ConfigurationError("At least one license pattern is required")
    return compiled


def describe_patterns(patterns: Sequence[Pattern[str]]) -> str:
    return ", ".join(pattern.pattern for pattern in patterns)


__all__ = [
    "DEFAULT_PATTERNS",
    "DEFAULT_PATTERN_SOURCE",
    "PATTERN_FLAGS",
    "RegexMatcher",
    "TextMatcher",
    "compile_pattern",
    "compile_patterns",
    "describe_patterns",
]
