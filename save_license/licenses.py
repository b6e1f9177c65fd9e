"""Select license-like comment groups from source text."""

from __future__ import annotations

import logging
import re
from re import Pattern
from typing import Iterable, List, Optional, Sequence, Union

from .comments import CommentGroup
from .extractors import CommentExtractor, get_extractor, normalize_newlines
from .grouping import group_comments
from .matchers import DEFAULT_PATTERNS, RegexMatcher, TextMatcher

logger = logging.getLogger(__name__)

MatcherLike = Union[TextMatcher, Pattern[str], Sequence[Pattern[str]]]


def _as_matcher(matcher: MatcherLike) -> TextMatcher:
    if isinstance(matcher, re.Pattern):
        return RegexMatcher((matcher,))
    if hasattr(matcher, "matches"):
        return matcher  # type: ignore[return-value]
    return RegexMatcher(matcher)  # type: ignore[arg-type]


def is_license_group(group: CommentGroup, matcher: TextMatcher) -> bool:
    """True when any single comment body in the group satisfies the matcher."""
    return any(matcher.matches(comment.text) for comment in group)


def filter_license_groups(
    groups: Iterable[CommentGroup], matcher: MatcherLike = DEFAULT_PATTERNS
) -> List[CommentGroup]:
    """Keep the groups that look like license notices, in source order."""
    resolved = _as_matcher(matcher)
    return [group for group in groups if is_license_group(group, resolved)]


def get_licenses(
    source: str,
    matcher: MatcherLike = DEFAULT_PATTERNS,
    *,
    extractor: Optional[CommentExtractor] = None,
    path: str = "",
) -> List[CommentGroup]:
    """Extract, group and filter the license comment groups of one source text."""
    extractor = extractor or get_extractor("javascript")
    comments = extractor.extract(normalize_newlines(source), path)
    groups = group_comments(comments)
    licenses = filter_license_groups(groups, matcher)
    logger.debug(
        "%s: %d comments, %d groups, %d license groups",
        path or "<source>",
        len(comments),
        len(groups),
        len(licenses),
    )
    return licenses


__all__ = ["filter_license_groups", "get_licenses", "is_license_group"]
