"""Comment extractor interface shared by all grammars."""

from __future__ import annotations

import re
from typing import List, Protocol

from ..comments import Comment

_NEWLINES = re.compile(r"\r\n?")


class CommentExtractor(Protocol):
    """Turns source text into the ordered list of its comments.

    Implementations raise :class:`~save_license.errors.SourceUnparseable`
    when the text is not valid for their grammar, and return an empty list
    when there are no comments.
    """

    name: str

    def extract(self, source: str, path: str = "") -> List[Comment]:
        ...


def normalize_newlines(source: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return _NEWLINES.sub("\n", source)


__all__ = ["CommentExtractor", "normalize_newlines"]
