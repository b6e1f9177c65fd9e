"""Structured metadata for scanned source comments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class CommentKind(str, Enum):
    """Comment style as reported by a comment extractor."""

    LINE = "Line"
    BLOCK = "Block"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Comment:
    """A single comment scanned from source code.

    ``text`` is the comment body without its delimiters (``//``, ``/*``,
    ``*/``). ``start_line`` is 1-based and ``start_column`` is 0-based, both
    pointing at the opening delimiter.
    """

    kind: CommentKind
    text: str
    start_line: int
    start_column: int = 0

    @property
    def is_line(self) -> bool:
        return self.kind is CommentKind.LINE


# A non-empty run of comments that belong together: either adjacent
# line-comments or a single block-comment.
CommentGroup = Tuple[Comment, ...]


def group_text(group: CommentGroup) -> str:
    """Return the license text of a group: comment bodies joined by newlines."""
    return "\n".join(comment.text for comment in group)


__all__ = ["Comment", "CommentGroup", "CommentKind", "group_text"]
