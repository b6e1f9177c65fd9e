"""Deduplicate license texts across files in first-seen order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List

from .comments import CommentGroup, group_text

PREVIEW_LENGTH = 10
ELLIPSIS = "..."

_ESCAPES: Dict[str, str] = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    '"': '\\"',
    "'": "\\'",
    "`": "\\`",
    "\\": "\\\\",
}

_ESCAPE_TABLE = str.maketrans(_ESCAPES)


def escape_text(text: str) -> str:
    """Escape control, quote and backslash characters for single-line display."""
    return text.translate(_ESCAPE_TABLE)


def escape_preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Return the escaped head of ``text``, with ``...`` when it was truncated."""
    head = text[:length]
    suffix = "" if len(head) == len(text) else ELLIPSIS
    return f"{escape_text(head)}{suffix}"


class MatchOperation(str, Enum):
    ADD = "add"
    MERGE = "merge"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MatchEvent:
    """One license group seen in one file."""

    file: str
    line: int
    column: int
    preview: str
    operation: MatchOperation


class LicenseSet:
    """Ordered set of unique license texts collected during one run."""

    def __init__(self) -> None:
        # dicts keep insertion order
        self._texts: Dict[str, None] = {}

    def add(self, text: str) -> MatchOperation:
        if text in self._texts:
            return MatchOperation.MERGE
        self._texts[text] = None
        return MatchOperation.ADD

    def __contains__(self, text: object) -> bool:
        return text in self._texts

    def __iter__(self) -> Iterator[str]:
        return iter(self._texts)

    def __len__(self) -> int:
        return len(self._texts)

    def texts(self) -> List[str]:
        return list(self._texts)

    def render(self) -> str:
        """Join the unique texts with one blank line between entries."""
        return "\n\n".join(self._texts)


def aggregate_licenses(
    license_set: LicenseSet, file: str, groups: Iterable[CommentGroup]
) -> List[MatchEvent]:
    """Merge one file's license groups into ``license_set``.

    Returns one event per group, in group order.
    """
    events: List[MatchEvent] = []
    for group in groups:
        text = group_text(group)
        operation = license_set.add(text)
        first = group[0]
        events.append(
            MatchEvent(
                file=file,
                line=first.start_line,
                column=first.start_column + 1,
                preview=escape_preview(text),
                operation=operation,
            )
        )
    return events


__all__ = [
    "LicenseSet",
    "MatchEvent",
    "MatchOperation",
    "aggregate_licenses",
    "escape_preview",
    "escape_text",
]
