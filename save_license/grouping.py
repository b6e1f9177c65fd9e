"""Fold a flat comment stream into contiguous comment groups.

Grouping is a two-state machine driven left to right over the comments:

* ``Idle`` - no line-comment run is open.
* ``AccumulatingLineRun`` - a run of line-comments on consecutive lines is
  open; ``last_line`` is the start line of its most recent comment.

Block comments are always emitted as singleton groups. A line comment joins
the open run only when it starts exactly one line below the previous one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from .comments import Comment, CommentGroup


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class AccumulatingLineRun:
    last_line: int
    comments: Tuple[Comment, ...]

    def extend(self, comment: Comment) -> "AccumulatingLineRun":
        return AccumulatingLineRun(comment.start_line, self.comments + (comment,))


GroupingState = Union[Idle, AccumulatingLineRun]

IDLE = Idle()


def _start_run(comment: Comment) -> AccumulatingLineRun:
    return AccumulatingLineRun(comment.start_line, (comment,))


def transition(
    state: GroupingState, comment: Comment
) -> Tuple[GroupingState, List[CommentGroup]]:
    """Advance the grouping state by one comment.

    Returns the next state and the groups completed by this step, in source
    order (zero, one or two groups).
    """
    if isinstance(state, Idle):
        if comment.is_line:
            return _start_run(comment), []
        return IDLE, [(comment,)]

    if comment.is_line:
        if state.last_line + 1 == comment.start_line:
            return state.extend(comment), []
        return _start_run(comment), [state.comments]

    return IDLE, [state.comments, (comment,)]


def flush(state: GroupingState) -> List[CommentGroup]:
    """Close out the final state at end of input."""
    if isinstance(state, AccumulatingLineRun):
        return [state.comments]
    return []


def group_comments(comments: Iterable[Comment]) -> List[CommentGroup]:
    """Group an ordered comment sequence into comment groups."""
    groups: List[CommentGroup] = []
    state: GroupingState = IDLE
    for comment in comments:
        state, completed = transition(state, comment)
        groups.extend(completed)
    groups.extend(flush(state))
    return groups


__all__ = [
    "AccumulatingLineRun",
    "GroupingState",
    "Idle",
    "IDLE",
    "flush",
    "group_comments",
    "transition",
]
