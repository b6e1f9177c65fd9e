"""
Report sinks for save-license runs.

A sink receives three kinds of calls during a run: ``start`` once with the
resolved options, ``match`` for every license group found, and ``finish``
once after the output file has been written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from re import Pattern
from typing import List, Optional, Protocol, Sequence, Tuple

from rich.console import Console

from .aggregate import MatchEvent, escape_text
from .matchers import describe_patterns


@dataclass(frozen=True)
class RunSummary:
    output_path: Path
    unique_count: int
    elapsed_seconds: float


class ReportSink(Protocol):
    def start(self, patterns: Sequence[Pattern[str]], encoding: str) -> None:
        ...

    def match(self, event: MatchEvent) -> None:
        ...

    def finish(self, summary: RunSummary) -> None:
        ...


class ConsoleReporter:
    """
    Print run progress in the classic save-license layout.

    Examples:
        >>> reporter = ConsoleReporter()
        >>> reporter.match(MatchEvent("a.js", 12, 1, " Copyright...", MatchOperation.ADD))  # doctest: +SKIP
          - a.js(12, 1)  Copyright... [add]
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False, soft_wrap=True, emoji=False)

    def _print(self, message: str = "") -> None:
        self.console.print(message, markup=False)

    def start(self, patterns: Sequence[Pattern[str]], encoding: str) -> None:
        self._print("# Start save-license")
        self._print(f"  - Patterns: {describe_patterns(patterns)}")
        self._print(f'  - Encoding: "{escape_text(encoding)}"')
        self._print()
        self._print("# Read licenses")

    def match(self, event: MatchEvent) -> None:
        self._print(
            f"  - {event.file}({event.line}, {event.column}) {event.preview} [{event.operation}]"
        )

    def finish(self, summary: RunSummary) -> None:
        self._print()
        self._print("# Finish")
        self._print(f"  - Out: {summary.output_path}")
        self._print(f"  - Count: {summary.unique_count}")
        self._print(f"  - Time: {summary.elapsed_seconds:.3f}s")


@dataclass
class RecordingReporter:
    """Keeps every report call in memory."""

    started: Optional[Tuple[Tuple[Pattern[str], ...], str]] = None
    events: List[MatchEvent] = field(default_factory=list)
    summary: Optional[RunSummary] = None

    def start(self, patterns: Sequence[Pattern[str]], encoding: str) -> None:
        self.started = (tuple(patterns), encoding)

    def match(self, event: MatchEvent) -> None:
        self.events.append(event)

    def finish(self, summary: RunSummary) -> None:
        self.summary = summary

    @property
    def operations(self) -> List[str]:
        return [str(event.operation) for event in self.events]


__all__ = ["ConsoleReporter", "RecordingReporter", "ReportSink", "RunSummary"]
