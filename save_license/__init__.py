"""
save-license: collect license comments from source files.

The package scans source files for comments, groups adjacent line comments
into blocks, keeps the blocks that look like license or copyright notices
and writes every distinct notice once to a single output file.

The code is organised into several modules:

* ``extractors`` - comment sources for each supported grammar (JavaScript
  via tree-sitter, and a lexer for C-family sources).
* ``grouping`` - the state machine that folds comments into groups.
* ``licenses`` - pattern-based selection of license-like groups.
* ``aggregate`` - first-seen-order deduplication across files.
* ``runner`` - the async entry point that ties a run together.
* ``cli`` - the ``save-license`` command.
"""

__version__ = "1.0.0"

from .aggregate import LicenseSet, MatchEvent, MatchOperation, aggregate_licenses, escape_preview
from .comments import Comment, CommentGroup, CommentKind, group_text
from .config import DEFAULT_OPTIONS, SaveLicenseOptions, load_options, make_options
from .errors import (
    ConfigurationError,
    SaveLicenseError,
    SinkUnwritable,
    SourceUnparseable,
    SourceUnreadable,
)
from .grouping import group_comments
from .licenses import filter_license_groups, get_licenses
from .matchers import DEFAULT_PATTERNS, RegexMatcher, TextMatcher
from .reporting import ConsoleReporter, RecordingReporter, ReportSink, RunSummary
from .runner import save_license, save_license_sync

__all__ = [
    "__version__",
    "Comment",
    "CommentGroup",
    "CommentKind",
    "ConfigurationError",
    "ConsoleReporter",
    "DEFAULT_OPTIONS",
    "DEFAULT_PATTERNS",
    "LicenseSet",
    "MatchEvent",
    "MatchOperation",
    "RecordingReporter",
    "RegexMatcher",
    "ReportSink",
    "RunSummary",
    "SaveLicenseError",
    "SaveLicenseOptions",
    "SinkUnwritable",
    "SourceUnparseable",
    "SourceUnreadable",
    "TextMatcher",
    "aggregate_licenses",
    "escape_preview",
    "filter_license_groups",
    "get_licenses",
    "group_comments",
    "group_text",
    "load_options",
    "make_options",
    "save_license",
    "save_license_sync",
]
