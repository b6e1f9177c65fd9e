"""Run save-license over a list of source files."""

from __future__ import annotations

import asyncio
import logging
import os
import time
from pathlib import Path
from typing import Optional, Sequence, Union

from .aggregate import LicenseSet, aggregate_licenses
from .config import DEFAULT_OPTIONS, SaveLicenseOptions
from .errors import SinkUnwritable, SourceUnreadable
from .extractors import CommentExtractor, get_extractor
from .licenses import get_licenses
from .matchers import RegexMatcher
from .reporting import ConsoleReporter, ReportSink, RunSummary

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _read_text(path: Path, encoding: str) -> str:
    return path.read_text(encoding=encoding)


async def read_source(path: PathLike, encoding: str) -> str:
    """Read a source file without blocking the event loop."""
    source_path = Path(path)
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, _read_text, source_path, encoding)
    except FileNotFoundError as exc:
        raise SourceUnreadable(
            f"Source file '{source_path}' does not exist",
            path=str(source_path),
        ) from exc
    except UnicodeDecodeError as exc:
        raise SourceUnreadable(
            f"Source file '{source_path}' is not valid {encoding}: {exc.reason}",
            path=str(source_path),
            hint="Pass the file encoding with --encoding",
        ) from exc
    except OSError as exc:
        raise SourceUnreadable(
            f"Could not read '{source_path}': {exc.strerror or exc}",
            path=str(source_path),
        ) from exc


def write_output(path: PathLike, text: str, encoding: str) -> None:
    """Write the aggregated licenses in a single call."""
    out_path = Path(path)
    try:
        out_path.write_text(text, encoding=encoding, newline="")
    except (OSError, UnicodeEncodeError) as exc:
        raise SinkUnwritable(
            f"Could not write '{out_path}': {exc}",
            path=str(out_path),
        ) from exc


async def save_license(
    files: Union[PathLike, Sequence[PathLike]],
    out_file: PathLike,
    options: Optional[SaveLicenseOptions] = None,
    *,
    reporter: Optional[ReportSink] = None,
    extractor: Optional[CommentExtractor] = None,
) -> RunSummary:
    """
    Collect the unique license comments of ``files`` into ``out_file``.

    Files are processed one at a time in the given order. The first read or
    parse failure aborts the run before anything is written.

    Args:
        files: One path or an ordered sequence of paths
        out_file: Destination for the unique license texts
        options: Patterns, encoding and grammar (defaults when omitted)
        reporter: Receives start, per-match and finish reports
        extractor: Overrides the extractor selected by ``options.grammar``

    Returns:
        Summary with the output path, unique license count and elapsed time
    """
    if isinstance(files, (str, os.PathLike)):
        files = [files]
    options = options or DEFAULT_OPTIONS
    reporter = reporter or ConsoleReporter()
    extractor = extractor or get_extractor(options.grammar)
    matcher = RegexMatcher(options.patterns)

    started = time.monotonic()
    reporter.start(options.patterns, options.encoding)

    license_set = LicenseSet()
    for file in files:
        source = await read_source(file, options.encoding)
        groups = get_licenses(source, matcher, extractor=extractor, path=str(file))
        for event in aggregate_licenses(license_set, str(file), groups):
            reporter.match(event)

    write_output(out_file, license_set.render(), options.encoding)
    logger.info("Wrote %d unique licenses to %s", len(license_set), out_file)

    summary = RunSummary(
        output_path=Path(out_file),
        unique_count=len(license_set),
        elapsed_seconds=time.monotonic() - started,
    )
    reporter.finish(summary)
    return summary


def save_license_sync(
    files: Union[PathLike, Sequence[PathLike]],
    out_file: PathLike,
    options: Optional[SaveLicenseOptions] = None,
    **kwargs,
) -> RunSummary:
    """Blocking wrapper around :func:`save_license`."""
    return asyncio.run(save_license(files, out_file, options, **kwargs))


__all__ = ["read_source", "save_license", "save_license_sync", "write_output"]
