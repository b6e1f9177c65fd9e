"""
Error handling for the save-license CLI.

Formats library errors and argument problems for terminal output and maps
them to exit codes.
"""

import os
import sys
import traceback
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from save_license.errors import ConfigurationError

EXIT_FAILURE = 1
EXIT_USAGE = 2

_TRACE_FRAMES = 8
_TRUTHY = {"1", "true", "yes", "on"}


class CLIError(Exception):
    """
    Base exception for CLI-only failures.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code
        hint: Optional suggestion for resolving the error
        context: Additional metadata about the error
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIValidationError(CLIError):
    """
    Invalid command arguments or options.

    Raised when:
    - No input files are given
    - The output path points at an input file
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_VALIDATION_ERROR')
        super().__init__(message, **kwargs)


def format_cli_error(
    exc: BaseException,
    *,
    verbose: bool = False,
) -> str:
    """
    Format exception for CLI display with context and hints.

    Library errors provide their own ``format()``; CLI errors are rendered
    with their code and hint; anything else falls back to type and message.

    Examples:
        >>> try:
        ...     raise CLIValidationError("No input files", hint="Pass at least one FILE")
        ... except Exception as e:
        ...     print(format_cli_error(e))
        Error [CLI_VALIDATION_ERROR]: No input files
        Hint: Pass at least one FILE
    """
    lines = []

    formatter = getattr(exc, "format", None)
    if callable(formatter) and not isinstance(exc, CLIError):
        lines.append(f"Error: {formatter()}")
    elif isinstance(exc, CLIError):
        lines.append(f"Error [{exc.code}]: {exc.message}")
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
        if verbose and exc.context:
            lines.append("\nContext:")
            for key, value in exc.context.items():
                lines.append(f"  {key}: {value}")
    else:
        lines.append(f"Error: {exc.__class__.__name__}: {exc}")

    return "\n".join(lines)


def format_traceback_excerpt(exc: BaseException, frames: int = _TRACE_FRAMES) -> str:
    """Render the innermost ``frames`` stack entries of ``exc``."""
    return "".join(traceback.format_exception(exc, limit=-frames)).rstrip()


@dataclass(frozen=True)
class DebugFlags:
    """
    Error-reporting switches.

    ``SAVE_LICENSE_VERBOSE`` adds context and a traceback to error output,
    ``SAVE_LICENSE_RERAISE`` lets the exception escape ``main``, and
    ``SAVE_LICENSE_DEBUG`` turns on both.
    """

    verbose: bool = False
    reraise: bool = False

    @classmethod
    def from_env(cls, verbose: bool = False, environ: Optional[Mapping[str, str]] = None) -> "DebugFlags":
        environ = os.environ if environ is None else environ
        enabled = {
            name for name in ("VERBOSE", "RERAISE", "DEBUG")
            if environ.get(f"SAVE_LICENSE_{name}", "").strip().lower() in _TRUTHY
        }
        return cls(
            verbose=verbose or bool(enabled & {"VERBOSE", "DEBUG"}),
            reraise=bool(enabled & {"RERAISE", "DEBUG"}),
        )


def exit_code_for(exc: BaseException) -> int:
    """Bad options exit like argparse usage errors; failed runs exit with 1."""
    if isinstance(exc, (CLIValidationError, ConfigurationError)):
        return EXIT_USAGE
    return EXIT_FAILURE


def handle_cli_exception(exc: BaseException, *, verbose: bool = False) -> None:
    """Print ``exc`` to stderr and exit, unless re-raising is enabled."""
    flags = DebugFlags.from_env(verbose)
    if flags.reraise:
        raise exc

    message = format_cli_error(exc, verbose=flags.verbose)
    if flags.verbose:
        message = f"{message}\n\nTraceback:\n{format_traceback_excerpt(exc)}"
    print(message, file=sys.stderr)
    sys.exit(exit_code_for(exc))
