"""
save-license CLI entry point.

Collects the license comments of the given source files into one output
file:

    save-license dist/*.js -o THIRD_PARTY_LICENSES.txt
"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from save_license import __version__
from save_license.config import apply_cli_overrides, load_options
from save_license.errors import SaveLicenseError
from save_license.extractors import available_grammars
from save_license.runner import save_license

from .errors import CLIError, CLIValidationError, handle_cli_exception


LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_logging(level_name: Optional[str]) -> None:
    """Route save_license log records to stderr at the requested level.

    Falls back to ``SAVE_LICENSE_LOG_LEVEL`` and then to ``warning``. Calling
    it again only changes the level; the handler is installed once.
    """
    name = (level_name or os.getenv("SAVE_LICENSE_LOG_LEVEL") or "warning").lower()
    package_logger = logging.getLogger("save_license")
    package_logger.setLevel(LOG_LEVELS.get(name, logging.WARNING))

    if not any(handler.get_name() == "save-license" for handler in package_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        handler.set_name("save-license")
        package_logger.addHandler(handler)
    # the report goes to stdout; keep log records off the root logger
    package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='save-license',
        description='Collect unique license comments from source files into one file.',
    )
    parser.add_argument('files', nargs='*', metavar='FILE', help='Source files to scan, in order')
    parser.add_argument('-o', '--out', required=True, help='Output file for the unique licenses')
    parser.add_argument(
        '-p', '--pattern',
        action='append',
        dest='patterns',
        metavar='REGEX',
        help='License detection pattern (repeatable; replaces the default set)',
    )
    parser.add_argument('-e', '--encoding', help='Text encoding for input and output (default: utf-8)')
    parser.add_argument(
        '-g', '--grammar',
        choices=available_grammars(),
        help='Comment grammar of the input files (default: javascript)',
    )
    parser.add_argument('--config', type=Path, help='Path to a save-license.toml or .savelicenserc file')
    parser.add_argument(
        '--log-level',
        choices=sorted(LOG_LEVELS),
        help='Logging level (default: SAVE_LICENSE_LOG_LEVEL or warning)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Show tracebacks on errors')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def cmd_save(args: argparse.Namespace) -> None:
    """Resolve options from config and flags, then run the collection."""
    if not args.files:
        raise CLIValidationError(
            "No input files given",
            hint="Pass at least one FILE to scan",
        )
    out_path = Path(args.out)
    if any(Path(file).resolve() == out_path.resolve() for file in args.files):
        raise CLIValidationError(
            f"Output file '{out_path}' is also an input file",
            hint="Choose a different --out path",
            context={'out': str(out_path)},
        )

    options = load_options(Path.cwd(), args.config)
    options = apply_cli_overrides(
        options,
        patterns=args.patterns,
        encoding=args.encoding,
        grammar=args.grammar,
    )
    asyncio.run(save_license(args.files, out_path, options))


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        >>> main(['src/index.js', '-o', 'LICENSES.txt'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    try:
        cmd_save(args)
    except (SaveLicenseError, CLIError) as exc:
        handle_cli_exception(exc, verbose=args.verbose)


__all__ = ["build_parser", "cmd_save", "main"]
