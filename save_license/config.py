"""Run configuration for save-license."""

from __future__ import annotations

import codecs
import json
import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from re import Pattern
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from .errors import ConfigurationError
from .extractors import DEFAULT_GRAMMAR, available_grammars
from .matchers import DEFAULT_PATTERNS, compile_patterns

logger = logging.getLogger(__name__)

CONFIG_CANDIDATES = ("save-license.toml", ".savelicenserc")


@dataclass(frozen=True)
class SaveLicenseOptions:
    """Options applied to one run."""

    patterns: Tuple[Pattern[str], ...] = field(default=DEFAULT_PATTERNS)
    encoding: str = "utf-8"
    grammar: str = DEFAULT_GRAMMAR


DEFAULT_OPTIONS = SaveLicenseOptions()


def validate_encoding(encoding: str) -> str:
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigurationError(
            f"Unknown text encoding '{encoding}'",
            hint="Use a codec name such as utf-8, latin-1 or cp1252",
        ) from exc
    return encoding


def validate_grammar(grammar: str) -> str:
    if grammar not in available_grammars():
        raise ConfigurationError(
            f"Unknown grammar '{grammar}'",
            hint=f"Available grammars: {', '.join(available_grammars())}",
        )
    return grammar


def make_options(
    patterns: Optional[Sequence[Union[str, Pattern[str]]]] = None,
    encoding: Optional[str] = None,
    grammar: Optional[str] = None,
    *,
    base: SaveLicenseOptions = DEFAULT_OPTIONS,
) -> SaveLicenseOptions:
    """Build validated options; unset values are taken from ``base``."""
    return SaveLicenseOptions(
        patterns=compile_patterns(patterns) if patterns is not None else base.patterns,
        encoding=validate_encoding(encoding) if encoding else base.encoding,
        grammar=validate_grammar(grammar) if grammar else base.grammar,
    )


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        if not explicit.exists():
            raise ConfigurationError(
                f"Configuration file '{explicit}' does not exist",
                path=str(explicit),
            )
        return explicit
    for candidate in CONFIG_CANDIDATES:
        path = root / candidate
        if path.exists():
            return path
    return None


def _parse_options(data: Dict[str, Any], path: Path) -> SaveLicenseOptions:
    section = data.get("options") or {}
    if not isinstance(section, dict):
        raise ConfigurationError("'options' must be a table", path=str(path))

    patterns_raw = section.get("patterns")
    patterns: Optional[Sequence[str]]
    if patterns_raw is None:
        patterns = None
    elif isinstance(patterns_raw, str):
        patterns = [patterns_raw]
    elif isinstance(patterns_raw, (list, tuple)):
        patterns = [str(item) for item in patterns_raw]
    else:
        raise ConfigurationError("'patterns' must be a string or a list of strings", path=str(path))

    encoding = section.get("encoding")
    grammar = section.get("grammar")
    return make_options(
        patterns,
        str(encoding) if encoding else None,
        str(grammar) if grammar else None,
    )


def load_options(root: Path, explicit: Optional[Path] = None) -> SaveLicenseOptions:
    """Load options from ``save-license.toml`` or ``.savelicenserc`` in ``root``."""
    config_path = locate_config_file(root.resolve(), explicit)
    if config_path is None:
        return DEFAULT_OPTIONS

    logger.debug("Loading configuration from %s", config_path)
    try:
        if config_path.suffix == ".toml":
            data = _read_toml_config(config_path)
        else:
            data = _read_json_config(config_path)
    except (OSError, ValueError) as exc:
        # tomllib.TOMLDecodeError and json.JSONDecodeError are ValueErrors
        raise ConfigurationError(
            f"Could not read configuration: {exc}",
            path=str(config_path),
        ) from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration root must be a table or object",
            path=str(config_path),
        )
    return _parse_options(data, config_path)


def apply_cli_overrides(
    options: SaveLicenseOptions,
    *,
    patterns: Optional[Sequence[str]] = None,
    encoding: Optional[str] = None,
    grammar: Optional[str] = None,
) -> SaveLicenseOptions:
    if patterns is None and not (encoding or grammar):
        return options
    return make_options(patterns, encoding, grammar, base=options)


__all__ = [
    "CONFIG_CANDIDATES",
    "DEFAULT_OPTIONS",
    "SaveLicenseOptions",
    "apply_cli_overrides",
    "load_options",
    "locate_config_file",
    "make_options",
    "validate_encoding",
    "validate_grammar",
]
