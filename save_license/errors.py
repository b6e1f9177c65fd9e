"""Unified error model for save-license."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorLocation:
    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def describe(self) -> str:
        if self.path and self.line is not None and self.column is not None:
            return f"{self.path}:{self.line}:{self.column}"
        if self.path and self.line is not None:
            return f"{self.path}:{self.line}"
        if self.path:
            return self.path
        return "unknown location"


class SaveLicenseError(Exception):
    """Base class for all errors surfaced to users."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.location = ErrorLocation(path=path, line=line, column=column)
        self.path = path
        self.line = line
        self.column = column
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        components = [self.message]
        meta_parts = []
        location_desc = self.location.describe()
        if location_desc != "unknown location":
            meta_parts.append(location_desc)
        if self.code:
            meta_parts.append(self.code)
        if meta_parts:
            components[-1] = f"{components[-1]} ({'; '.join(meta_parts)})"
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(part for part in components if part)


class SourceUnreadable(SaveLicenseError):
    """Raised when an input file is missing, unreadable or cannot be decoded."""

    code = "SOURCE_UNREADABLE"


class SourceUnparseable(SaveLicenseError):
    """Raised when source text is not valid for the selected comment grammar."""

    code = "SOURCE_UNPARSEABLE"


class SinkUnwritable(SaveLicenseError):
    """Raised when the output file cannot be written."""

    code = "SINK_UNWRITABLE"


class ConfigurationError(SaveLicenseError):
    """Raised for invalid patterns, encodings, grammars or config files."""

    code = "CONFIGURATION_ERROR"


__all__ = [
    "SaveLicenseError",
    "SourceUnreadable",
    "SourceUnparseable",
    "SinkUnwritable",
    "ConfigurationError",
    "ErrorLocation",
]
