"""Comment extractors keyed by grammar name."""

from __future__ import annotations

from typing import Callable, Dict, List

from ..errors import ConfigurationError
from .base import CommentExtractor, normalize_newlines
from .cstyle import CStyleExtractor, CStyleLexer
from .javascript import JavaScriptExtractor

DEFAULT_GRAMMAR = "javascript"

_EXTRACTORS: Dict[str, Callable[[], CommentExtractor]] = {
    JavaScriptExtractor.name: JavaScriptExtractor,
    CStyleExtractor.name: CStyleExtractor,
}


def available_grammars() -> List[str]:
    return sorted(_EXTRACTORS)


def get_extractor(name: str = DEFAULT_GRAMMAR) -> CommentExtractor:
    """Instantiate the extractor registered for ``name``."""
    try:
        factory = _EXTRACTORS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown grammar '{name}'",
            hint=f"Available grammars: {', '.join(available_grammars())}",
        ) from None
    return factory()


__all__ = [
    "CStyleExtractor",
    "CStyleLexer",
    "CommentExtractor",
    "DEFAULT_GRAMMAR",
    "JavaScriptExtractor",
    "available_grammars",
    "get_extractor",
    "normalize_newlines",
]
