"""JavaScript comment extraction backed by tree-sitter."""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional

import tree_sitter_javascript
from tree_sitter import Language, Parser

from ..comments import Comment, CommentKind
from ..errors import SourceUnparseable

logger = logging.getLogger(__name__)

JS_LANGUAGE = Language(tree_sitter_javascript.language())

COMMENT_NODES = frozenset({"comment", "html_comment"})
HTML_COMMENT_OPENERS = ("<!--", "-->")


def _walk(node: Any) -> Iterator[Any]:
    """Yield every node of the subtree in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def _first_error(root: Any) -> Optional[Any]:
    for node in _walk(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return None


class JavaScriptExtractor:
    """Reads ``//``, ``/* */`` and HTML-like comments from a JavaScript syntax tree."""

    name = "javascript"

    def __init__(self) -> None:
        self._parser = Parser(JS_LANGUAGE)

    def extract(self, source: str, path: str = "") -> List[Comment]:
        source_bytes = source.encode("utf-8")
        tree = self._parser.parse(source_bytes)
        root = tree.root_node

        if root.has_error:
            error = _first_error(root) or root
            raise SourceUnparseable(
                "Source is not valid JavaScript",
                path=path or None,
                line=error.start_point[0] + 1,
                column=self._char_column(source_bytes, error) + 1,
                hint="Select another grammar with --grammar",
            )

        comments: List[Comment] = []
        for node in _walk(root):
            if node.type not in COMMENT_NODES:
                continue
            comment = self._to_comment(source_bytes, node)
            if comment is None:
                logger.debug("Skipping unsupported comment form at line %d", node.start_point[0] + 1)
                continue
            comments.append(comment)
        return comments

    @staticmethod
    def _char_column(source_bytes: bytes, node: Any) -> int:
        # tree-sitter columns count bytes; report characters instead
        byte_column = node.start_point[1]
        line_start = node.start_byte - byte_column
        return len(source_bytes[line_start:node.start_byte].decode("utf-8"))

    def _to_comment(self, source_bytes: bytes, node: Any) -> Optional[Comment]:
        raw = source_bytes[node.start_byte:node.end_byte].decode("utf-8")
        if raw.startswith("//"):
            kind = CommentKind.LINE
            text = raw[2:]
        elif raw.startswith("/*") and raw.endswith("*/") and len(raw) >= 4:
            kind = CommentKind.BLOCK
            text = raw[2:-2]
        elif raw.startswith(HTML_COMMENT_OPENERS):
            # script-mode <!-- and --> comments run to the end of the line
            kind = CommentKind.LINE
            text = raw[4:] if raw.startswith("<!--") else raw[3:]
        else:
            return None
        return Comment(
            kind=kind,
            text=text,
            start_line=node.start_point[0] + 1,
            start_column=self._char_column(source_bytes, node),
        )


__all__ = ["JavaScriptExtractor", "JS_LANGUAGE"]
