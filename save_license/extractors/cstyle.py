"""Comment scanner for C-family sources.

Understands ``//`` line comments, ``/* */`` block comments, and the string
and character literals that can hide comment markers (C, C++, C#, Java,
Go). It does not validate anything else about the source. Regular
expression literals and unquoted CSS ``url()`` values are not recognised,
so JavaScript, TypeScript and CSS sources belong to other grammars.
"""

from __future__ import annotations

from typing import List, Optional

from ..comments import Comment, CommentKind
from ..errors import SourceUnparseable


class CStyleLexer:
    """Single-pass scanner producing the comments of one source text."""

    def __init__(self, source: str, path: str = ""):
        self.source = source
        self.path = path
        self.pos = 0
        self.line = 1
        self.column = 0
        self.comments: List[Comment] = []

    def error(self, message: str, line: int, column: int) -> SourceUnparseable:
        return SourceUnparseable(
            message,
            path=self.path or None,
            line=line,
            column=column + 1,
        )

    def peek(self, offset: int = 0) -> Optional[str]:
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self) -> Optional[str]:
        if self.pos >= len(self.source):
            return None

        char = self.source[self.pos]
        self.pos += 1

        if char == '\n':
            self.line += 1
            self.column = 0
        else:
            self.column += 1

        return char

    def read_line_comment(self) -> None:
        line, column = self.line, self.column
        self.advance()  # /
        self.advance()  # /
        chars = []
        while self.peek() is not None and self.peek() != '\n':
            chars.append(self.advance())
        self.comments.append(Comment(CommentKind.LINE, ''.join(chars), line, column))

    def read_block_comment(self) -> None:
        line, column = self.line, self.column
        self.advance()  # /
        self.advance()  # *
        chars = []
        while True:
            if self.peek() is None:
                raise self.error("Unterminated block comment", line, column)
            if self.peek() == '*' and self.peek(1) == '/':
                self.advance()
                self.advance()
                break
            chars.append(self.advance())
        self.comments.append(Comment(CommentKind.BLOCK, ''.join(chars), line, column))

    def skip_string(self) -> None:
        line, column = self.line, self.column
        quote = self.advance()
        while True:
            char = self.peek()
            if char is None or (char == '\n' and quote != '`'):
                raise self.error("Unterminated string literal", line, column)
            if char == '\\':
                self.advance()
                self.advance()
                continue
            self.advance()
            if char == quote:
                return

    def tokenize(self) -> List[Comment]:
        while self.pos < len(self.source):
            char = self.peek()
            if char == '/' and self.peek(1) == '/':
                self.read_line_comment()
            elif char == '/' and self.peek(1) == '*':
                self.read_block_comment()
            elif char in ('"', "'", '`'):
                self.skip_string()
            else:
                self.advance()
        return self.comments


class CStyleExtractor:
    """Extractor wrapper around :class:`CStyleLexer`."""

    name = "c-style"

    def extract(self, source: str, path: str = "") -> List[Comment]:
        return CStyleLexer(source, path).tokenize()


__all__ = ["CStyleExtractor", "CStyleLexer"]
