"""Tests for the C-family comment lexer."""

import pytest

from save_license import CommentKind, SourceUnparseable
from save_license.extractors import CStyleExtractor, CStyleLexer, get_extractor
from save_license.grouping import group_comments


def test_registry_returns_cstyle_extractor():
    assert isinstance(get_extractor("c-style"), CStyleExtractor)


def test_line_and_block_comments():
    source = "// Copyright 2020\nint a; /* MIT */\n"

    comments = CStyleLexer(source).tokenize()

    assert [(c.kind, c.text, c.start_line, c.start_column) for c in comments] == [
        (CommentKind.LINE, " Copyright 2020", 1, 0),
        (CommentKind.BLOCK, " MIT ", 2, 7),
    ]


def test_string_literals_hide_comment_markers():
    source = 'const char *u = "http://x/*y*/"; char c = \'/\'; // real\n'

    comments = CStyleLexer(source).tokenize()

    assert [c.text for c in comments] == [" real"]


def test_escaped_quote_inside_string():
    source = 'puts("say \\"hi\\" // no"); // yes\n'

    comments = CStyleLexer(source).tokenize()

    assert [c.text for c in comments] == [" yes"]


def test_backtick_strings_may_span_lines():
    source = "s := `line one\n// not a comment\n`\n// comment\n"

    comments = CStyleLexer(source).tokenize()

    assert [(c.text, c.start_line) for c in comments] == [(" comment", 4)]


def test_multiline_block_advances_line_numbers():
    source = "/*\n * a\n */\n// b\n// c\n"

    groups = group_comments(CStyleExtractor().extract(source))

    assert [[c.text for c in group] for group in groups] == [["\n * a\n "], [" b", " c"]]
    assert groups[1][0].start_line == 4


def test_unterminated_block_comment_raises():
    with pytest.raises(SourceUnparseable) as exc_info:
        CStyleLexer("int a;\n  /* open", path="a.c").tokenize()

    assert exc_info.value.line == 2
    assert exc_info.value.column == 3


def test_unterminated_string_raises():
    with pytest.raises(SourceUnparseable, match="Unterminated string"):
        CStyleLexer('char *s = "abc\n').tokenize()


def test_escaped_quote_in_char_literal():
    source = "char q = '\\''; char s = '\"'; // Copyright J\n"

    comments = CStyleLexer(source).tokenize()

    assert [(c.text, c.start_column) for c in comments] == [(" Copyright J", 29)]
