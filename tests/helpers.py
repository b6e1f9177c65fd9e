"""Source fixtures and comment builders shared by the test modules."""

from save_license import Comment, CommentKind


GROUPING_SOURCE = """
//1
//2

//10
//11

//20
/*30*/
/*40*/
//50
//51

//60
"""

LICENSES_SOURCE = """
/*!
 * @license  MIT
 */

/* Copyright (c) _
 */

/**
 * released under the MIT license _
 */

// Copyright _
// THE SOFTWARE IS _

var a = 0;

// (C) _
//
// This software is _
"""

EXPECTED_LICENSE_TEXTS = [
    "!\n * @license  MIT\n ",
    " Copyright (c) _\n ",
    "*\n * released under the MIT license _\n ",
    " Copyright _\n THE SOFTWARE IS _",
    " (C) _\n\n This software is _",
]


def line(text: str, start_line: int, start_column: int = 0) -> Comment:
    return Comment(CommentKind.LINE, text, start_line, start_column)


def block(text: str, start_line: int, start_column: int = 0) -> Comment:
    return Comment(CommentKind.BLOCK, text, start_line, start_column)

