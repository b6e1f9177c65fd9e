"""Tests for license group selection."""

import re

from save_license import DEFAULT_PATTERNS, RegexMatcher, filter_license_groups, get_licenses, group_text
from save_license.extractors import get_extractor
from save_license.grouping import group_comments
from tests.helpers import EXPECTED_LICENSE_TEXTS, LICENSES_SOURCE, block, line


def test_reference_fixture_keeps_five_licenses():
    licenses = get_licenses(LICENSES_SOURCE, DEFAULT_PATTERNS)

    assert [group_text(group) for group in licenses] == EXPECTED_LICENSE_TEXTS


def test_crlf_sources_keep_blank_line_separation():
    source = "// Copyright A\r\n\r\n// Copyright B\r\n"

    licenses = get_licenses(source)

    assert [group_text(group) for group in licenses] == [" Copyright A", " Copyright B"]


def test_non_matching_groups_are_dropped():
    groups = [(line(" just a note", 1),), (block(" MIT ", 3),), (line(" todo", 5),)]

    assert filter_license_groups(groups) == [groups[1]]


def test_one_matching_comment_keeps_whole_group():
    group = (line(" helper utilities", 1), line(" Copyright ACME", 2), line(" more notes", 3))

    (kept,) = filter_license_groups([group])

    assert group_text(kept) == " helper utilities\n Copyright ACME\n more notes"


def test_patterns_test_each_comment_not_joined_text():
    spanning = RegexMatcher([re.compile(r"foo\nbar")])
    group = (line("foo", 1), line("bar", 2))

    assert group_text(group) == "foo\nbar"
    assert filter_license_groups([group], spanning) == []


def test_default_patterns_are_case_insensitive_and_multiline():
    matcher = RegexMatcher(DEFAULT_PATTERNS)

    assert matcher.matches("\n@preserve keep me")
    assert matcher.matches(" copyright 2021")
    assert matcher.matches(" (C) someone")
    assert matcher.matches(" © someone")
    assert matcher.matches(" licensed under the gpl")
    assert not matcher.matches(" Licenses")
    assert not matcher.matches("abc(c)")
    assert not matcher.matches(" @preserved later")


def test_custom_matcher_capability():
    class StartsWithStar:
        def matches(self, text):
            return text.startswith("*")

    groups = [(block("* doc", 1),), (block(" Copyright", 2),)]

    assert filter_license_groups(groups, StartsWithStar()) == [groups[0]]


def test_custom_patterns():
    licenses = get_licenses("/* SPDX: Apache-2.0 */\n/* MIT */\n", [re.compile(r"SPDX")])

    assert [group_text(group) for group in licenses] == [" SPDX: Apache-2.0 "]


def test_single_compiled_pattern():
    groups = [(block(" SPDX: MIT ", 1),), (block(" Copyright", 2),)]

    assert filter_license_groups(groups, re.compile(r"spdx", re.I)) == [groups[0]]
    assert len(get_licenses("/* SPDX: MIT */\n", re.compile(r"SPDX"))) == 1


def test_filter_output_is_subsequence_of_groups():
    comments = get_extractor("javascript").extract(LICENSES_SOURCE + "\n// plain\n/* nothing */\n")
    groups = group_comments(comments)

    kept = filter_license_groups(groups)

    positions = [groups.index(group) for group in kept]
    assert positions == sorted(positions)
    assert len(kept) == 5 < len(groups)
