# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for pkg-config line classification and comment stripping."""

import pytest

from cps_deps.pkgconfig.lines import Line, LineKind, classify_line, strip_comments


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("prefix=/usr", Line(LineKind.ASSIGNMENT, "prefix", "/usr")),
        ("libdir = ${prefix}/lib", Line(LineKind.ASSIGNMENT, "libdir", "${prefix}/lib")),
        ("empty=", Line(LineKind.ASSIGNMENT, "empty", "")),
        ("Name: zlib", Line(LineKind.PROPERTY, "Name", "zlib")),
        ("Requires:  freetype2 >= 21.0.15", Line(LineKind.PROPERTY, "Requires", "freetype2 >= 21.0.15")),
        ("Cflags: -DFOO=1", Line(LineKind.PROPERTY, "Cflags", "-DFOO=1")),
        ("URL: https://zlib.net/?a=b", Line(LineKind.PROPERTY, "URL", "https://zlib.net/?a=b")),
        ("Libs.private:", Line(LineKind.PROPERTY, "Libs.private", "")),
        ("# a comment", Line(LineKind.COMMENT)),
        ("   ", Line(LineKind.BLANK)),
        ("Name:zlib", Line(LineKind.OTHER)),
        ("just some words", Line(LineKind.OTHER)),
    ],
)
def test_classify_line(line: str, expected: Line) -> None:
    assert classify_line(line) == expected


def test_strip_comments_drops_only_hash_lines() -> None:
    source = "# header\nprefix=/usr\n#another\nName: x # not a comment\n"
    assert strip_comments(source) == "prefix=/usr\nName: x # not a comment"
