# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line classification for pkg-config documents.

Every line of a ``.pc`` file is one of:

* a **comment** -- starts with ``#``;
* a **blank** line;
* an **assignment** -- ``identifier = value`` (the ``=`` comes before any ``:``);
* a **property** -- ``Keyword: value``, the colon followed by whitespace or
  the end of the line;
* anything else, which the reader ignores.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

# ###############
# Public Interface
# ###############


class PkgConfigError(Exception):
    """Base class for errors raised while reading a pkg-config document."""


class LineKind(Enum):
    """Classification of a single pkg-config source line."""

    COMMENT = "comment"
    BLANK = "blank"
    ASSIGNMENT = "assignment"
    PROPERTY = "property"
    OTHER = "other"


@dataclass(frozen=True)
class Line:
    """A classified source line.

    Attributes:
        kind: What the line declares.
        key: Variable or property name (assignments and properties only).
        value: Trimmed right-hand side (assignments and properties only).
            Empty for a property that has no value.
    """

    kind: LineKind
    key: str | None = None
    value: str | None = None


def classify_line(line: str) -> Line:
    """Classify one line of pkg-config text."""
    stripped = line.strip()
    if not stripped:
        return Line(LineKind.BLANK)
    if stripped.startswith("#"):
        return Line(LineKind.COMMENT)

    match = _ASSIGNMENT_RE.match(stripped)
    if match:
        return Line(LineKind.ASSIGNMENT, key=match.group(1), value=match.group(2).strip())

    match = _PROPERTY_RE.match(stripped)
    if match:
        return Line(LineKind.PROPERTY, key=match.group(1), value=(match.group(2) or "").strip())

    return Line(LineKind.OTHER)


def strip_comments(source: str) -> str:
    """Drop every line that begins with ``#``; other lines are kept verbatim."""
    return "\n".join(line for line in source.splitlines() if not line.startswith("#"))


# ################
# Implementation
# ################

_ASSIGNMENT_RE = re.compile(r"^([A-Za-z0-9_.\-]+)[ \t]*=(.*)$")
_PROPERTY_RE = re.compile(r"^([A-Za-z0-9_.\-]+):([ \t]+.*)?$")
