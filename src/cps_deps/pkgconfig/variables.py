# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Expansion of ``${name}`` variable references in pkg-config text."""

from __future__ import annotations

import re

from cps_deps.pkgconfig.lines import LineKind, PkgConfigError, classify_line

# ###############
# Public Interface
# ###############

MAX_EXPANSION_PASSES = 100

# Upper bound on the length of the expanded document.
MAX_EXPANDED_LENGTH = 1 << 20


class VariableExpansionError(PkgConfigError):
    """Raised when variable references cannot be expanded to a finite document.

    Circular definitions (``a=${b}``, ``b=${a}``) are rejected before any
    substitution.  References to undefined variables end after the maximum
    number of passes, and definitions that would expand past
    :data:`MAX_EXPANDED_LENGTH` characters end as soon as that is known.

    Attributes:
        text: The partially expanded document.
        variables: The variable definitions found in *text*.
        reason: Why expansion stopped.
    """

    def __init__(self, text: str, variables: dict[str, str], reason: str | None = None) -> None:
        if reason is None:
            reason = f"after {MAX_EXPANSION_PASSES} passes"
        super().__init__(f"Max recursion hit expanding variables {reason}\n\n{text}\n\n{variables!r}")
        self.text = text
        self.variables = variables
        self.reason = reason


def collect_variables(text: str) -> dict[str, str]:
    """Return the ``name = value`` assignments in *text*; later definitions win."""
    variables: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = classify_line(raw_line)
        if line.kind is LineKind.ASSIGNMENT:
            assert line.key is not None and line.value is not None
            variables[line.key] = line.value
    return variables


def expand_variables(text: str) -> str:
    """Substitute every ``${name}`` reference until none remain.

    Each pass re-reads the assignments from the current text, so a value may
    refer to variables defined anywhere in the document, including further
    down.  Text without references is returned unchanged.

    Raises:
        VariableExpansionError: If the definitions are circular, if the
            expansion would exceed :data:`MAX_EXPANDED_LENGTH` characters, or
            if references remain after :data:`MAX_EXPANSION_PASSES` passes.
    """
    if "${" not in text:
        return text

    variables = collect_variables(text)
    circular = _circular_definitions(variables)
    if circular:
        raise VariableExpansionError(text, variables, f"through circular definitions of {', '.join(circular)}")

    for _ in range(MAX_EXPANSION_PASSES):
        if "${" not in text:
            return text
        variables = collect_variables(text)
        if _expanded_length(text, variables) > MAX_EXPANDED_LENGTH:
            raise VariableExpansionError(text, variables, f"beyond {MAX_EXPANDED_LENGTH} characters")
        text = _REFERENCE_RE.sub(lambda m: variables.get(m.group(1), m.group(0)), text)

    if "${" in text:
        raise VariableExpansionError(text, collect_variables(text))
    return text


# ################
# Implementation
# ################

_REFERENCE_RE = re.compile(r"\$\{([^}]*)\}")


def _expanded_length(text: str, variables: dict[str, str]) -> int:
    """Return the length *text* will have after one substitution pass."""
    length = len(text)
    for match in _REFERENCE_RE.finditer(text):
        value = variables.get(match.group(1))
        if value is not None:
            length += len(value) - len(match.group(0))
    return length


def _circular_definitions(variables: dict[str, str]) -> list[str]:
    """Return the sorted names of variables whose expansion never bottoms out.

    Definitions that only reference already resolvable names are peeled off
    until nothing changes; whatever remains takes part in, or depends on, a
    cycle.
    """
    pending = {
        name: {ref for ref in _REFERENCE_RE.findall(value) if ref in variables} for name, value in variables.items()
    }
    while True:
        resolvable = [name for name, refs in pending.items() if refs.isdisjoint(pending)]
        if not resolvable:
            return sorted(pending)
        for name in resolvable:
            del pending[name]
