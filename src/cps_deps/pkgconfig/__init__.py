# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader for pkg-config (``.pc``) documents."""

from cps_deps.pkgconfig.lines import Line, LineKind, PkgConfigError, classify_line, strip_comments
from cps_deps.pkgconfig.parser import (
    COMPARISON_OPERATORS,
    REQUIRED_PROPERTIES,
    MissingRequiredPropertyError,
    capture_property,
    parse,
    parse_dependency_list,
)
from cps_deps.pkgconfig.variables import (
    MAX_EXPANDED_LENGTH,
    MAX_EXPANSION_PASSES,
    VariableExpansionError,
    collect_variables,
    expand_variables,
)

__all__ = [
    "COMPARISON_OPERATORS",
    "Line",
    "LineKind",
    "MAX_EXPANDED_LENGTH",
    "MAX_EXPANSION_PASSES",
    "MissingRequiredPropertyError",
    "PkgConfigError",
    "REQUIRED_PROPERTIES",
    "VariableExpansionError",
    "capture_property",
    "classify_line",
    "collect_variables",
    "expand_variables",
    "parse",
    "parse_dependency_list",
    "strip_comments",
]
