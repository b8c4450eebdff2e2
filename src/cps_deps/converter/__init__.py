# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion pipeline from pkg-config records to CPS documents."""

from cps_deps.converter.artifact import (
    CPS_SUFFIX,
    CpsDocumentError,
    deserialize,
    read_package,
    serialize,
    write_package,
)
from cps_deps.converter.convert import ConversionError, convert, convert_pkg_config
from cps_deps.converter.generate import (
    DEFAULT_PC_SEARCH_ROOTS,
    ConversionFailure,
    GenerateResult,
    find_pc_files,
    generate_all,
    generate_from_pkg_config,
    load_package,
)

__all__ = [
    "CPS_SUFFIX",
    "ConversionError",
    "ConversionFailure",
    "CpsDocumentError",
    "DEFAULT_PC_SEARCH_ROOTS",
    "GenerateResult",
    "convert",
    "convert_pkg_config",
    "deserialize",
    "find_pc_files",
    "generate_all",
    "generate_from_pkg_config",
    "load_package",
    "read_package",
    "serialize",
    "write_package",
]
