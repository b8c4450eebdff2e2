# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of logical library names to shared and static artifacts on disk."""

from cps_deps.resolver.library_search import (
    Archive,
    Both,
    Dylib,
    LibraryLocation,
    LibraryNotFoundError,
    LibraryResolver,
    find_locations,
)
from cps_deps.resolver.toolchain import (
    DEFAULT_COMPILER,
    host_target_triple,
    multiarch_directories,
    query_target_triple,
)

__all__ = [
    "Archive",
    "Both",
    "DEFAULT_COMPILER",
    "Dylib",
    "LibraryLocation",
    "LibraryNotFoundError",
    "LibraryResolver",
    "find_locations",
    "host_target_triple",
    "multiarch_directories",
    "query_target_triple",
]
