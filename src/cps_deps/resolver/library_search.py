# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lookup of ``lib<name>.so`` and ``lib<name>.a`` artifacts in search directories.

Directories are consulted in the order given; the multiarch directories are
appended after the caller's search paths.  The first existing candidate wins
for each extension.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from cps_deps.model.pkg_config import PkgConfigFile

# ###############
# Public Interface
# ###############

DYLIB_EXTENSION = "so"
ARCHIVE_EXTENSION = "a"


@dataclass(frozen=True)
class Dylib:
    """A library found only as a shared object."""

    path: str


@dataclass(frozen=True)
class Archive:
    """A library found only as a static archive."""

    path: str


@dataclass(frozen=True)
class Both:
    """A library found both as a static archive and as a shared object."""

    archive: str
    dylib: str


LibraryLocation = Dylib | Archive | Both


class LibraryNotFoundError(Exception):
    """Raised when neither a shared nor a static artifact exists for a library.

    Attributes:
        library: The logical library name (as given to ``-l``).
        attempted: Every candidate path checked, keyed by extension.
    """

    def __init__(self, library: str, attempted: dict[str, list[Path]]) -> None:
        lines = [f"Could not find required library `{library}`"]
        for extension, paths in attempted.items():
            lines.append(f"  .{extension} at paths: {[str(p) for p in paths]}")
        super().__init__("\n".join(lines))
        self.library = library
        self.attempted = attempted


class LibraryResolver:
    """Finds library artifacts in an ordered list of directories.

    Args:
        search_paths: Directories to search first, in order (typically the
            ``-L`` directories of a pkg-config file).
        multiarch_dirs: Platform directories searched after *search_paths*
            (see :func:`cps_deps.resolver.toolchain.multiarch_directories`).
    """

    def __init__(self, search_paths: Sequence[str | Path] = (), multiarch_dirs: Sequence[Path] = ()) -> None:
        self._directories = [Path(p) for p in search_paths] + [Path(p) for p in multiarch_dirs]

    @property
    def directories(self) -> list[Path]:
        """All directories searched, in lookup order."""
        return list(self._directories)

    def candidates(self, library: str, extension: str) -> list[Path]:
        """Return every path checked for ``lib<library>.<extension>``, in order."""
        filename = f"lib{library}.{extension}"
        return [directory / filename for directory in self._directories]

    def find(self, library: str, extension: str) -> Path | None:
        """Return the first existing ``lib<library>.<extension>``, or None."""
        return next((path for path in self.candidates(library, extension) if path.exists()), None)

    def locate(self, library: str) -> LibraryLocation:
        """Resolve *library* to a shared object, a static archive, or both.

        Raises:
            LibraryNotFoundError: If neither artifact exists.
        """
        dylib = self.find(library, DYLIB_EXTENSION)
        archive = self.find(library, ARCHIVE_EXTENSION)
        if dylib is not None and archive is not None:
            return Both(archive=str(archive), dylib=str(dylib))
        if dylib is not None:
            return Dylib(str(dylib))
        if archive is not None:
            return Archive(str(archive))
        raise self._not_found(library)

    def locate_preferring(self, library: str, *, prefer_dylib: bool) -> Dylib | Archive:
        """Resolve *library* to a single artifact, trying the preferred kind first.

        Raises:
            LibraryNotFoundError: If neither artifact exists.
        """
        order = (DYLIB_EXTENSION, ARCHIVE_EXTENSION) if prefer_dylib else (ARCHIVE_EXTENSION, DYLIB_EXTENSION)
        for extension in order:
            path = self.find(library, extension)
            if path is not None:
                return Dylib(str(path)) if extension == DYLIB_EXTENSION else Archive(str(path))
        raise self._not_found(library)

    def _not_found(self, library: str) -> LibraryNotFoundError:
        return LibraryNotFoundError(
            library,
            {
                DYLIB_EXTENSION: self.candidates(library, DYLIB_EXTENSION),
                ARCHIVE_EXTENSION: self.candidates(library, ARCHIVE_EXTENSION),
            },
        )


def find_locations(pkg_config: PkgConfigFile, resolver: LibraryResolver) -> dict[str, LibraryLocation]:
    """Resolve every ``-l`` library of *pkg_config*, keyed by name in link order.

    The primary (first) library is resolved to whatever exists.  Secondary
    libraries resolve to a single artifact: a shared object is preferred when
    the primary resolved only as a shared object, otherwise a static archive
    is preferred.  Duplicate names are resolved once.

    Raises:
        LibraryNotFoundError: If any library cannot be found.
    """
    libraries = list(dict.fromkeys(pkg_config.link_libraries))
    if not libraries:
        return {}

    primary, *secondary = libraries
    primary_location = resolver.locate(primary)
    prefer_dylib = isinstance(primary_location, Dylib)

    locations: dict[str, LibraryLocation] = {primary: primary_location}
    for name in secondary:
        locations[name] = resolver.locate_preferring(name, prefer_dylib=prefer_dylib)
    return locations
