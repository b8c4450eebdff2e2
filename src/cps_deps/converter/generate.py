# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion drivers: ``.pc`` discovery, single-file and batch generation.

Single-file generation propagates every error to the caller.  Batch
generation converts files strictly one after another; a file that fails to
parse, resolve, convert or validate is recorded in the result and skipped,
and the batch continues.  Filesystem errors (unreadable sources, unwritable
output directory) are not recorded: they propagate and end the batch.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from cps_deps.converter.artifact import CPS_SUFFIX, write_package
from cps_deps.converter.convert import ConversionError, convert_pkg_config
from cps_deps.model.cps import CpsValidationError, Package
from cps_deps.pkgconfig.lines import PkgConfigError
from cps_deps.pkgconfig.parser import parse
from cps_deps.resolver.library_search import LibraryNotFoundError

# ###############
# Public Interface
# ###############

PC_SUFFIX = ".pc"

DEFAULT_PC_SEARCH_ROOTS: tuple[Path, ...] = (
    Path("/usr/lib"),
    Path("/usr/share"),
    Path("/usr/local/lib"),
    Path("/usr/local/share"),
)

# Errors that make a single file unconvertible without ending a batch.
CONVERSION_ERRORS = (PkgConfigError, LibraryNotFoundError, ConversionError, CpsValidationError)


@dataclass(frozen=True)
class ConversionFailure:
    """A ``.pc`` file that could not be converted.

    Attributes:
        source: Path of the ``.pc`` file.
        message: Human-readable reason.
    """

    source: Path
    message: str


@dataclass
class GenerateResult:
    """Outcome of a batch conversion.

    Attributes:
        written: Paths of the ``.cps`` files written, in processing order.
        failures: Files that were skipped, in processing order.
    """

    written: list[Path] = field(default_factory=list)
    failures: list[ConversionFailure] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        """Return True if any file was skipped."""
        return len(self.failures) > 0


def find_pc_files(roots: Iterable[Path] = DEFAULT_PC_SEARCH_ROOTS) -> list[Path]:
    """Return every ``*.pc`` file below *roots*.

    Roots are visited in the given order and files are sorted within each
    root.  Roots that do not exist are skipped.
    """
    pc_files: list[Path] = []
    for root in roots:
        if not root.is_dir():
            continue
        pc_files.extend(sorted(p for p in root.rglob(f"*{PC_SUFFIX}") if p.is_file()))
    return pc_files


def cps_filename(pc_file: Path) -> str:
    """Return the output file name for *pc_file* (``zlib.pc`` -> ``zlib.cps``)."""
    return pc_file.with_suffix(CPS_SUFFIX).name


def load_package(
    pc_file: Path,
    *,
    extra_search_paths: Sequence[str | Path] = (),
    multiarch_dirs: Sequence[Path] = (),
) -> Package:
    """Read, parse and convert one ``.pc`` file into a CPS package.

    Raises:
        OSError: If *pc_file* cannot be read.
        PkgConfigError: If the file cannot be parsed.
        LibraryNotFoundError: If a linked library cannot be found.
        ConversionError: If the record cannot be mapped.
        CpsValidationError: If the resulting package is invalid.
    """
    source = pc_file.read_text(encoding="utf-8", errors="replace")
    pkg_config = parse(source)
    return convert_pkg_config(pkg_config, extra_search_paths=extra_search_paths, multiarch_dirs=multiarch_dirs)


def generate_from_pkg_config(
    pc_file: Path,
    cps_file: Path,
    *,
    extra_search_paths: Sequence[str | Path] = (),
    multiarch_dirs: Sequence[Path] = (),
) -> Package:
    """Convert a single ``.pc`` file and write the result to *cps_file*.

    Returns:
        The package that was written.

    Raises:
        Every error of :func:`load_package`, and ``OSError`` if *cps_file*
        cannot be written.
    """
    package = load_package(pc_file, extra_search_paths=extra_search_paths, multiarch_dirs=multiarch_dirs)
    write_package(package, cps_file)
    return package


def generate_all(
    pc_files: Iterable[Path],
    outdir: Path,
    *,
    extra_search_paths: Sequence[str | Path] = (),
    multiarch_dirs: Sequence[Path] = (),
) -> GenerateResult:
    """Convert each of *pc_files* into ``outdir/<stem>.cps``.

    Args:
        pc_files: ``.pc`` files to convert, in processing order.
        outdir: Output directory, created if missing.
        extra_search_paths: Library directories searched after each file's
            own ``-L`` directories.
        multiarch_dirs: Platform library directories searched last.

    Returns:
        The written files and the skipped files with their reasons.

    Raises:
        OSError: If a source file cannot be read or an output cannot be written.
    """
    outdir.mkdir(parents=True, exist_ok=True)
    result = GenerateResult()
    for pc_file in pc_files:
        try:
            package = load_package(pc_file, extra_search_paths=extra_search_paths, multiarch_dirs=multiarch_dirs)
        except CONVERSION_ERRORS as exc:
            result.failures.append(ConversionFailure(source=pc_file, message=str(exc)))
            continue
        target = outdir / cps_filename(pc_file)
        write_package(package, target)
        result.written.append(target)
    return result
