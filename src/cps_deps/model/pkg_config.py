# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Flat record of one parsed pkg-config (``.pc``) document."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Dependency(BaseModel):
    """One entry of a ``Requires``-style list, e.g. ``freetype2 >= 21.0.15``."""

    name: str
    operator: str | None = None
    version: str | None = None


class PkgConfigFile(BaseModel):
    """The parsed, variable-expanded contents of a single ``.pc`` file.

    ``link_libraries`` is order-significant: its first entry is the primary
    library that the default CPS component binds to.
    """

    name: str
    version: str
    description: str
    url: str | None = None
    license: str | None = None
    maintainer: str | None = None
    copyright: str | None = None
    includes: list[str] = _Field(default_factory=list)
    definitions: list[str] = _Field(default_factory=list)
    compile_flags: list[str] = _Field(default_factory=list)
    cflags_private: str | None = None
    link_locations: list[str] = _Field(default_factory=list)
    link_libraries: list[str] = _Field(default_factory=list)
    link_flags: list[str] = _Field(default_factory=list)
    libs_private: str | None = None
    requires: list[Dependency] = _Field(default_factory=list)
    requires_private: list[Dependency] = _Field(default_factory=list)
    conflicts: list[Dependency] = _Field(default_factory=list)
    provides: list[Dependency] = _Field(default_factory=list)

    @property
    def primary_library(self) -> str | None:
        """Return the first ``-l`` library, or None for header-only packages."""
        return self.link_libraries[0] if self.link_libraries else None
