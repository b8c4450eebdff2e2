# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping of a parsed pkg-config record onto a CPS package.

The default component is named after the primary (first ``-l``) library, or
after the package itself when nothing is linked:

* no libraries        -> one ``interface`` component without a location;
* primary is a dylib  -> a ``dylib`` default component;
* primary is archive  -> an ``archive`` default component;
* primary is both     -> an ``interface`` component dispatching through the
  ``shared`` and ``static`` configurations to ``<name>-shared`` (dylib) and
  ``<name>-static`` (archive) components.

Every secondary library becomes a component of its own, referenced from the
default component as ``:<name>``, followed by the package's cross-package
requirements.  Compile and link metadata is attached to the default component
only.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from cps_deps.model.cps import (
    ArchiveComponent,
    Component,
    Configuration,
    DylibComponent,
    InterfaceComponent,
    Package,
    Requirement,
)
from cps_deps.model.pkg_config import PkgConfigFile
from cps_deps.resolver.library_search import Both, Dylib, LibraryLocation, LibraryResolver, find_locations

# ###############
# Public Interface
# ###############

SHARED_CONFIGURATION = "shared"
STATIC_CONFIGURATION = "static"

# Language tag addressing every language in a LanguageStringList mapping.
ANY_LANGUAGE = "*"


class ConversionError(Exception):
    """Raised when a pkg-config record cannot be mapped onto a CPS package."""


def convert(pkg_config: PkgConfigFile, locations: Mapping[str, LibraryLocation]) -> Package:
    """Build the CPS package for *pkg_config* from already resolved library locations.

    Args:
        pkg_config: The parsed pkg-config record.
        locations: Resolved location of every library in
            ``pkg_config.link_libraries`` (see
            :func:`~cps_deps.resolver.library_search.find_locations`).

    Returns:
        A validated :class:`~cps_deps.model.cps.Package`.

    Raises:
        ConversionError: If a linked library has no entry in *locations*.
        CpsValidationError: If the resulting package violates a CPS invariant.
    """
    libraries = list(dict.fromkeys(pkg_config.link_libraries))
    for name in libraries:
        if name not in locations:
            raise ConversionError(f"No resolved location for library `{name}` of package `{pkg_config.name}`")

    primary = libraries[0] if libraries else None
    secondary = libraries[1:]
    default_name = primary if primary is not None else pkg_config.name

    local_requires = [f":{name}" for name in secondary]
    remote_requires = [dependency.name for dependency in pkg_config.requires]

    components: dict[str, Component] = {}
    configurations: list[str] | None = None

    primary_location = locations[primary] if primary is not None else None
    components[default_name] = _default_component(
        default_name,
        primary_location,
        requires=local_requires + remote_requires,
        metadata=_metadata_fields(pkg_config),
    )
    if isinstance(primary_location, Both):
        components.update(_split_components(default_name, primary_location))
        configurations = [SHARED_CONFIGURATION, STATIC_CONFIGURATION]

    for name in secondary:
        location = locations[name]
        if isinstance(location, Both):
            components[name] = _dispatching_interface(name, requires=[])
            components.update(_split_components(name, location))
            configurations = [SHARED_CONFIGURATION, STATIC_CONFIGURATION]
        else:
            components[name] = _artifact_component(location.path)

    requirements = {
        dependency.name: Requirement(version=dependency.version)
        for dependency in pkg_config.requires
        if dependency.version is not None
    }

    return Package(
        name=pkg_config.name,
        version=pkg_config.version,
        description=pkg_config.description,
        license=pkg_config.license,
        components=components,
        default_components=[default_name],
        configurations=configurations,
        requires=requirements or None,
    )


def convert_pkg_config(
    pkg_config: PkgConfigFile,
    *,
    extra_search_paths: Sequence[str | Path] = (),
    multiarch_dirs: Sequence[Path] = (),
) -> Package:
    """Resolve the libraries of *pkg_config* on disk and convert it.

    Libraries are searched in the record's ``-L`` directories, then in
    *extra_search_paths*, then in *multiarch_dirs*.

    Raises:
        LibraryNotFoundError: If a linked library cannot be found.
        ConversionError: If the record cannot be mapped.
        CpsValidationError: If the resulting package is invalid.
    """
    resolver = LibraryResolver([*pkg_config.link_locations, *extra_search_paths], multiarch_dirs)
    return convert(pkg_config, find_locations(pkg_config, resolver))


# ################
# Implementation
# ################


def _metadata_fields(pkg_config: PkgConfigFile) -> dict[str, Any]:
    """Return the compile and link fields of the default component; empty lists are left out."""
    fields: dict[str, Any] = {}
    if pkg_config.compile_flags:
        fields["compile_flags"] = {ANY_LANGUAGE: list(pkg_config.compile_flags)}
    if pkg_config.definitions:
        fields["definitions"] = {ANY_LANGUAGE: list(pkg_config.definitions)}
    if pkg_config.includes:
        fields["includes"] = {ANY_LANGUAGE: list(pkg_config.includes)}
    if pkg_config.link_flags:
        fields["link_flags"] = list(pkg_config.link_flags)
    return fields


def _default_component(
    name: str,
    location: LibraryLocation | None,
    *,
    requires: list[str],
    metadata: dict[str, Any],
) -> Component:
    if location is None:
        return InterfaceComponent(requires=requires or None, **metadata)
    if isinstance(location, Both):
        # Configurations override the component's own requires, so the
        # requirements are repeated in each of them.
        return _dispatching_interface(name, requires=requires, **metadata)
    if isinstance(location, Dylib):
        return DylibComponent(location=location.path, requires=requires or None, **metadata)
    return ArchiveComponent(location=location.path, requires=requires or None, **metadata)


def _dispatching_interface(name: str, *, requires: list[str], **metadata: Any) -> InterfaceComponent:
    return InterfaceComponent(
        configurations={
            SHARED_CONFIGURATION: Configuration(requires=[f":{name}-shared", *requires]),
            STATIC_CONFIGURATION: Configuration(requires=[f":{name}-static", *requires]),
        },
        **metadata,
    )


def _split_components(name: str, location: Both) -> dict[str, Component]:
    return {
        f"{name}-shared": DylibComponent(location=location.dylib),
        f"{name}-static": ArchiveComponent(location=location.archive),
    }


def _artifact_component(path: str) -> Component:
    if path.endswith(".so"):
        return DylibComponent(location=path)
    return ArchiveComponent(location=path)
