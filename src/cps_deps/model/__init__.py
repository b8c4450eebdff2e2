# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data models: the flat pkg-config record and the CPS document schema."""

from cps_deps.model.cps import (
    CPS_VERSION,
    ArchiveComponent,
    Component,
    ComponentKind,
    Configuration,
    CpsValidationError,
    DylibComponent,
    InterfaceComponent,
    JarComponent,
    LanguageStringList,
    MissingLocationError,
    ModuleComponent,
    OtherComponent,
    Package,
    Platform,
    Requirement,
    SymbolicComponent,
    UnsupportedSchemaVersionError,
)
from cps_deps.model.pkg_config import Dependency, PkgConfigFile

__all__ = [
    # pkg-config
    "Dependency",
    "PkgConfigFile",
    # CPS
    "CPS_VERSION",
    "ArchiveComponent",
    "Component",
    "ComponentKind",
    "Configuration",
    "CpsValidationError",
    "DylibComponent",
    "InterfaceComponent",
    "JarComponent",
    "LanguageStringList",
    "MissingLocationError",
    "ModuleComponent",
    "OtherComponent",
    "Package",
    "Platform",
    "Requirement",
    "SymbolicComponent",
    "UnsupportedSchemaVersionError",
]
