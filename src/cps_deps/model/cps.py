# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Common Package Specification (CPS) document model.

Components are a discriminated union keyed on their ``type`` field.  Kinds
that describe a binary artifact (archive, dylib, module, jar) must carry a
``location``, either directly or through every one of their configurations.
Components of a kind this model does not know (e.g. ``exe``) are kept as
opaque :class:`OtherComponent` values so foreign documents still load.

Validation failures specific to CPS are raised as :class:`CpsValidationError`
subclasses; they are not ``ValueError`` subclasses, so pydantic lets them
propagate unchanged out of construction and ``model_validate``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Tag, field_validator, model_validator

# ###############
# Public Interface
# ###############

CPS_VERSION = "0.11.0"


class CpsValidationError(Exception):
    """Base class for violations of the CPS structural invariants."""


class UnsupportedSchemaVersionError(CpsValidationError):
    """Raised when a document's ``cps_version`` differs from :data:`CPS_VERSION`.

    Attributes:
        version: The rejected schema version.
    """

    def __init__(self, version: str) -> None:
        super().__init__(f"Unsupported cps_version {version!r}: expected {CPS_VERSION!r}")
        self.version = version


class MissingLocationError(CpsValidationError):
    """Raised when a location-requiring component has no usable ``location``.

    Attributes:
        kind: The component type (``archive``, ``dylib``, ``module`` or ``jar``).
    """

    def __init__(self, kind: str) -> None:
        super().__init__(
            f"Component of type '{kind}' requires a 'location', either on the component itself or on every configuration"
        )
        self.kind = kind


class ComponentKind(Enum):
    """Component kinds defined by the CPS schema."""

    ARCHIVE = "archive"
    DYLIB = "dylib"
    MODULE = "module"
    JAR = "jar"
    INTERFACE = "interface"
    SYMBOLIC = "symbolic"


# Flags given either for all languages (a flat list) or per language tag.
# The tag ``"*"`` addresses every language.
LanguageStringList = list[str] | dict[str, list[str]]


class Platform(BaseModel):
    """Description of the platform a package was built for."""

    c_runtime_vendor: str | None = None
    c_runtime_version: str | None = None
    clr_vendor: str | None = None
    clr_version: str | None = None
    cpp_runtime_vendor: str | None = None
    cpp_runtime_version: str | None = None
    isa: str | None = None
    jvm_vendor: str | None = None
    jvm_version: str | None = None
    kernel: str | None = None
    kernel_version: str | None = None


class Requirement(BaseModel):
    """A package-level requirement on another package."""

    components: list[str] | None = None
    hints: list[str] | None = None
    version: str | None = None


class Configuration(BaseModel):
    """A named variant of a component's fields, e.g. ``shared`` or ``static``.

    Configuration values override (rather than merge with) the fields of the
    component they belong to.
    """

    location: str | None = None
    requires: list[str] | None = None
    compile_features: list[str] | None = None
    compile_flags: LanguageStringList | None = None
    definitions: LanguageStringList | None = None
    includes: LanguageStringList | None = None
    link_features: list[str] | None = None
    link_flags: list[str] | None = None
    link_languages: list[str] | None = None
    link_libraries: list[str] | None = None
    link_location: str | None = None
    link_requires: list[str] | None = None


class _ComponentBase(Configuration):
    type: str
    configurations: dict[str, Configuration] | None = None


class _LocatedComponent(_ComponentBase):
    @model_validator(mode="after")
    def check_location(self) -> _LocatedComponent:
        if self.location is not None:
            return self
        if self.configurations and all(c.location is not None for c in self.configurations.values()):
            return self
        raise MissingLocationError(self.type)


class ArchiveComponent(_LocatedComponent):
    """A static library."""

    type: Literal["archive"] = "archive"


class DylibComponent(_LocatedComponent):
    """A shared library."""

    type: Literal["dylib"] = "dylib"


class ModuleComponent(_LocatedComponent):
    """A loadable plugin that is not linked against."""

    type: Literal["module"] = "module"


class JarComponent(_LocatedComponent):
    """A Java archive."""

    type: Literal["jar"] = "jar"


class InterfaceComponent(_ComponentBase):
    """A component without an artifact of its own (headers, flags, requirements)."""

    type: Literal["interface"] = "interface"


class SymbolicComponent(_ComponentBase):
    """An alias or feature marker with no required artifact."""

    type: Literal["symbolic"] = "symbolic"


class OtherComponent(_ComponentBase):
    """A component of a type this model does not interpret; all keys are kept."""

    model_config = ConfigDict(extra="allow")


def _component_tag(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if isinstance(kind, str) and kind in _KNOWN_KINDS:
        return kind
    return "other"


Component = Annotated[
    Annotated[ArchiveComponent, Tag("archive")]
    | Annotated[DylibComponent, Tag("dylib")]
    | Annotated[ModuleComponent, Tag("module")]
    | Annotated[JarComponent, Tag("jar")]
    | Annotated[InterfaceComponent, Tag("interface")]
    | Annotated[SymbolicComponent, Tag("symbolic")]
    | Annotated[OtherComponent, Tag("other")],
    Discriminator(_component_tag),
]


class Package(BaseModel):
    """A CPS package document."""

    name: str
    # Stamped when built in code; documents read from disk must declare it.
    cps_version: str = CPS_VERSION
    components: dict[str, Component]
    platform: Platform | None = None
    # Required in configuration-specific documents, ignored otherwise.
    configuration: str | None = None
    configurations: list[str] | None = None
    cps_path: str | None = None
    version: str | None = None
    version_schema: str | None = None
    compat_version: str | None = None
    description: str | None = None
    license: str | None = None
    default_components: list[str] | None = None
    requires: dict[str, Requirement] | None = None

    @field_validator("cps_version")
    @classmethod
    def check_cps_version(cls, value: str) -> str:
        if value != CPS_VERSION:
            raise UnsupportedSchemaVersionError(value)
        return value


# ################
# Implementation
# ################

_KNOWN_KINDS = frozenset(kind.value for kind in ComponentKind)
