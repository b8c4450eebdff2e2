# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of CPS documents.

Documents are written as indented JSON.  Fields without a value are omitted
rather than written as ``null``.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from cps_deps.model.cps import Package

# ###############
# Public Interface
# ###############

CPS_SUFFIX = ".cps"


class CpsDocumentError(Exception):
    """Raised when a CPS document is not valid JSON or does not match the schema structure.

    Violations of the CPS invariants (schema version, component locations)
    are raised as :class:`~cps_deps.model.cps.CpsValidationError` instead.
    """


def serialize(package: Package) -> str:
    """Serialize *package* to an indented JSON string."""
    return json.dumps(package.model_dump(mode="json", exclude_none=True), indent=2) + "\n"


def deserialize(data: str) -> Package:
    """Deserialize a CPS document from a JSON string.

    Raises:
        CpsDocumentError: If *data* is not a JSON object matching the CPS
            structure, or does not declare a ``cps_version``.
        UnsupportedSchemaVersionError: If ``cps_version`` is not the supported version.
        MissingLocationError: If a location-requiring component has no location.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise CpsDocumentError(f"Invalid JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise CpsDocumentError("A CPS document must be a JSON object")
    if "cps_version" not in obj:
        raise CpsDocumentError("A CPS document must declare its cps_version")
    try:
        return Package.model_validate(obj)
    except ValidationError as exc:
        raise CpsDocumentError(f"Invalid CPS document: {exc}") from exc


def write_package(package: Package, path: Path) -> None:
    """Write *package* to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(package), encoding="utf-8")


def read_package(path: Path) -> Package:
    """Read and deserialize the CPS document at *path*."""
    return deserialize(path.read_text(encoding="utf-8"))
