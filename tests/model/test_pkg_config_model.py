# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the flat pkg-config record."""

from cps_deps.model import Dependency, PkgConfigFile


def test_defaults_are_empty() -> None:
    record = PkgConfigFile(name="zlib", version="1.3", description="zlib compression library")
    assert record.link_libraries == []
    assert record.requires == []
    assert record.url is None
    assert record.primary_library is None


def test_primary_library_is_first_link_library() -> None:
    record = PkgConfigFile(
        name="NSS",
        version="3.68.2",
        description="Mozilla Network Security Services",
        link_libraries=["nss3", "nssutil3", "smime3", "ssl3"],
    )
    assert record.primary_library == "nss3"


def test_dependency_without_constraint() -> None:
    dep = Dependency(name="glib-2.0")
    assert dep.operator is None
    assert dep.version is None
