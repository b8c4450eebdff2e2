# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for mapping pkg-config records onto CPS packages."""

from pathlib import Path

import pytest

from cps_deps.converter.convert import ConversionError, convert, convert_pkg_config
from cps_deps.model.cps import (
    ArchiveComponent,
    Configuration,
    DylibComponent,
    InterfaceComponent,
    Requirement,
)
from cps_deps.model.pkg_config import Dependency, PkgConfigFile
from cps_deps.resolver.library_search import Archive, Both, Dylib, LibraryNotFoundError

# ###############
# Public Interface
# ###############


def _pkg(**kwargs) -> PkgConfigFile:
    fields = {"name": "foo", "version": "1.0", "description": "Foo library"}
    fields.update(kwargs)
    return PkgConfigFile(**fields)


class TestDefaultComponent:
    def test_header_only_package_becomes_interface(self):
        """Without -l flags the default component is named after the package."""
        package = convert(_pkg(includes=["/usr/include/foo"], definitions=["FOO"]), {})
        assert package.default_components == ["foo"]
        component = package.components["foo"]
        assert isinstance(component, InterfaceComponent)
        assert component.location is None
        assert component.includes == {"*": ["/usr/include/foo"]}
        assert component.definitions == {"*": ["FOO"]}
        assert package.configurations is None

    def test_dylib_primary(self):
        package = convert(_pkg(link_libraries=["foo"]), {"foo": Dylib("/usr/lib/libfoo.so")})
        component = package.components["foo"]
        assert isinstance(component, DylibComponent)
        assert component.location == "/usr/lib/libfoo.so"
        assert package.default_components == ["foo"]

    def test_archive_primary(self):
        package = convert(_pkg(link_libraries=["foo"]), {"foo": Archive("/usr/lib/libfoo.a")})
        component = package.components["foo"]
        assert isinstance(component, ArchiveComponent)
        assert component.location == "/usr/lib/libfoo.a"

    def test_default_component_is_named_after_primary_library(self):
        package = convert(_pkg(name="NSS", link_libraries=["nss3"]), {"nss3": Dylib("/usr/lib/libnss3.so")})
        assert package.name == "NSS"
        assert package.default_components == ["nss3"]
        assert list(package.components) == ["nss3"]

    def test_both_primary_dispatches_through_configurations(self):
        """A library present in both forms gets shared and static variants."""
        location = Both(archive="/usr/lib/libfoo.a", dylib="/usr/lib/libfoo.so")
        package = convert(_pkg(link_libraries=["foo"]), {"foo": location})

        assert package.configurations == ["shared", "static"]
        default = package.components["foo"]
        assert isinstance(default, InterfaceComponent)
        assert default.configurations == {
            "shared": Configuration(requires=[":foo-shared"]),
            "static": Configuration(requires=[":foo-static"]),
        }
        shared = package.components["foo-shared"]
        static = package.components["foo-static"]
        assert isinstance(shared, DylibComponent) and shared.location == "/usr/lib/libfoo.so"
        assert isinstance(static, ArchiveComponent) and static.location == "/usr/lib/libfoo.a"

    def test_compile_and_link_metadata(self):
        pkg = _pkg(
            link_libraries=["foo"],
            compile_flags=["-pthread"],
            link_flags=["-Wl,--as-needed"],
        )
        component = convert(pkg, {"foo": Dylib("/usr/lib/libfoo.so")}).components["foo"]
        assert component.compile_flags == {"*": ["-pthread"]}
        assert component.link_flags == ["-Wl,--as-needed"]
        assert component.includes is None
        assert component.definitions is None


class TestRequirements:
    def test_secondary_libraries_become_components(self):
        locations = {
            "nss3": Dylib("/usr/lib/libnss3.so"),
            "nssutil3": Dylib("/usr/lib/libnssutil3.so"),
            "ssl3": Archive("/usr/lib/libssl3.a"),
        }
        package = convert(_pkg(name="NSS", link_libraries=["nss3", "nssutil3", "ssl3"]), locations)
        assert package.components["nss3"].requires == [":nssutil3", ":ssl3"]
        assert isinstance(package.components["nssutil3"], DylibComponent)
        assert isinstance(package.components["ssl3"], ArchiveComponent)
        assert package.components["ssl3"].location == "/usr/lib/libssl3.a"

    def test_cross_package_requires_follow_local_ones(self):
        pkg = _pkg(
            link_libraries=["foo", "bar"],
            requires=[Dependency(name="zlib"), Dependency(name="glib-2.0", operator=">=", version="2.50")],
        )
        locations = {"foo": Dylib("/lib/libfoo.so"), "bar": Dylib("/lib/libbar.so")}
        package = convert(pkg, locations)
        assert package.components["foo"].requires == [":bar", "zlib", "glib-2.0"]

    def test_only_versioned_requires_reach_the_package(self):
        pkg = _pkg(requires=[Dependency(name="zlib"), Dependency(name="glib-2.0", operator=">=", version="2.50")])
        package = convert(pkg, {})
        assert package.requires == {"glib-2.0": Requirement(version="2.50")}

    def test_no_versioned_requires(self):
        assert convert(_pkg(requires=[Dependency(name="zlib")]), {}).requires is None

    def test_both_primary_repeats_requires_per_configuration(self):
        pkg = _pkg(link_libraries=["foo", "bar"], requires=[Dependency(name="zlib")])
        locations = {
            "foo": Both(archive="/lib/libfoo.a", dylib="/lib/libfoo.so"),
            "bar": Archive("/lib/libbar.a"),
        }
        default = convert(pkg, locations).components["foo"]
        assert default.requires is None
        assert default.configurations["shared"].requires == [":foo-shared", ":bar", "zlib"]
        assert default.configurations["static"].requires == [":foo-static", ":bar", "zlib"]

    def test_interface_requires(self):
        package = convert(_pkg(requires=[Dependency(name="zlib")]), {})
        assert package.components["foo"].requires == ["zlib"]


class TestPackageFields:
    def test_metadata_is_copied(self):
        package = convert(_pkg(license="MIT"), {})
        assert package.name == "foo"
        assert package.version == "1.0"
        assert package.description == "Foo library"
        assert package.license == "MIT"
        assert package.cps_version == "0.11.0"

    def test_duplicate_libraries_collapse(self):
        locations = {"foo": Dylib("/lib/libfoo.so"), "bar": Dylib("/lib/libbar.so")}
        package = convert(_pkg(link_libraries=["foo", "bar", "foo", "bar"]), locations)
        assert list(package.components) == ["foo", "bar"]
        assert package.components["foo"].requires == [":bar"]

    def test_unresolved_library(self):
        with pytest.raises(ConversionError, match="bar"):
            convert(_pkg(link_libraries=["foo", "bar"]), {"foo": Dylib("/lib/libfoo.so")})


class TestConvertPkgConfig:
    def test_resolves_from_link_locations(self, tmp_path: Path):
        (tmp_path / "libfoo.so").write_bytes(b"")
        package = convert_pkg_config(_pkg(link_libraries=["foo"], link_locations=[str(tmp_path)]))
        assert package.components["foo"].location == str(tmp_path / "libfoo.so")

    def test_extra_search_paths(self, tmp_path: Path):
        (tmp_path / "libfoo.a").write_bytes(b"")
        package = convert_pkg_config(_pkg(link_libraries=["foo"]), extra_search_paths=[tmp_path])
        assert isinstance(package.components["foo"], ArchiveComponent)

    def test_multiarch_dirs(self, tmp_path: Path):
        (tmp_path / "libfoo.so").write_bytes(b"")
        package = convert_pkg_config(_pkg(link_libraries=["foo"]), multiarch_dirs=[tmp_path])
        assert isinstance(package.components["foo"], DylibComponent)

    def test_missing_library(self, tmp_path: Path):
        with pytest.raises(LibraryNotFoundError):
            convert_pkg_config(_pkg(link_libraries=["foo"], link_locations=[str(tmp_path)]))
