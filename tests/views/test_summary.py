# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the plain-text package summary."""

from cps_deps.model.cps import (
    ArchiveComponent,
    Configuration,
    DylibComponent,
    InterfaceComponent,
    OtherComponent,
    Package,
    Requirement,
)
from cps_deps.views.summary import ComponentSummary, ConfigurationSummary, build_summary, render_summary

# ###############
# Test Helpers
# ###############


def _package() -> Package:
    return Package(
        name="foo",
        version="1.0",
        description="Foo library",
        configurations=["shared", "static"],
        default_components=["foo"],
        requires={"glib-2.0": Requirement(version="2.50"), "zlib": Requirement()},
        components={
            "foo": InterfaceComponent(
                configurations={
                    "shared": Configuration(requires=[":foo-shared"]),
                    "static": Configuration(requires=[":foo-static"]),
                }
            ),
            "foo-shared": DylibComponent(location="/lib/libfoo.so"),
            "foo-static": ArchiveComponent(location="/lib/libfoo.a", requires=["zlib"]),
        },
    )


# ###############
# build_summary
# ###############


class TestBuildSummary:
    def test_package_fields(self):
        summary = build_summary(_package())
        assert summary.name == "foo"
        assert summary.version == "1.0"
        assert summary.cps_version == "0.11.0"
        assert summary.configurations == ["shared", "static"]
        assert summary.default_components == ["foo"]
        assert summary.requirements == ["glib-2.0 2.50", "zlib"]

    def test_components_keep_document_order(self):
        summary = build_summary(_package())
        assert [c.name for c in summary.components] == ["foo", "foo-shared", "foo-static"]
        assert summary.components[0] == ComponentSummary(
            name="foo",
            kind="interface",
            location=None,
            configurations=[
                ConfigurationSummary(name="shared", location=None, requires=[":foo-shared"]),
                ConfigurationSummary(name="static", location=None, requires=[":foo-static"]),
            ],
        )

    def test_unknown_kind_is_shown_verbatim(self):
        package = Package(name="p", components={"tool": OtherComponent(type="exe", location="/bin/tool")})
        summary = build_summary(package)
        assert summary.components[0].kind == "exe"
        assert summary.components[0].location == "/bin/tool"

    def test_minimal_package(self):
        summary = build_summary(Package(name="p", components={}))
        assert summary.version is None
        assert summary.components == []
        assert summary.requirements == []


# ###############
# render_summary
# ###############


class TestRenderSummary:
    def test_full_rendering(self):
        text = render_summary(build_summary(_package()))
        assert text.splitlines() == [
            "foo 1.0 (cps 0.11.0)",
            "  Foo library",
            "  configurations: shared, static",
            "  default components: foo",
            "  requires: glib-2.0 2.50, zlib",
            "  components:",
            "    foo [interface]",
            "      (shared) -> :foo-shared",
            "      (static) -> :foo-static",
            "    foo-shared [dylib] /lib/libfoo.so",
            "    foo-static [archive] /lib/libfoo.a -> zlib",
        ]

    def test_minimal_rendering(self):
        text = render_summary(build_summary(Package(name="p", components={})))
        assert text == "p (cps 0.11.0)\n  components:"
