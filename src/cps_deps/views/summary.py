# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Plain-text summary of a CPS package for inspection on the command line.

The summary shows:
- The package name, version, schema version and description.
- Package-level configurations, default components and requirements.
- One entry per component with its type, location and requirements.
- Per-configuration locations and requirements below each component.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cps_deps.model.cps import Component, Package

# ###############
# Public Interface
# ###############


@dataclass
class ConfigurationSummary:
    """One configuration of a component.

    Attributes:
        name: Configuration name (e.g. ``"shared"``).
        location: Artifact path, if the configuration sets one.
        requires: Requirement references of the configuration.
    """

    name: str
    location: str | None
    requires: list[str] = field(default_factory=list)


@dataclass
class ComponentSummary:
    """One component of the package.

    Attributes:
        name: Component name.
        kind: Value of the component's ``type`` field.
        location: Artifact path, if set on the component itself.
        requires: Requirement references of the component.
        configurations: The component's configurations, in document order.
    """

    name: str
    kind: str
    location: str | None
    requires: list[str] = field(default_factory=list)
    configurations: list[ConfigurationSummary] = field(default_factory=list)


@dataclass
class PackageSummary:
    """Everything :func:`render_summary` prints about a package."""

    name: str
    cps_version: str
    version: str | None
    description: str | None
    configurations: list[str] = field(default_factory=list)
    default_components: list[str] = field(default_factory=list)
    requirements: list[str] = field(default_factory=list)
    components: list[ComponentSummary] = field(default_factory=list)


def build_summary(package: Package) -> PackageSummary:
    """Collect the displayed facts of *package* into a :class:`PackageSummary`."""
    requirements = [
        f"{name} {requirement.version}" if requirement.version else name
        for name, requirement in (package.requires or {}).items()
    ]
    return PackageSummary(
        name=package.name,
        cps_version=package.cps_version,
        version=package.version,
        description=package.description,
        configurations=list(package.configurations or []),
        default_components=list(package.default_components or []),
        requirements=requirements,
        components=[_component_summary(name, component) for name, component in package.components.items()],
    )


def render_summary(summary: PackageSummary) -> str:
    """Render *summary* as indented plain text."""
    title = f"{summary.name} {summary.version}" if summary.version else summary.name
    lines = [f"{title} (cps {summary.cps_version})"]
    if summary.description:
        lines.append(f"  {summary.description}")
    if summary.configurations:
        lines.append(f"  configurations: {', '.join(summary.configurations)}")
    if summary.default_components:
        lines.append(f"  default components: {', '.join(summary.default_components)}")
    if summary.requirements:
        lines.append(f"  requires: {', '.join(summary.requirements)}")
    lines.append("  components:")
    for component in summary.components:
        lines.append(f"    {component.name} [{component.kind}]{_suffix(component.location, component.requires)}")
        for configuration in component.configurations:
            lines.append(f"      ({configuration.name}){_suffix(configuration.location, configuration.requires)}")
    return "\n".join(lines)


# ################
# Implementation
# ################


def _component_summary(name: str, component: Component) -> ComponentSummary:
    return ComponentSummary(
        name=name,
        kind=component.type,
        location=component.location,
        requires=list(component.requires or []),
        configurations=[
            ConfigurationSummary(name=config_name, location=config.location, requires=list(config.requires or []))
            for config_name, config in (component.configurations or {}).items()
        ],
    )


def _suffix(location: str | None, requires: list[str]) -> str:
    parts = []
    if location:
        parts.append(f" {location}")
    if requires:
        parts.append(f" -> {', '.join(requires)}")
    return "".join(parts)
