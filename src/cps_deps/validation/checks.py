# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reference checks for CPS packages.

The structural invariants (schema version, component locations) are enforced
when a :class:`~cps_deps.model.cps.Package` is constructed.  The checks here
need the whole package: they follow the ``:name`` references between
components and the names listed at package level.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cps_deps.model.cps import Component, InterfaceComponent, Package

# ###############
# Public Interface
# ###############

LOCAL_REFERENCE_PREFIX = ":"


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal finding: the package is usable but probably not as intended.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A fatal finding: consumers of the package would fail to resolve it.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the reference checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: Fatal errors that indicate an unusable package.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return len(self.errors) > 0


def is_local_reference(requirement: str) -> bool:
    """Return True for ``:name`` references to a component of the same package."""
    return requirement.startswith(LOCAL_REFERENCE_PREFIX)


def validate(package: Package) -> ValidationResult:
    """Run all reference checks on *package*.

    Checks performed:

    1. **Dangling local references** (error): a ``:name`` entry in the
       ``requires`` of a component or of one of its configurations must name
       a component of the package.

    2. **Unknown default components** (error): every entry of
       ``default_components`` must name a component of the package.

    3. **Local requirement cycles** (error): components must not require
       themselves through a chain of ``:name`` references.

    4. **Undeclared configurations** (warning): when the package lists its
       ``configurations``, every configuration used by a component should be
       one of them.

    5. **Empty interfaces** (warning): an interface component without
       requirements, configurations, or compile and link metadata contributes
       nothing.

    Returns:
        A :class:`ValidationResult`; an empty result means no findings.
    """
    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    errors.extend(_check_local_references(package))
    errors.extend(_check_default_components(package))
    errors.extend(_check_requirement_cycles(package))
    warnings.extend(_check_configuration_names(package))
    warnings.extend(_check_empty_interfaces(package))

    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################


def _local_requirements(component: Component) -> list[tuple[str | None, str]]:
    """Return ``(configuration, target)`` pairs for every local reference of *component*.

    The configuration is None for references on the component itself.
    """
    pairs = [(None, r[1:]) for r in component.requires or [] if is_local_reference(r)]
    for config_name, configuration in (component.configurations or {}).items():
        pairs.extend((config_name, r[1:]) for r in configuration.requires or [] if is_local_reference(r))
    return pairs


def _check_local_references(package: Package) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for name, component in package.components.items():
        for config_name, target in _local_requirements(component):
            if target in package.components:
                continue
            where = f"Component '{name}'" if config_name is None else f"Configuration '{config_name}' of '{name}'"
            errors.append(ValidationError(message=f"{where} requires ':{target}', which is not a component."))
    return errors


def _check_default_components(package: Package) -> list[ValidationError]:
    return [
        ValidationError(message=f"Default component '{name}' is not a component of package '{package.name}'.")
        for name in package.default_components or []
        if name not in package.components
    ]


def _detect_cycle(graph: dict[str, list[str]]) -> list[str] | None:
    """Detect a cycle in a directed graph using DFS.

    Returns:
        The nodes of the cycle with the start node repeated at the end
        (e.g. ``["a", "b", "a"]``), or None if the graph is acyclic.
    """
    WHITE, GREY, BLACK = 0, 1, 2
    color: dict[str, int] = {}
    path: list[str] = []

    def _dfs(node: str) -> list[str] | None:
        color[node] = GREY
        path.append(node)
        for neighbor in graph.get(node, []):
            state = color.get(neighbor, WHITE)
            if state == GREY:
                cycle_start = path.index(neighbor)
                return path[cycle_start:] + [neighbor]
            if state == WHITE:
                result = _dfs(neighbor)
                if result is not None:
                    return result
        path.pop()
        color[node] = BLACK
        return None

    for node in graph:
        if color.get(node, WHITE) == WHITE:
            result = _dfs(node)
            if result is not None:
                return result
    return None


def _check_requirement_cycles(package: Package) -> list[ValidationError]:
    graph = {
        name: [target for _, target in _local_requirements(component) if target in package.components]
        for name, component in package.components.items()
    }
    cycle = _detect_cycle(graph)
    if cycle is None:
        return []
    cycle_str = " -> ".join(cycle)
    return [ValidationError(message=f"Component requirement cycle detected: {cycle_str}.")]


def _check_configuration_names(package: Package) -> list[ValidationWarning]:
    if package.configurations is None:
        return []
    declared = set(package.configurations)
    warnings: list[ValidationWarning] = []
    for name, component in package.components.items():
        for config_name in component.configurations or {}:
            if config_name not in declared:
                warnings.append(
                    ValidationWarning(
                        message=f"Component '{name}' uses configuration '{config_name}', "
                        "which the package does not declare."
                    )
                )
    return warnings


def _check_empty_interfaces(package: Package) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    for name, component in package.components.items():
        if not isinstance(component, InterfaceComponent):
            continue
        metadata = (
            component.requires,
            component.configurations,
            component.compile_flags,
            component.definitions,
            component.includes,
            component.link_flags,
            component.link_libraries,
        )
        if not any(metadata):
            warnings.append(ValidationWarning(message=f"Interface component '{name}' declares nothing (empty)."))
    return warnings
