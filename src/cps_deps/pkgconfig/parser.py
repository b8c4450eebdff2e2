# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser turning pkg-config text into a flat :class:`PkgConfigFile` record.

Parsing runs in three stages: comment lines are stripped, ``${name}``
references are expanded, and the recognised ``Keyword: value`` properties are
captured and post-processed into flag and dependency lists.
"""

from __future__ import annotations

import re

from cps_deps.model.pkg_config import Dependency, PkgConfigFile
from cps_deps.pkgconfig.lines import LineKind, PkgConfigError, classify_line, strip_comments
from cps_deps.pkgconfig.variables import expand_variables

# ###############
# Public Interface
# ###############

REQUIRED_PROPERTIES = ("Name", "Version", "Description")

COMPARISON_OPERATORS = frozenset({"<", "<=", "=", ">=", ">", "!="})


class MissingRequiredPropertyError(PkgConfigError):
    """Raised when ``Name``, ``Version`` or ``Description`` is absent.

    Attributes:
        property_name: The missing property.
    """

    def __init__(self, property_name: str) -> None:
        super().__init__(f"missing required property `{property_name}`")
        self.property_name = property_name


def parse(source: str) -> PkgConfigFile:
    """Parse the full text of a ``.pc`` file.

    Args:
        source: Raw pkg-config document text.

    Returns:
        The flattened record with all variables expanded.

    Raises:
        MissingRequiredPropertyError: If a mandatory property is absent.
        VariableExpansionError: If variable references cannot be resolved.
    """
    text = expand_variables(strip_comments(source))
    properties = _capture_properties(text)

    name, version, description = (_require(properties, key) for key in REQUIRED_PROPERTIES)

    cflags, compile_flags = _split_flags(properties.get("Cflags"), ("-I", "-D"))
    libs, link_flags = _split_flags(properties.get("Libs"), ("-L", "-l"))

    return PkgConfigFile(
        name=name,
        version=version,
        description=description,
        url=properties.get("URL"),
        license=properties.get("License"),
        maintainer=properties.get("Maintainer"),
        copyright=properties.get("Copyright"),
        includes=cflags["-I"],
        definitions=cflags["-D"],
        compile_flags=compile_flags,
        cflags_private=properties.get("Cflags.private"),
        link_locations=libs["-L"],
        link_libraries=libs["-l"],
        link_flags=link_flags,
        libs_private=properties.get("Libs.private"),
        requires=parse_dependency_list(properties.get("Requires", "")),
        requires_private=parse_dependency_list(properties.get("Requires.private", "")),
        conflicts=parse_dependency_list(properties.get("Conflicts", "")),
        provides=parse_dependency_list(properties.get("Provides", "")),
    )


def capture_property(name: str, text: str) -> str | None:
    """Return the trimmed value of the first non-empty *name* property in *text*."""
    return _capture_properties(text).get(name)


def parse_dependency_list(data: str) -> list[Dependency]:
    """Parse a ``Requires``-style list such as ``"glib-2.0, gio-2.0 >= 2.50"``.

    Entries are separated by whitespace and/or commas.  A run of operator
    characters (normally one of :data:`COMPARISON_OPERATORS`) attaches to the
    preceding name only when it is immediately followed by a version token; a
    dangling operator is dropped.
    """
    tokens = _DEPENDENCY_TOKEN_RE.findall(data)
    dependencies: list[Dependency] = []
    pos = 0
    while pos < len(tokens):
        token = tokens[pos]
        pos += 1
        if _is_operator_token(token):
            continue
        operator: str | None = None
        version: str | None = None
        if pos + 1 < len(tokens) and _is_operator_token(tokens[pos]) and not _is_operator_token(tokens[pos + 1]):
            operator, version = tokens[pos], tokens[pos + 1]
            pos += 2
        dependencies.append(Dependency(name=token, operator=operator, version=version))
    return dependencies


# ################
# Implementation
# ################

# Operator runs and name/version words; commas and whitespace separate tokens.
_DEPENDENCY_TOKEN_RE = re.compile(r"[<>=!]+|[^\s,<>=!]+")


def _is_operator_token(token: str) -> bool:
    return token[0] in "<>=!"


def _capture_properties(text: str) -> dict[str, str]:
    """Collect property values; the first non-empty occurrence of each key wins."""
    properties: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = classify_line(raw_line)
        if line.kind is LineKind.PROPERTY and line.value:
            assert line.key is not None
            properties.setdefault(line.key, line.value)
    return properties


def _require(properties: dict[str, str], key: str) -> str:
    value = properties.get(key)
    if value is None:
        raise MissingRequiredPropertyError(key)
    return value


def _split_flags(value: str | None, prefixes: tuple[str, ...]) -> tuple[dict[str, list[str]], list[str]]:
    """Sort whitespace-separated flags into per-prefix argument lists and the rest.

    The prefix is stripped from matched flags.  A bare prefix (``-I /usr/include``)
    takes the following token as its argument unless that token is itself a
    flag; a bare prefix without an argument is dropped.  Order is preserved within each
    list.
    """
    matched: dict[str, list[str]] = {prefix: [] for prefix in prefixes}
    rest: list[str] = []
    tokens = (value or "").split()
    pos = 0
    while pos < len(tokens):
        token = tokens[pos]
        pos += 1
        prefix = next((p for p in prefixes if token.startswith(p)), None)
        if prefix is None:
            rest.append(token)
            continue
        argument = token[len(prefix) :]
        if not argument and pos < len(tokens) and not tokens[pos].startswith("-"):
            argument = tokens[pos]
            pos += 1
        if argument:
            matched[prefix].append(argument)
    return matched, rest
