# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the cps-deps configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from cps_deps.converter.generate import DEFAULT_PC_SEARCH_ROOTS
from cps_deps.resolver.toolchain import DEFAULT_COMPILER

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".cps-deps.yaml"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class GeneratorConfig:
    """Settings for discovering ``.pc`` files and resolving libraries.

    Attributes:
        pc_search_roots: Directories searched recursively for ``.pc`` files.
        library_search_paths: Library directories searched after the ``-L``
            directories of each ``.pc`` file.
        compiler: Compiler queried with ``-dumpmachine`` for the multiarch triple.
        multiarch: Whether the multiarch directory is searched at all.
    """

    pc_search_roots: list[Path] = field(default_factory=lambda: list(DEFAULT_PC_SEARCH_ROOTS))
    library_search_paths: list[Path] = field(default_factory=list)
    compiler: str = DEFAULT_COMPILER
    multiarch: bool = True


def load_config(path: Path) -> GeneratorConfig:
    """Load and parse a cps-deps configuration file.

    Relative directories in the file are resolved against the file's own
    directory.

    Args:
        path: Path to the ``.cps-deps.yaml`` file.

    Returns:
        A GeneratorConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, base_dir=path.parent, source_label=str(path))


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"pc-search-roots", "library-search-paths", "compiler", "multiarch"})


def _parse_config(text: str, base_dir: Path, source_label: str = "<string>") -> GeneratorConfig:
    """Parse configuration YAML text into a GeneratorConfig.

    An empty document yields the defaults.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    config = GeneratorConfig()
    if "pc-search-roots" in data:
        config.pc_search_roots = _path_list(data, "pc-search-roots", base_dir, source_label)
    if "library-search-paths" in data:
        config.library_search_paths = _path_list(data, "library-search-paths", base_dir, source_label)
    if "compiler" in data:
        compiler = data["compiler"]
        if not isinstance(compiler, str) or not compiler:
            raise ConfigError(f"{source_label}: 'compiler' must be a non-empty string")
        config.compiler = compiler
    if "multiarch" in data:
        multiarch = data["multiarch"]
        if not isinstance(multiarch, bool):
            raise ConfigError(f"{source_label}: 'multiarch' must be true or false")
        config.multiarch = multiarch
    return config


def _path_list(mapping: dict[str, object], key: str, base_dir: Path, source_label: str) -> list[Path]:
    """Extract a list of directories, resolving relative entries against *base_dir*."""
    value = mapping[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{source_label}: '{key}' must be a list of strings")
    return [base_dir / item for item in value]
