# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration file loader."""

from pathlib import Path

import pytest

from cps_deps.config.loader import CONFIG_FILE_NAME, ConfigError, GeneratorConfig, load_config
from cps_deps.converter.generate import DEFAULT_PC_SEARCH_ROOTS

# ###############
# Test Helpers
# ###############


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / CONFIG_FILE_NAME
    path.write_text(text, encoding="utf-8")
    return path


# ###############
# Loading
# ###############


def test_defaults() -> None:
    config = GeneratorConfig()
    assert config.pc_search_roots == list(DEFAULT_PC_SEARCH_ROOTS)
    assert config.library_search_paths == []
    assert config.compiler == "gcc"
    assert config.multiarch is True


def test_full_config(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
pc-search-roots:
  - /opt/pkgconfig
  - vendor/pc
library-search-paths:
  - /opt/lib
compiler: clang
multiarch: false
""",
    )
    config = load_config(path)
    assert config.pc_search_roots == [Path("/opt/pkgconfig"), tmp_path / "vendor" / "pc"]
    assert config.library_search_paths == [Path("/opt/lib")]
    assert config.compiler == "clang"
    assert config.multiarch is False


def test_partial_config_keeps_defaults(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, "compiler: cc\n"))
    assert config.compiler == "cc"
    assert config.pc_search_roots == list(DEFAULT_PC_SEARCH_ROOTS)


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, "")) == GeneratorConfig()


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


# ###############
# Invalid content
# ###############


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write(tmp_path, "pc-search-roots: [unterminated\n"))


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write(tmp_path, "- a\n- b\n"))


def test_unknown_key(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="unknown field"):
        load_config(_write(tmp_path, "search-roots: [/usr]\n"))


@pytest.mark.parametrize(
    "text",
    [
        "pc-search-roots: /usr/lib\n",
        "library-search-paths: [1, 2]\n",
        "compiler: ''\n",
        "compiler: 3\n",
        "multiarch: 'yes'\n",
    ],
)
def test_wrong_types(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, text))
