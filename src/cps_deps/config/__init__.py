# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration file for cps-deps."""

from cps_deps.config.loader import (
    CONFIG_FILE_NAME,
    ConfigError,
    GeneratorConfig,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "GeneratorConfig",
    "load_config",
]
