# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for CPS packages (dangling references, cycles, etc.)."""

from cps_deps.validation.checks import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
