# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Convert pkg-config metadata into Common Package Specification (CPS) documents."""

__version__ = "0.1.0"
