# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Human-readable views of CPS packages."""

from cps_deps.views.summary import (
    ComponentSummary,
    ConfigurationSummary,
    PackageSummary,
    build_summary,
    render_summary,
)

__all__ = [
    "ComponentSummary",
    "ConfigurationSummary",
    "PackageSummary",
    "build_summary",
    "render_summary",
]
