# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler queries used to locate the platform's multiarch library directory."""

import functools
import subprocess
from pathlib import Path

# ###############
# Public Interface
# ###############

DEFAULT_COMPILER = "gcc"

MULTIARCH_LIBRARY_ROOT = Path("/usr/lib")


def query_target_triple(compiler: str = DEFAULT_COMPILER) -> str | None:
    """Ask *compiler* for its target triple via ``-dumpmachine``.

    Returns:
        The triple (e.g. ``"x86_64-linux-gnu"``), or None if the compiler is
        not installed, fails, times out, or prints nothing.
    """
    try:
        result = subprocess.run(
            [compiler, "-dumpmachine"],
            capture_output=True,
            text=True,
            timeout=_QUERY_TIMEOUT,
        )
    except (OSError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


@functools.cache
def host_target_triple(compiler: str = DEFAULT_COMPILER) -> str | None:
    """Return :func:`query_target_triple`, computed at most once per compiler per process."""
    return query_target_triple(compiler)


def multiarch_directories(triple: str | None) -> list[Path]:
    """Return the multiarch library directory for *triple*, or nothing if unknown."""
    if not triple:
        return []
    return [MULTIARCH_LIBRARY_ROOT / triple]


# ################
# Implementation
# ################

_QUERY_TIMEOUT = 10
