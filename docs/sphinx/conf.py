# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the cps-deps documentation."""

project = "cps-deps"
author = "cps-deps Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
