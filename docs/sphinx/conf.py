# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the EER Studio documentation."""

project = "EER Studio"
author = "EER Studio Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
