# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for EER Studio."""
