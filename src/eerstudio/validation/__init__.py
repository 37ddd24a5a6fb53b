# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Advisory checks for EER Studio diagram models."""

from eerstudio.validation.checks import ValidationResult, ValidationWarning, validate

__all__ = [
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
