# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings and logging configuration for EER Studio."""

from eerstudio.settings.config import (
    SETTINGS_FILE_NAME,
    EditorSettings,
    LayoutSettings,
    Settings,
    SettingsError,
    default_settings,
    load_settings,
    parse_settings,
)
from eerstudio.settings.logging import get_logger, setup_logging

__all__ = [
    "SETTINGS_FILE_NAME",
    "EditorSettings",
    "LayoutSettings",
    "Settings",
    "SettingsError",
    "default_settings",
    "get_logger",
    "load_settings",
    "parse_settings",
    "setup_logging",
]
