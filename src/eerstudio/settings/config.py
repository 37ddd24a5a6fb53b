# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the EER Studio settings file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = ".eerstudio.yaml"


class SettingsError(Exception):
    """Raised when a settings file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class LayoutSettings:
    """Parameters of the spiral used to place nodes without coordinates.

    Attributes:
        center_x: x of the spiral center.
        center_y: y of the spiral center.
        radius: Radius at angle zero.
        angle_step: Angle increment in radians per placed node.
        radius_growth: Radius added per radian of accumulated angle.
    """

    center_x: float = 400.0
    center_y: float = 300.0
    radius: float = 250.0
    angle_step: float = 0.6
    radius_growth: float = 15.0


@dataclass(frozen=True)
class EditorSettings:
    """Parameters of the live editing session.

    Attributes:
        debounce_seconds: Delay between the last text change and the re-parse.
    """

    debounce_seconds: float = 0.3


@dataclass(frozen=True)
class Settings:
    """All EER Studio settings."""

    layout: LayoutSettings = field(default_factory=LayoutSettings)
    editor: EditorSettings = field(default_factory=EditorSettings)


def default_settings() -> Settings:
    """Return the built-in settings."""
    return Settings()


def load_settings(path: Path) -> Settings:
    """Load and parse an EER Studio settings file.

    Args:
        path: Path to the `.eerstudio.yaml` file.

    Returns:
        A Settings instance; keys missing from the file keep their defaults.

    Raises:
        SettingsError: If the file cannot be read or the settings are invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SettingsError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file: {exc}") from exc

    return parse_settings(text, source_label=str(path))


def parse_settings(text: str, source_label: str = "<string>") -> Settings:
    """Parse settings YAML text into a Settings instance.

    Raises:
        SettingsError: If the YAML is invalid or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return default_settings()
    if not isinstance(data, dict):
        raise SettingsError(f"{source_label}: settings must be a YAML mapping")

    layout_data = _optional_mapping(data, "layout", source_label)
    editor_data = _optional_mapping(data, "editor", source_label)

    defaults_layout = LayoutSettings()
    layout = LayoutSettings(
        center_x=_number(layout_data, "center-x", defaults_layout.center_x, f"{source_label}: layout"),
        center_y=_number(layout_data, "center-y", defaults_layout.center_y, f"{source_label}: layout"),
        radius=_number(layout_data, "radius", defaults_layout.radius, f"{source_label}: layout"),
        angle_step=_number(layout_data, "angle-step", defaults_layout.angle_step, f"{source_label}: layout"),
        radius_growth=_number(
            layout_data, "radius-growth", defaults_layout.radius_growth, f"{source_label}: layout"
        ),
    )

    debounce = _number(
        editor_data, "debounce-seconds", EditorSettings().debounce_seconds, f"{source_label}: editor"
    )
    if debounce < 0:
        raise SettingsError(f"{source_label}: editor: 'debounce-seconds' must not be negative")

    return Settings(layout=layout, editor=EditorSettings(debounce_seconds=debounce))


# ################
# Implementation
# ################


def _optional_mapping(data: dict[str, object], key: str, source_label: str) -> dict[str, object]:
    """Return the sub-mapping at *key*, or an empty one when absent."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SettingsError(f"{source_label}: '{key}' must be a YAML mapping")
    return value


def _number(mapping: dict[str, object], key: str, default: float, location: str) -> float:
    """Extract an optional numeric field, raising SettingsError on other types."""
    if key not in mapping:
        return default
    value = mapping[key]
    # bool is an int subclass but never a meaningful coordinate.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingsError(f"{location}: '{key}' must be a number")
    return float(value)
