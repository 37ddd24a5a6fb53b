# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the settings module."""

from pathlib import Path

import pytest

from eerstudio.settings import (
    EditorSettings,
    LayoutSettings,
    Settings,
    SettingsError,
    default_settings,
    load_settings,
    parse_settings,
)

# ###############
# Helpers
# ###############


def _write_settings(tmp_path: Path, content: str) -> Path:
    """Write a settings file and return its path."""
    settings_file = tmp_path / ".eerstudio.yaml"
    settings_file.write_text(content, encoding="utf-8")
    return settings_file


# ###############
# Normal Cases
# ###############


def test_defaults() -> None:
    settings = default_settings()
    assert settings.layout == LayoutSettings(
        center_x=400, center_y=300, radius=250, angle_step=0.6, radius_growth=15
    )
    assert settings.editor == EditorSettings(debounce_seconds=0.3)


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    assert load_settings(_write_settings(tmp_path, "")) == Settings()


def test_full_settings(tmp_path: Path) -> None:
    content = """\
layout:
  center-x: 0
  center-y: 10
  radius: 100
  angle-step: 0.5
  radius-growth: 2.5
editor:
  debounce-seconds: 1
"""
    settings = load_settings(_write_settings(tmp_path, content))

    assert settings.layout == LayoutSettings(
        center_x=0, center_y=10, radius=100, angle_step=0.5, radius_growth=2.5
    )
    assert settings.editor.debounce_seconds == 1.0


def test_partial_settings_keep_other_defaults() -> None:
    settings = parse_settings("layout:\n  radius: 50\n")
    assert settings.layout.radius == 50
    assert settings.layout.center_x == 400
    assert settings.editor == EditorSettings()


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="not found"):
        load_settings(tmp_path / "missing.yaml")


def test_invalid_yaml_raises() -> None:
    with pytest.raises(SettingsError, match="Invalid YAML"):
        parse_settings("layout: [unclosed")


def test_top_level_must_be_mapping() -> None:
    with pytest.raises(SettingsError, match="must be a YAML mapping"):
        parse_settings("- a\n- b\n")


def test_section_must_be_mapping() -> None:
    with pytest.raises(SettingsError, match="'layout' must be a YAML mapping"):
        parse_settings("layout: 3\n")


@pytest.mark.parametrize("value", ["'wide'", "true", "[1, 2]"])
def test_non_numeric_value_raises(value: str) -> None:
    with pytest.raises(SettingsError, match="'radius' must be a number"):
        parse_settings(f"layout:\n  radius: {value}\n")


def test_negative_debounce_raises() -> None:
    with pytest.raises(SettingsError, match="must not be negative"):
        parse_settings("editor:\n  debounce-seconds: -1\n")


def test_error_mentions_source_label(tmp_path: Path) -> None:
    path = _write_settings(tmp_path, "layout: 3\n")
    with pytest.raises(SettingsError, match=str(path).replace("\\", "\\\\")):
        load_settings(path)
