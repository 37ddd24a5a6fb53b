# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fallback placement for nodes declared without coordinates."""

import math

from eerstudio.parser.lines import round_coordinate
from eerstudio.settings.config import LayoutSettings

# ###############
# Public Interface
# ###############


class SpiralLayout:
    """Places successive nodes on a widening spiral around a fixed center.

    Each call to :meth:`next_position` advances a shared angle, so the
    position of an auto-placed node depends on how many coordinate-less
    nodes precede it in the document. Create one instance per parse pass.
    """

    def __init__(self, settings: LayoutSettings | None = None) -> None:
        self._settings = settings or LayoutSettings()
        self._angle = 0.0

    @property
    def angle(self) -> float:
        """The accumulated angle in radians."""
        return self._angle

    def next_position(self) -> tuple[int, int]:
        """Advance the spiral and return the next integer position."""
        s = self._settings
        self._angle += s.angle_step
        r = s.radius + self._angle * s.radius_growth
        x = round_coordinate(s.center_x + math.cos(self._angle) * r)
        y = round_coordinate(s.center_y + math.sin(self._angle) * r)
        return x, y
