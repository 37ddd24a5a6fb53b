# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line classification for EER documents.

Splits a document into lines, drops blank and comment lines, and extracts the
optional ``(x, y)`` coordinate pair a statement may carry.
"""

import math
import re
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

COMMENT_MARKER = "//"

# str.strip() leaves it in place.
BYTE_ORDER_MARK = "\ufeff"

# Only the first match on a line is honored.
COORDINATE_PATTERN = re.compile(r"\(\s*(-?\d+),\s*(-?\d+)\s*\)")


@dataclass(frozen=True)
class ClassifiedLine:
    """A statement line with its coordinates separated from the rest.

    Attributes:
        index: Zero-based line index in the document.
        has_coords: True if the line carried an ``(x, y)`` pair.
        x: The x coordinate, or None.
        y: The y coordinate, or None.
        remainder: The trimmed line text with the coordinate pair removed.
    """

    index: int
    has_coords: bool
    x: int | None
    y: int | None
    remainder: str


def split_lines(document: str) -> list[str]:
    """Split a document into raw lines.

    Splitting on ``"\\n"`` only keeps any ``"\\r"`` with its line, so joining
    the result with ``"\\n"`` reproduces the document byte for byte.
    """
    return document.split("\n")


def join_lines(lines: list[str]) -> str:
    """Inverse of :func:`split_lines`."""
    return "\n".join(lines)


def classify_line(raw: str, index: int) -> ClassifiedLine | None:
    """Classify one raw document line.

    A leading byte-order mark is treated as whitespace. Returns None for
    blank lines and ``//`` comments. Otherwise returns a
    :class:`ClassifiedLine` whose ``remainder`` is ready for tokenizing.
    """
    text = raw.lstrip(BYTE_ORDER_MARK).strip()
    if not text or text.startswith(COMMENT_MARKER):
        return None

    match = COORDINATE_PATTERN.search(text)
    if match is None:
        return ClassifiedLine(index=index, has_coords=False, x=None, y=None, remainder=text)

    remainder = (text[: match.start()] + text[match.end() :]).strip()
    return ClassifiedLine(
        index=index,
        has_coords=True,
        x=int(match.group(1)),
        y=int(match.group(2)),
        remainder=remainder,
    )


def round_coordinate(value: float) -> int:
    """Round to the nearest integer, with halves going up (toward +inf).

    Used for both generated and written-back positions so that a stored
    position parses back to the same integer.
    """
    return math.floor(value + 0.5)


def format_coordinates(x: float, y: float) -> str:
    """Return the canonical ``(x, y)`` suffix text for a position."""
    return f"({round_coordinate(x)}, {round_coordinate(y)})"
