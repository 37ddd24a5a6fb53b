# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Persisting node positions back into the document text.

A node remembers only the index of the line that declared it. Moving the node
rewrites the coordinate suffix of that one line and leaves every other line
byte-for-byte intact.
"""

import math

from eerstudio.model.entities import DiagramModel
from eerstudio.parser.lines import COORDINATE_PATTERN, format_coordinates, join_lines, split_lines
from eerstudio.settings.logging import get_logger

logger = get_logger(__name__)

# ###############
# Public Interface
# ###############


def write_back(document: str, origin_line: int, x: float, y: float) -> str:
    """Return *document* with the position on line *origin_line* set to ``(x, y)``.

    The first ``(x, y)`` pair on the line is removed, trailing whitespace is
    trimmed and `` (X, Y)`` is appended, with X and Y rounded half up. A
    ``"\\r"`` line ending is kept. If
    *origin_line* is not a valid index into the current document (the text
    was restructured after the parse that produced it), or if either value
    is NaN or infinite, the document is returned unchanged.

    Args:
        document: The current document text.
        origin_line: Zero-based index of the line to rewrite.
        x: New x position.
        y: New y position.

    Returns:
        The updated document text.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        logger.debug("Write-back to line %d skipped: non-finite position (%r, %r)", origin_line, x, y)
        return document

    lines = split_lines(document)
    if not 0 <= origin_line < len(lines):
        logger.debug("Write-back to line %d skipped: document has %d line(s)", origin_line, len(lines))
        return document

    original = lines[origin_line]
    ending = "\r" if original.endswith("\r") else ""
    line = COORDINATE_PATTERN.sub("", original, count=1).rstrip()
    lines[origin_line] = f"{line} {format_coordinates(x, y)}{ending}"
    return join_lines(lines)


def move_node(document: str, model: DiagramModel, node_id: str, x: float, y: float) -> str:
    """Write back the position of the node with id *node_id*.

    Returns *document* unchanged when *model* has no such node.
    """
    node = model.find_node(node_id)
    if node is None:
        logger.debug("Write-back skipped: no node with id %r", node_id)
        return document
    return write_back(document, node.origin_line, x, y)
