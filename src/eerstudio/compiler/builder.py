# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Builds a DiagramModel from EER document text.

The whole document is parsed on every call; there is no incremental update of
an existing model. Parsing is lenient: any text produces a model, and lines
that cannot be understood are recorded in ``DiagramModel.ignored``.
"""

from eerstudio.compiler.identifiers import IdentifierResolver
from eerstudio.compiler.layout import SpiralLayout
from eerstudio.model.entities import DiagramModel, IgnoredLine, Link, LinkStyle, Node
from eerstudio.parser.lines import ClassifiedLine, classify_line, split_lines
from eerstudio.parser.statements import (
    HierarchyDeclaration,
    IgnoredStatement,
    LinkDeclaration,
    NodeDeclaration,
    parse_statement,
)
from eerstudio.settings.config import LayoutSettings
from eerstudio.settings.logging import get_logger

logger = get_logger(__name__)

# ###############
# Public Interface
# ###############


def build_model(document: str, layout: LayoutSettings | None = None) -> DiagramModel:
    """Parse EER document text into a diagram model.

    Args:
        document: The full document text.
        layout: Spiral parameters for nodes without coordinates.

    Returns:
        A new DiagramModel. Nodes and links appear in declaration order; a
        shorthand link (``att X -> OWNER``) directly follows its node.
    """
    return _ModelBuilder(layout).build(document)


# ################
# Implementation
# ################


class _ModelBuilder:
    """Per-pass state: id allocation, spiral position and the output lists."""

    def __init__(self, layout: LayoutSettings | None) -> None:
        self._ids = IdentifierResolver()
        self._spiral = SpiralLayout(layout)
        self._nodes: list[Node] = []
        self._links: list[Link] = []
        self._ignored: list[IgnoredLine] = []

    def build(self, document: str) -> DiagramModel:
        for index, raw in enumerate(split_lines(document)):
            line = classify_line(raw, index)
            if line is not None:
                self._add_line(line)

        logger.debug(
            "Parsed %d node(s), %d link(s), %d ignored line(s)",
            len(self._nodes),
            len(self._links),
            len(self._ignored),
        )
        return DiagramModel(nodes=self._nodes, links=self._links, ignored=self._ignored)

    def _add_line(self, line: ClassifiedLine) -> None:
        statement = parse_statement(line.remainder, line.index)
        if isinstance(statement, NodeDeclaration):
            self._add_node(statement, line)
        elif isinstance(statement, HierarchyDeclaration):
            self._add_hierarchy(statement, line)
        elif isinstance(statement, LinkDeclaration):
            self._links.append(
                Link(
                    source_id=statement.source_id,
                    target_id=statement.target_id,
                    label=statement.label,
                    style=statement.style,
                )
            )
        elif isinstance(statement, IgnoredStatement):
            logger.debug("Ignoring line %d: %s", statement.line_index, statement.reason)
            self._ignored.append(
                IgnoredLine(line_index=statement.line_index, text=statement.text, reason=statement.reason)
            )

    def _add_node(self, decl: NodeDeclaration, line: ClassifiedLine) -> None:
        node_id = self._ids.resolve(decl.label, decl.kind, decl.line_index)
        x, y = self._position(line)
        self._nodes.append(
            Node(id=node_id, kind=decl.kind, label=decl.label, x=x, y=y, origin_line=decl.line_index)
        )
        if decl.owner_id is not None:
            self._links.append(Link(source_id=decl.owner_id, target_id=node_id, style=LinkStyle.SOLID))

    def _add_hierarchy(self, decl: HierarchyDeclaration, line: ClassifiedLine) -> None:
        node_id = self._ids.resolve(decl.explicit_id, decl.kind, decl.line_index)
        x, y = self._position(line)
        self._nodes.append(
            Node(
                id=node_id,
                kind=decl.kind,
                label=decl.discriminator,
                x=x,
                y=y,
                discriminator=decl.discriminator,
                origin_line=decl.line_index,
            )
        )
        if decl.superclass_id is not None:
            self._links.append(Link(source_id=decl.superclass_id, target_id=node_id, style=LinkStyle.DOUBLE))

    def _position(self, line: ClassifiedLine) -> tuple[int, int]:
        """Return the line's own coordinates, or the next spiral position."""
        if line.x is not None and line.y is not None:
            return line.x, line.y
        return self._spiral.next_position()
