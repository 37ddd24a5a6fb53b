# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Graph model produced by parsing an EER document."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class NodeKind(Enum):
    """The kinds of graph vertices an EER document can declare."""

    ENTITY = "entity"
    WEAK_ENTITY = "weak_entity"
    RELATIONSHIP = "relationship"
    IDENTIFYING_RELATIONSHIP = "identifying_relationship"
    ATTRIBUTE = "attribute"
    KEY_ATTRIBUTE = "key_attribute"
    MULTIVALUED_ATTRIBUTE = "multivalued_attribute"
    DERIVED_ATTRIBUTE = "derived_attribute"
    SPECIALIZATION = "specialization"
    UNION = "union"

    @property
    def is_attribute(self) -> bool:
        """Return True for the four attribute kinds."""
        return self in _ATTRIBUTE_KINDS

    @property
    def is_hierarchy(self) -> bool:
        """Return True for specialization and union nodes."""
        return self in (NodeKind.SPECIALIZATION, NodeKind.UNION)

    @property
    def is_entity(self) -> bool:
        """Return True for strong and weak entities."""
        return self in (NodeKind.ENTITY, NodeKind.WEAK_ENTITY)


class LinkStyle(Enum):
    """Line style of a link; DOUBLE marks total participation."""

    SOLID = "solid"
    DOUBLE = "double"


class Node(BaseModel):
    """A vertex of the diagram.

    ``origin_line`` is the zero-based index of the document line that declared
    the node at parse time. It is a position, not a durable identity: inserting
    or deleting lines above it invalidates it.
    """

    id: str
    kind: NodeKind
    label: str
    x: float
    y: float
    discriminator: str | None = None
    origin_line: int


class Link(BaseModel):
    """An edge between two node ids, with optional cardinality or role label."""

    source_id: str
    target_id: str
    label: str | None = None
    style: LinkStyle = LinkStyle.SOLID


class IgnoredLine(BaseModel):
    """A non-blank, non-comment line that contributed nothing to the model."""

    line_index: int
    text: str
    reason: str


class DiagramModel(BaseModel):
    """Nodes and links of one parse pass, in declaration order.

    Links are stored as written, even when an endpoint id does not name any
    node. Consumers that need both endpoints should iterate
    :meth:`resolvable_links`.
    """

    nodes: list[Node] = _Field(default_factory=list)
    links: list[Link] = _Field(default_factory=list)
    ignored: list[IgnoredLine] = _Field(default_factory=list)

    def find_node(self, node_id: str) -> Node | None:
        """Return the node with the given id, or None."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def node_ids(self) -> set[str]:
        """Return the set of all node ids."""
        return {node.id for node in self.nodes}

    def resolvable_links(self) -> list[Link]:
        """Return the links whose source and target both name existing nodes."""
        ids = self.node_ids()
        return [link for link in self.links if link.source_id in ids and link.target_id in ids]

    def dangling_links(self) -> list[Link]:
        """Return the links with at least one endpoint missing from the node set."""
        ids = self.node_ids()
        return [link for link in self.links if link.source_id not in ids or link.target_id not in ids]

    def is_subclass_link(self, link: Link) -> bool:
        """Return True if *link* goes from a specialization or union to an entity.

        Renderers draw the subset symbol on such links.
        """
        source = self.find_node(link.source_id)
        target = self.find_node(link.target_id)
        if source is None or target is None:
            return False
        return source.kind.is_hierarchy and target.kind.is_entity


# ################
# Implementation
# ################

_ATTRIBUTE_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.ATTRIBUTE,
        NodeKind.KEY_ATTRIBUTE,
        NodeKind.MULTIVALUED_ATTRIBUTE,
        NodeKind.DERIVED_ATTRIBUTE,
    }
)
