# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""EER Studio: text-defined EER diagrams kept in sync with their graph model."""

from eerstudio.compiler.builder import build_model as parse
from eerstudio.model.entities import DiagramModel, Link, LinkStyle, Node, NodeKind
from eerstudio.sync.writeback import move_node, write_back

__all__ = [
    "parse",
    "write_back",
    "move_node",
    "DiagramModel",
    "Node",
    "NodeKind",
    "Link",
    "LinkStyle",
]
