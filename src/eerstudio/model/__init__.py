# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagram model for EER Studio (nodes, links, ignored lines)."""

from eerstudio.model.entities import (
    DiagramModel,
    IgnoredLine,
    Link,
    LinkStyle,
    Node,
    NodeKind,
)

__all__ = [
    "NodeKind",
    "LinkStyle",
    "Node",
    "Link",
    "IgnoredLine",
    "DiagramModel",
]
