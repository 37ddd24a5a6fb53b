# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of diagram models.

Models are exported as compact JSON for rendering collaborators. The format is
versioned so future schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from eerstudio.model.entities import DiagramModel, IgnoredLine, Link, LinkStyle, Node, NodeKind

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".eer.json"


def serialize(model: DiagramModel) -> str:
    """Serialize a DiagramModel to a compact JSON string."""
    return json.dumps(_model_to_dict(model), separators=(",", ":"))


def deserialize(data: str) -> DiagramModel:
    """Deserialize a DiagramModel from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`DiagramModel`.

    Raises:
        ValueError: If the artifact format version is not recognised.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return _model_from_dict(obj)


def write_artifact(model: DiagramModel, path: Path) -> None:
    """Write a model artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(model), encoding="utf-8")


def read_artifact(path: Path) -> DiagramModel:
    """Read and deserialize a model artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _model_to_dict(model: DiagramModel) -> dict[str, Any]:
    return {
        "v": ARTIFACT_FORMAT_VERSION,
        "nodes": [_node_to_dict(n) for n in model.nodes],
        "links": [_link_to_dict(link) for link in model.links],
        "ignored": [_ignored_to_dict(i) for i in model.ignored],
    }


def _model_from_dict(obj: dict[str, Any]) -> DiagramModel:
    return DiagramModel(
        nodes=[_node_from_dict(n) for n in obj.get("nodes", [])],
        links=[_link_from_dict(link) for link in obj.get("links", [])],
        ignored=[_ignored_from_dict(i) for i in obj.get("ignored", [])],
    )


def _node_to_dict(node: Node) -> dict[str, Any]:
    d: dict[str, Any] = {
        "id": node.id,
        "kind": node.kind.value,
        "label": node.label,
        "x": node.x,
        "y": node.y,
        "line": node.origin_line,
    }
    if node.discriminator is not None:
        d["discriminator"] = node.discriminator
    return d


def _node_from_dict(obj: dict[str, Any]) -> Node:
    return Node(
        id=obj["id"],
        kind=NodeKind(obj["kind"]),
        label=obj["label"],
        x=obj["x"],
        y=obj["y"],
        discriminator=obj.get("discriminator"),
        origin_line=obj["line"],
    )


def _link_to_dict(link: Link) -> dict[str, Any]:
    d: dict[str, Any] = {"source": link.source_id, "target": link.target_id, "style": link.style.value}
    if link.label is not None:
        d["label"] = link.label
    return d


def _link_from_dict(obj: dict[str, Any]) -> Link:
    return Link(
        source_id=obj["source"],
        target_id=obj["target"],
        label=obj.get("label"),
        style=LinkStyle(obj.get("style", LinkStyle.SOLID.value)),
    )


def _ignored_to_dict(ignored: IgnoredLine) -> dict[str, Any]:
    return {"line": ignored.line_index, "text": ignored.text, "reason": ignored.reason}


def _ignored_from_dict(obj: dict[str, Any]) -> IgnoredLine:
    return IgnoredLine(line_index=obj["line"], text=obj["text"], reason=obj["reason"])
