# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for diagram model artifact serialization."""

import json
from pathlib import Path

import pytest

from eerstudio import parse
from eerstudio.compiler.artifact import ARTIFACT_FORMAT_VERSION, deserialize, read_artifact, serialize, write_artifact
from eerstudio.model.entities import DiagramModel, IgnoredLine, Link, LinkStyle, Node, NodeKind
from eerstudio.samples import SAMPLE_DOCUMENT


class TestSerialize:
    def test_empty_model(self) -> None:
        obj = json.loads(serialize(DiagramModel()))
        assert obj == {"v": ARTIFACT_FORMAT_VERSION, "nodes": [], "links": [], "ignored": []}

    def test_node_fields(self) -> None:
        model = DiagramModel(
            nodes=[Node(id="d", kind=NodeKind.SPECIALIZATION, label="d", x=1, y=2.5, discriminator="d", origin_line=3)]
        )
        obj = json.loads(serialize(model))
        assert obj["nodes"] == [
            {"id": "d", "kind": "specialization", "label": "d", "x": 1.0, "y": 2.5, "line": 3, "discriminator": "d"}
        ]

    def test_optional_fields_are_omitted(self) -> None:
        model = DiagramModel(
            nodes=[Node(id="A", kind=NodeKind.ENTITY, label="A", x=0, y=0, origin_line=0)],
            links=[Link(source_id="A", target_id="B")],
        )
        obj = json.loads(serialize(model))
        assert "discriminator" not in obj["nodes"][0]
        assert obj["links"] == [{"source": "A", "target": "B", "style": "solid"}]

    def test_output_is_compact(self) -> None:
        assert " " not in serialize(parse("ent A (1, 2)"))


class TestDeserialize:
    def test_parsed_sample_survives_serialization(self) -> None:
        model = parse(SAMPLE_DOCUMENT + "\nbogus line\n")
        assert deserialize(serialize(model)) == model

    def test_link_style_and_ignored_lines(self) -> None:
        model = DiagramModel(
            links=[Link(source_id="A", target_id="R", label="N", style=LinkStyle.DOUBLE)],
            ignored=[IgnoredLine(line_index=2, text="x y", reason="unknown command 'x'")],
        )
        assert deserialize(serialize(model)) == model

    def test_unknown_version_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported artifact format version"):
            deserialize('{"v": "99", "nodes": []}')

    def test_missing_version_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            deserialize('{"nodes": []}')


def test_write_and_read_artifact(tmp_path: Path) -> None:
    model = parse(SAMPLE_DOCUMENT)
    path = tmp_path / "out" / "diagram.eer.json"
    write_artifact(model, path)
    assert path.exists()
    assert read_artifact(path) == model
