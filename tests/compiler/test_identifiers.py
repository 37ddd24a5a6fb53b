# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for node id allocation."""

import pytest

from eerstudio.compiler.identifiers import IdentifierResolver
from eerstudio.model.entities import NodeKind


def test_first_non_attribute_uses_label() -> None:
    resolver = IdentifierResolver()
    assert resolver.resolve("EMPLOYEE", NodeKind.ENTITY, 4) == "EMPLOYEE"


def test_repeated_label_gets_line_suffix() -> None:
    resolver = IdentifierResolver()
    assert resolver.resolve("X", NodeKind.ENTITY, 0) == "X"
    assert resolver.resolve("X", NodeKind.ENTITY, 1) == "X_1"


def test_collision_across_kinds() -> None:
    resolver = IdentifierResolver()
    resolver.resolve("WORKS", NodeKind.ENTITY, 0)
    assert resolver.resolve("WORKS", NodeKind.RELATIONSHIP, 6) == "WORKS_6"


@pytest.mark.parametrize(
    "kind",
    [NodeKind.ATTRIBUTE, NodeKind.KEY_ATTRIBUTE, NodeKind.DERIVED_ATTRIBUTE, NodeKind.MULTIVALUED_ATTRIBUTE],
)
def test_attributes_always_get_line_suffix(kind: NodeKind) -> None:
    resolver = IdentifierResolver()
    assert resolver.resolve("Name", kind, 3) == "Name_3"


def test_same_attribute_label_under_two_owners() -> None:
    resolver = IdentifierResolver()
    first = resolver.resolve("Name", NodeKind.ATTRIBUTE, 2)
    second = resolver.resolve("Name", NodeKind.ATTRIBUTE, 5)
    assert first == "Name_2"
    assert second == "Name_5"


def test_hierarchy_without_token_uses_spec_prefix() -> None:
    resolver = IdentifierResolver()
    assert resolver.resolve(None, NodeKind.SPECIALIZATION, 8) == "spec_8"
    assert resolver.resolve(None, NodeKind.UNION, 9) == "spec_9"


def test_hierarchy_with_token_collides_like_other_nodes() -> None:
    resolver = IdentifierResolver()
    assert resolver.resolve("d", NodeKind.SPECIALIZATION, 1) == "d"
    assert resolver.resolve("d", NodeKind.SPECIALIZATION, 4) == "d_4"


def test_suffixed_id_clashing_with_written_label_stays_unique() -> None:
    resolver = IdentifierResolver()
    resolver.resolve("X", NodeKind.ENTITY, 0)
    resolver.resolve("X_2", NodeKind.ENTITY, 1)
    third = resolver.resolve("X", NodeKind.ENTITY, 2)
    assert third not in {"X", "X_2"}
    assert len(resolver.allocated) == 3


def test_ids_are_registered_immediately() -> None:
    resolver = IdentifierResolver()
    resolver.resolve("A", NodeKind.ENTITY, 0)
    assert "A" in resolver
    assert "B" not in resolver
