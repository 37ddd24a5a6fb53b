# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the diagram model checks."""

from eerstudio import parse
from eerstudio.samples import SAMPLE_DOCUMENT
from eerstudio.validation.checks import ValidationResult, ValidationWarning, validate

# ###############
# Test Helpers
# ###############


def _messages(document: str) -> list[str]:
    """Return the warning messages for a document."""
    return [w.message for w in validate(parse(document)).warnings]


# ###############
# Results
# ###############


def test_empty_result_has_no_warnings() -> None:
    assert ValidationResult().has_warnings is False


def test_sample_document_is_clean() -> None:
    result = validate(parse(SAMPLE_DOCUMENT))
    assert result.warnings == []
    assert result.has_warnings is False


# ###############
# Ignored Lines
# ###############


def test_ignored_line_is_reported_with_one_based_number() -> None:
    messages = _messages("ent A\nentity B")
    assert len(messages) == 1
    assert messages[0].startswith("Line 2 ignored")
    assert "entity B" in messages[0]


# ###############
# Dangling Links
# ###############


def test_dangling_link_names_missing_endpoint() -> None:
    messages = _messages('ent REAL\nlink GHOST REAL "1"')
    assert messages == ["Link 'GHOST' -> 'REAL' refers to undeclared node(s) 'GHOST'."]


def test_dangling_shorthand_owner() -> None:
    messages = _messages("att Name -> NOBODY")
    assert "Link 'NOBODY' -> 'Name_0' refers to undeclared node(s) 'NOBODY'." in messages


def test_self_link_to_missing_node_names_it_once() -> None:
    messages = _messages("link X X")
    assert messages == ["Link 'X' -> 'X' refers to undeclared node(s) 'X'."]


# ###############
# Detached Attributes and Empty Hierarchies
# ###############


def test_detached_attribute() -> None:
    messages = _messages("ent A\natt Name")
    assert messages == ["Attribute 'Name' (Name_1) is not attached to anything."]


def test_attribute_attached_by_explicit_link() -> None:
    assert _messages("ent A\natt Name\nlink A Name_1") == []


def test_specialization_with_only_superclass_link() -> None:
    messages = _messages("ent A\nspec d -> A")
    assert messages == ["Specialization 'd' has no subclass or member links."]


def test_union_with_members_is_clean() -> None:
    assert _messages("ent P\nent B\nunion u\nlink P u\nlink B u") == []


def test_warning_is_frozen_value() -> None:
    assert ValidationWarning(message="x") == ValidationWarning(message="x")
