# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Statement classifier for EER documents.

Turns the coordinate-free text of one line into a tagged statement variant,
dispatching on the lower-cased first token. Unknown keywords and malformed
token sequences become :class:`IgnoredStatement` instead of errors, since the
document is edited live and is routinely incomplete.
"""

from __future__ import annotations

from dataclasses import dataclass

from eerstudio.model.entities import LinkStyle, NodeKind
from eerstudio.parser.lexer import Token, TokenType, tokenize_statement

# ###############
# Public Interface
# ###############

NODE_COMMANDS: dict[str, NodeKind] = {
    "ent": NodeKind.ENTITY,
    "weak_ent": NodeKind.WEAK_ENTITY,
    "rel": NodeKind.RELATIONSHIP,
    "ident_rel": NodeKind.IDENTIFYING_RELATIONSHIP,
    "att": NodeKind.ATTRIBUTE,
    "key_att": NodeKind.KEY_ATTRIBUTE,
    "derived_att": NodeKind.DERIVED_ATTRIBUTE,
    "multivalued_attribute": NodeKind.MULTIVALUED_ATTRIBUTE,
}

HIERARCHY_COMMANDS: dict[str, NodeKind] = {
    "spec": NodeKind.SPECIALIZATION,
    "union": NodeKind.UNION,
}

DEFAULT_DISCRIMINATORS: dict[NodeKind, str] = {
    NodeKind.SPECIALIZATION: "d",
    NodeKind.UNION: "u",
}

LINK_COMMAND = "link"

DOUBLE_MARKERS: frozenset[str] = frozenset({"[total]", "[double]"})


@dataclass(frozen=True)
class NodeDeclaration:
    """``ent``, ``rel``, ``att`` and the other node-declaring commands.

    Attributes:
        line_index: Zero-based index of the declaring line.
        kind: The node kind the command declares.
        label: The declared label.
        owner_id: Id given with the ``-> OWNER`` shorthand, or None.
    """

    line_index: int
    kind: NodeKind
    label: str
    owner_id: str | None = None


@dataclass(frozen=True)
class HierarchyDeclaration:
    """``spec`` and ``union`` declarations.

    Attributes:
        line_index: Zero-based index of the declaring line.
        kind: SPECIALIZATION or UNION.
        discriminator: The subtype marker (``d``, ``o``, ``u``, ...).
        explicit_id: The discriminator token as written, or None when omitted.
        superclass_id: Id given with the ``-> SUPERCLASS`` shorthand, or None.
    """

    line_index: int
    kind: NodeKind
    discriminator: str
    explicit_id: str | None = None
    superclass_id: str | None = None


@dataclass(frozen=True)
class LinkDeclaration:
    """``link SRC DST ["LABEL"] [[total]|[double]]``."""

    line_index: int
    source_id: str
    target_id: str
    label: str | None = None
    style: LinkStyle = LinkStyle.SOLID


@dataclass(frozen=True)
class IgnoredStatement:
    """A line that contributes nothing to the model.

    Attributes:
        line_index: Zero-based index of the line.
        text: The statement text (coordinates removed).
        reason: Short human-readable explanation.
    """

    line_index: int
    text: str
    reason: str


Statement = NodeDeclaration | HierarchyDeclaration | LinkDeclaration | IgnoredStatement


def parse_statement(text: str, line_index: int) -> Statement:
    """Classify one statement.

    Args:
        text: The line with comments and the coordinate pair already removed.
        line_index: Zero-based index of the line in the document.

    Returns:
        One of the statement variants; never raises.
    """
    tokens = tokenize_statement(text)
    if not tokens:
        return IgnoredStatement(line_index, text, "empty statement")

    command = tokens[0].value.lower()
    if command in NODE_COMMANDS:
        return _parse_node(command, tokens, text, line_index)
    if command in HIERARCHY_COMMANDS:
        return _parse_hierarchy(command, tokens, line_index)
    if command == LINK_COMMAND:
        return _parse_link(tokens, text, line_index)
    return IgnoredStatement(line_index, text, f"unknown command {tokens[0].value!r}")


# ################
# Implementation
# ################


def _parse_node(command: str, tokens: list[Token], text: str, line_index: int) -> Statement:
    if len(tokens) < 2 or tokens[1].type != TokenType.WORD:
        return IgnoredStatement(line_index, text, f"'{command}' without a label")
    return NodeDeclaration(
        line_index=line_index,
        kind=NODE_COMMANDS[command],
        label=tokens[1].value,
        owner_id=_arrow_target(tokens, 2),
    )


def _parse_hierarchy(command: str, tokens: list[Token], line_index: int) -> Statement:
    kind = HIERARCHY_COMMANDS[command]
    if len(tokens) >= 2 and tokens[1].type == TokenType.WORD:
        explicit_id: str | None = tokens[1].value
        superclass_id = _arrow_target(tokens, 2)
    else:
        # ``union -> X``: discriminator omitted, arrow comes first.
        explicit_id = None
        superclass_id = _arrow_target(tokens, 1)
    return HierarchyDeclaration(
        line_index=line_index,
        kind=kind,
        discriminator=explicit_id or DEFAULT_DISCRIMINATORS[kind],
        explicit_id=explicit_id,
        superclass_id=superclass_id,
    )


def _parse_link(tokens: list[Token], text: str, line_index: int) -> Statement:
    if len(tokens) < 3 or tokens[1].type != TokenType.WORD or tokens[2].type != TokenType.WORD:
        return IgnoredStatement(line_index, text, "'link' needs a source and a target id")

    label = next((tok.value for tok in tokens[3:] if tok.type == TokenType.STRING and tok.value), None)
    double = any(tok.type == TokenType.MARKER and tok.value in DOUBLE_MARKERS for tok in tokens[3:])
    return LinkDeclaration(
        line_index=line_index,
        source_id=tokens[1].value,
        target_id=tokens[2].value,
        label=label,
        style=LinkStyle.DOUBLE if double else LinkStyle.SOLID,
    )


def _arrow_target(tokens: list[Token], arrow_pos: int) -> str | None:
    """Return the id after a ``->`` token at *arrow_pos*, if present."""
    if len(tokens) <= arrow_pos + 1:
        return None
    if tokens[arrow_pos].type != TokenType.ARROW or tokens[arrow_pos + 1].type != TokenType.WORD:
        return None
    return tokens[arrow_pos + 1].value
