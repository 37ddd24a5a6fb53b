# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Advisory checks for parsed diagram models.

Parsing never rejects a document, so everything reported here is a warning:
the model stays usable, but parts of the text had no visible effect.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from eerstudio.model.entities import DiagramModel

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal issue detected in a diagram model.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the model checks.

    Attributes:
        warnings: Issues found during validation.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Return True if any warnings were found."""
        return len(self.warnings) > 0


def validate(model: DiagramModel) -> ValidationResult:
    """Run all checks on a parsed model.

    Checks performed:

    1. **Ignored lines**: statements with an unknown command or a malformed
       token sequence.

    2. **Dangling links**: links (explicit or shorthand) whose source or
       target id does not name a node. Renderers skip them.

    3. **Detached attributes**: attribute nodes that no link connects to
       anything.

    4. **Empty hierarchies**: specialization and union nodes with no link
       besides the one to their superclass.

    Args:
        model: A model produced by :func:`eerstudio.parse`.

    Returns:
        A :class:`ValidationResult`; an empty result means nothing was found.
    """
    warnings: list[ValidationWarning] = []

    warnings.extend(_check_ignored_lines(model))
    warnings.extend(_check_dangling_links(model))
    warnings.extend(_check_detached_attributes(model))
    warnings.extend(_check_empty_hierarchies(model))

    return ValidationResult(warnings=warnings)


# ################
# Implementation
# ################


def _check_ignored_lines(model: DiagramModel) -> list[ValidationWarning]:
    return [
        ValidationWarning(message=f"Line {ignored.line_index + 1} ignored ({ignored.reason}): {ignored.text}")
        for ignored in model.ignored
    ]


def _check_dangling_links(model: DiagramModel) -> list[ValidationWarning]:
    ids = model.node_ids()
    warnings: list[ValidationWarning] = []
    for link in model.dangling_links():
        missing = [end for end in (link.source_id, link.target_id) if end not in ids]
        names = ", ".join(f"'{end}'" for end in dict.fromkeys(missing))
        warnings.append(
            ValidationWarning(
                message=f"Link '{link.source_id}' -> '{link.target_id}' refers to undeclared node(s) {names}."
            )
        )
    return warnings


def _check_detached_attributes(model: DiagramModel) -> list[ValidationWarning]:
    connected = _connected_ids(model)
    return [
        ValidationWarning(message=f"Attribute '{node.label}' ({node.id}) is not attached to anything.")
        for node in model.nodes
        if node.kind.is_attribute and node.id not in connected
    ]


def _check_empty_hierarchies(model: DiagramModel) -> list[ValidationWarning]:
    degree: dict[str, int] = {}
    for link in model.resolvable_links():
        degree[link.source_id] = degree.get(link.source_id, 0) + 1
        degree[link.target_id] = degree.get(link.target_id, 0) + 1

    warnings: list[ValidationWarning] = []
    for node in model.nodes:
        if node.kind.is_hierarchy and degree.get(node.id, 0) < 2:
            warnings.append(
                ValidationWarning(
                    message=f"{node.kind.value.capitalize()} '{node.id}' has no subclass or member links."
                )
            )
    return warnings


def _connected_ids(model: DiagramModel) -> set[str]:
    """Return the ids of nodes that appear at either end of a resolvable link."""
    ids: set[str] = set()
    for link in model.resolvable_links():
        ids.add(link.source_id)
        ids.add(link.target_id)
    return ids
