# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Node id allocation for one parse pass."""

from eerstudio.model.entities import NodeKind

# ###############
# Public Interface
# ###############


class IdentifierResolver:
    """Allocates unique node ids in declaration order.

    Rules, in priority order:

    1. Attribute kinds always get ``label_line``, since the same attribute
       name legitimately recurs under different owners.
    2. Other kinds get ``label``, or ``label_line`` when ``label`` is taken.
    3. A specialization or union without an explicit token uses
       ``spec_line`` as its label before rule 2 applies.

    Each id is registered as soon as it is allocated. Ids are unique within
    one pass but depend on line numbers for the suffixed cases.
    """

    def __init__(self) -> None:
        self._allocated: set[str] = set()

    def resolve(self, label: str | None, kind: NodeKind, line_index: int) -> str:
        """Allocate and register the id for a node declared on *line_index*."""
        base = label if label else f"spec_{line_index}"
        if kind.is_attribute or base in self._allocated:
            node_id = f"{base}_{line_index}"
        else:
            node_id = base
        # A suffixed id can still clash with a label written as e.g. ``X_2``.
        while node_id in self._allocated:
            node_id = f"{node_id}_{line_index}"
        self._allocated.add(node_id)
        return node_id

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._allocated

    @property
    def allocated(self) -> frozenset[str]:
        """The ids handed out so far."""
        return frozenset(self._allocated)
