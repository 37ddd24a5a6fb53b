# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Synchronization of node positions back into document text."""

from eerstudio.sync.session import EditorSession
from eerstudio.sync.writeback import move_node, write_back

__all__ = [
    "EditorSession",
    "move_node",
    "write_back",
]
