# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line classifier, tokenizer and statement classifier for EER documents."""

from eerstudio.parser.lines import ClassifiedLine, classify_line, split_lines
from eerstudio.parser.statements import (
    HierarchyDeclaration,
    IgnoredStatement,
    LinkDeclaration,
    NodeDeclaration,
    Statement,
    parse_statement,
)

__all__ = [
    "ClassifiedLine",
    "classify_line",
    "split_lines",
    "Statement",
    "NodeDeclaration",
    "HierarchyDeclaration",
    "LinkDeclaration",
    "IgnoredStatement",
    "parse_statement",
]
