# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Model building for EER documents: ids, default layout, model assembly and export."""

from eerstudio.compiler.artifact import (
    ARTIFACT_SUFFIX,
    deserialize,
    read_artifact,
    serialize,
    write_artifact,
)
from eerstudio.compiler.builder import build_model
from eerstudio.compiler.identifiers import IdentifierResolver
from eerstudio.compiler.layout import SpiralLayout

__all__ = [
    "build_model",
    "IdentifierResolver",
    "SpiralLayout",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
]
