# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema pipeline: scanner documents, semantic analysis, and artifacts."""

from sdkir.schema.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from sdkir.schema.build import BuildError, build_schema
from sdkir.schema.scanner_output import ScannerOutputError, dump_scanner_output, load_scanner_output
from sdkir.schema.semantic_analysis import SemanticError, analyze

__all__ = [
    "analyze",
    "SemanticError",
    "load_scanner_output",
    "dump_scanner_output",
    "ScannerOutputError",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
    "build_schema",
    "BuildError",
]
