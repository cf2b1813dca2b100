# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Incremental build of a schema artifact from scanner documents.

Implements a CMake-style cache: the artifact is reused when it already exists,
is strictly newer than every scanner document it was built from, and records
the same list of documents and external class names as the current build.
Otherwise each document is loaded in the order given, the classes are merged
into one :class:`~sdkir.model.entities.Schema`, semantic analysis runs on the
merged schema, and the artifact is rewritten.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from sdkir.model.entities import ClassTypeDef, Schema
from sdkir.schema.artifact import BuildInputs, read_artifact_with_inputs, write_artifact
from sdkir.schema.scanner_output import ScannerOutputError, load_scanner_output
from sdkir.schema.semantic_analysis import analyze

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class BuildError(Exception):
    """Raised when a schema cannot be built.

    Covers unreadable or malformed scanner documents, semantic errors, and
    unreadable or unwritable artifacts.
    """


def build_schema(
    sources: list[Path],
    artifact_path: Path,
    *,
    external_names: Iterable[str] | None = None,
) -> Schema:
    """Build (or reuse) the schema artifact for a list of scanner documents.

    Args:
        sources: Scanner documents, merged in this order.
        artifact_path: Where the compiled artifact is written.
        external_names: Class names resolved outside this schema; passed on
            to semantic analysis.

    Returns:
        The merged :class:`Schema`.

    Raises:
        BuildError: On missing or malformed sources, semantic errors, or an
            unreadable cached artifact.
    """
    for source in sources:
        if not source.exists():
            raise BuildError(f"Scanner output '{source}' not found")

    external = sorted(set(external_names or ()))
    inputs: BuildInputs = {"sources": [str(s) for s in sources], "external": external}

    if _is_up_to_date(sources, artifact_path):
        try:
            cached, cached_inputs = read_artifact_with_inputs(artifact_path)
        except (OSError, ValueError) as exc:
            raise BuildError(f"Cannot read artifact '{artifact_path}': {exc}") from exc
        if cached_inputs == inputs:
            logger.debug("Reusing up-to-date artifact %s", artifact_path)
            return cached
        logger.debug("Build inputs changed since %s was written", artifact_path)

    classes: list[ClassTypeDef] = []
    for source in sources:
        classes.extend(_load_source(source))
    schema = Schema(classes=tuple(classes))

    errors = analyze(schema, external_names=external)
    if errors:
        error_lines = "\n".join(f"  {e.message}" for e in errors)
        raise BuildError(f"Semantic errors in schema:\n{error_lines}")

    try:
        write_artifact(schema, artifact_path, inputs=inputs)
    except OSError as exc:
        raise BuildError(f"Cannot write artifact '{artifact_path}': {exc}") from exc
    logger.debug("Wrote %d class(es) to %s", len(schema.classes), artifact_path)
    return schema


# ################
# Implementation
# ################


def _is_up_to_date(sources: list[Path], artifact: Path) -> bool:
    """Return True if *artifact* exists and is strictly newer than every source."""
    if not artifact.exists():
        return False
    artifact_mtime = artifact.stat().st_mtime
    return all(artifact_mtime > source.stat().st_mtime for source in sources)


def _load_source(source: Path) -> tuple[ClassTypeDef, ...]:
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise BuildError(f"Cannot read scanner output '{source}': {exc}") from exc

    try:
        return load_scanner_output(text, source_label=str(source))
    except ScannerOutputError as exc:
        raise BuildError(str(exc)) from exc
