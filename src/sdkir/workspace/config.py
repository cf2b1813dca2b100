# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the SDKIR workspace configuration file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".sdkir.yaml"
DEFAULT_BUILD_DIRECTORY = ".sdkir-build"
DEFAULT_ARTIFACT_NAME = "schema"


class WorkspaceConfigError(Exception):
    """Raised when a workspace configuration file is invalid or cannot be loaded."""


class WorkspaceConfig(BaseModel):
    """The parsed configuration for an SDKIR workspace.

    Attributes:
        build_directory: Relative path (from the workspace root) for build output.
        artifact_name: File stem of the schema artifact inside the build directory.
        scanner_outputs: Scanner documents to merge, in order, relative to the root.
        external_classes: Class names resolved outside this schema.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    build_directory: str = Field(alias="build-directory")
    artifact_name: str = Field(alias="artifact-name", default=DEFAULT_ARTIFACT_NAME, min_length=1)
    scanner_outputs: list[str] = Field(alias="scanner-outputs", default_factory=list)
    external_classes: list[str] = Field(alias="external-classes", default_factory=list)


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load and parse an SDKIR workspace configuration file.

    Args:
        path: Path to the `.sdkir.yaml` file.

    Returns:
        A WorkspaceConfig instance populated from the file.

    Raises:
        WorkspaceConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WorkspaceConfigError(f"Workspace config file not found: {path}") from None
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot read workspace config file: {exc}") from exc

    return _parse_workspace_config(text, source_label=str(path))


def default_config_text() -> str:
    """Return the configuration written by ``sdkir init``."""
    return (
        "# SDKIR Workspace Configuration\n"
        f"build-directory: {DEFAULT_BUILD_DIRECTORY}\n"
        f"artifact-name: {DEFAULT_ARTIFACT_NAME}\n"
        "# Scanner documents merged into the schema, in order.\n"
        "scanner-outputs: []\n"
        "# Classes provided by the engine rather than by this schema.\n"
        "external-classes: []\n"
    )


# ################
# Implementation
# ################


def _parse_workspace_config(text: str, source_label: str = "<string>") -> WorkspaceConfig:
    """Parse workspace config YAML text into a WorkspaceConfig.

    Raises:
        WorkspaceConfigError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorkspaceConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise WorkspaceConfigError(f"{source_label}: workspace config must be a YAML mapping")

    try:
        return WorkspaceConfig.model_validate(data)
    except ValidationError as exc:
        raise WorkspaceConfigError(f"Invalid workspace config {source_label}: {exc}") from exc
