# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Workspace configuration for SDKIR."""

from sdkir.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_ARTIFACT_NAME,
    DEFAULT_BUILD_DIRECTORY,
    WorkspaceConfig,
    WorkspaceConfigError,
    default_config_text,
    load_workspace_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_ARTIFACT_NAME",
    "DEFAULT_BUILD_DIRECTORY",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "default_config_text",
    "load_workspace_config",
]
