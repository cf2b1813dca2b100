# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the workspace configuration module."""

from pathlib import Path

import pytest

from sdkir.workspace import (
    DEFAULT_ARTIFACT_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    default_config_text,
    load_workspace_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a workspace config file and return its path."""
    config_file = tmp_path / ".sdkir.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_minimal_config(tmp_path: Path) -> None:
    """A config with only build-directory uses defaults for everything else."""
    config = load_workspace_config(_write_config(tmp_path, "build-directory: .sdkir-build\n"))

    assert isinstance(config, WorkspaceConfig)
    assert config.build_directory == ".sdkir-build"
    assert config.artifact_name == DEFAULT_ARTIFACT_NAME
    assert config.scanner_outputs == []
    assert config.external_classes == []


def test_full_config(tmp_path: Path) -> None:
    content = """\
build-directory: out
artifact-name: core
scanner-outputs:
  - scan/b.json
  - scan/a.json
external-classes: [Container, Directory]
"""
    config = load_workspace_config(_write_config(tmp_path, content))

    assert config.build_directory == "out"
    assert config.artifact_name == "core"
    assert config.scanner_outputs == ["scan/b.json", "scan/a.json"]
    assert config.external_classes == ["Container", "Directory"]


def test_default_config_text_is_loadable(tmp_path: Path) -> None:
    config = load_workspace_config(_write_config(tmp_path, default_config_text()))
    assert config.build_directory == ".sdkir-build"
    assert config.scanner_outputs == []


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="not found"):
        load_workspace_config(tmp_path / ".sdkir.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="Invalid YAML"):
        load_workspace_config(_write_config(tmp_path, "build-directory: [unclosed\n"))


def test_not_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="must be a YAML mapping"):
        load_workspace_config(_write_config(tmp_path, "- a\n- b\n"))


def test_missing_build_directory(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="build-directory"):
        load_workspace_config(_write_config(tmp_path, "artifact-name: core\n"))


def test_unknown_key(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError, match="Extra inputs are not permitted"):
        load_workspace_config(_write_config(tmp_path, "build-directory: out\nsource-imports: []\n"))


def test_scanner_outputs_must_be_a_list(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError):
        load_workspace_config(_write_config(tmp_path, "build-directory: out\nscanner-outputs: scan.json\n"))


def test_empty_artifact_name(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceConfigError):
        load_workspace_config(_write_config(tmp_path, "build-directory: out\nartifact-name: ''\n"))
