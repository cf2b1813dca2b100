# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the SDKIR command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from sdkir.model.entities import Schema
from sdkir.schema.artifact import ARTIFACT_SUFFIX, read_artifact
from sdkir.schema.build import BuildError, build_schema
from sdkir.validation.checks import validate
from sdkir.views.render import describe_class
from sdkir.workspace.config import (
    CONFIG_FILE_NAME,
    WorkspaceConfigError,
    default_config_text,
    load_workspace_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the SDKIR CLI."""
    parser = argparse.ArgumentParser(
        prog="sdkir",
        description="SDKIR - type model for multi-language SDK generation",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new SDKIR workspace",
        description=f"Create a {CONFIG_FILE_NAME} configuration in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the workspace in (default: current directory)",
    )

    # build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Build the schema artifact from scanner output",
        description="Merge the configured scanner documents into one schema artifact.",
    )
    build_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the SDKIR workspace (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Build the schema and check it for generator hazards",
        description="Build the schema artifact and run all validation checks.",
    )
    check_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the SDKIR workspace (default: current directory)",
    )

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print the classes stored in a schema artifact",
        description=f"Print an outline of every class in a {ARTIFACT_SUFFIX} artifact.",
    )
    show_parser.add_argument("artifact", help="Path to the schema artifact")
    show_parser.add_argument(
        "--class",
        dest="class_name",
        default=None,
        help="Only print the class with this name",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "build":
        return _cmd_build(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "show":
        return _cmd_show(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(
            f"Error: workspace already exists at '{config_file}'.",
            file=sys.stderr,
        )
        return 1

    config_file.write_text(default_config_text(), encoding="utf-8")
    print(f"Initialized SDKIR workspace at '{config_file}'.")
    return 0


def _build_workspace(directory_arg: str) -> Schema | None:
    """Load the workspace in *directory_arg* and build its schema.

    Prints an error and returns None on failure.
    """
    directory = Path(directory_arg).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return None

    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        print(
            f"Error: no SDKIR workspace found at '{directory}'. Run 'sdkir init' to initialize a workspace.",
            file=sys.stderr,
        )
        return None

    try:
        config = load_workspace_config(config_file)
    except WorkspaceConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    sources = [directory / s for s in config.scanner_outputs]
    artifact = directory / config.build_directory / (config.artifact_name + ARTIFACT_SUFFIX)

    print(f"Building schema from {len(sources)} scanner output(s)...")
    try:
        schema = build_schema(sources, artifact, external_names=config.external_classes)
    except BuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    print(f"Schema with {len(schema.classes)} class(es) written to '{artifact}'.")
    return schema


def _cmd_build(args: argparse.Namespace) -> int:
    """Handle the build subcommand."""
    return 0 if _build_workspace(args.directory) is not None else 1


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    schema = _build_workspace(args.directory)
    if schema is None:
        return 1

    result = validate(schema)
    for warning in result.warnings:
        print(f"Warning: {warning.message}")
    for error in result.errors:
        print(f"Error: {error.message}", file=sys.stderr)

    if result.has_errors:
        return 1

    print("No issues found.")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the show subcommand."""
    path = Path(args.artifact)
    try:
        schema = read_artifact(path)
    except FileNotFoundError:
        print(f"Error: artifact '{path}' does not exist.", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"Error: cannot read artifact '{path}': {exc}", file=sys.stderr)
        return 1

    classes = schema.classes
    if args.class_name is not None:
        cls = schema.get_class(args.class_name)
        if cls is None:
            print(f"Error: no class named '{args.class_name}' in '{path}'.", file=sys.stderr)
            return 1
        classes = (cls,)

    print("\n\n".join(describe_class(c) for c in classes))
    return 0
