# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading and writing the JSON documents emitted by source scanners.

A scanner reports the classes it discovered using camelCase keys and the
engine's kind names::

    {
      "name": "Foo",
      "description": "",
      "fields": [{"name": "bar", "description": "", "typeDef": {"kind": "StringKind"}}],
      "constructor": {"args": []},
      "methods": [
        {
          "name": "baz",
          "description": "",
          "args": [{"name": "x", "description": "", "optional": false,
                    "typeDef": {"kind": "IntegerKind"}}],
          "returnType": {"kind": "ListKind", "typeDef": {"kind": "ObjectKind", "name": "Foo"}}
        }
      ]
    }

A document is either a JSON array of such classes or an object holding them
under ``"classes"``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from sdkir.model.entities import (
    ClassTypeDef,
    ConstructorTypeDef,
    FieldTypeDef,
    FunctionArg,
    FunctionTypeDef,
)
from sdkir.model.types import (
    ObjectTypeDef,
    ScalarKind,
    ScalarTypeDef,
    TypeDef,
    list_of,
    unwrap_list,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

OBJECT_KIND = "ObjectKind"
LIST_KIND = "ListKind"

SCALAR_KINDS: dict[str, ScalarKind] = {
    "StringKind": ScalarKind.STRING,
    "IntegerKind": ScalarKind.INT,
    "FloatKind": ScalarKind.FLOAT,
    "BooleanKind": ScalarKind.BOOLEAN,
    "VoidKind": ScalarKind.VOID,
}


class ScannerOutputError(Exception):
    """Raised when a scanner document cannot be decoded into the type model."""


def load_scanner_output(text: str, *, source_label: str = "<string>") -> tuple[ClassTypeDef, ...]:
    """Decode a scanner document into class descriptors, keeping their order.

    Args:
        text: Raw JSON content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        ScannerOutputError: If the JSON is invalid or any entry has the wrong shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ScannerOutputError(f"Invalid JSON in {source_label}: {exc}") from exc
    except RecursionError as exc:
        raise ScannerOutputError(f"{source_label}: document is nested too deeply to decode") from exc

    if isinstance(data, dict):
        data = data.get("classes", [])
    if not isinstance(data, list):
        raise ScannerOutputError(f"{source_label}: expected a list of classes")

    classes = tuple(class_from_dict(entry, path=f"{source_label}[{i}]") for i, entry in enumerate(data))
    logger.debug("Loaded %d class(es) from %s", len(classes), source_label)
    return classes


def dump_scanner_output(classes: Iterable[ClassTypeDef]) -> str:
    """Encode class descriptors as a scanner document (a JSON array).

    Raises:
        ScannerOutputError: If list nesting is too deep for the scanner's
            nested ``ListKind`` encoding.
    """
    entries = [class_to_dict(c) for c in classes]
    try:
        return json.dumps(entries, indent=2)
    except RecursionError as exc:
        raise ScannerOutputError("List nesting is too deep to encode as a scanner document") from exc


def class_from_dict(obj: Any, *, path: str = "$") -> ClassTypeDef:
    """Decode one scanner class entry.

    Raises:
        ScannerOutputError: If the entry has the wrong shape.
    """
    entry = _require_mapping(obj, path)
    constructor = None
    if entry.get("constructor") is not None:
        ctor = _require_mapping(entry["constructor"], f"{path}.constructor")
        constructor = _build(
            ConstructorTypeDef,
            f"{path}.constructor",
            args=_decode_args(ctor.get("args", []), f"{path}.constructor.args"),
        )
    return _build(
        ClassTypeDef,
        path,
        name=_require(entry, "name", path),
        description=entry.get("description", ""),
        fields=tuple(
            _decode_field(f, f"{path}.fields[{i}]") for i, f in enumerate(_require_list(entry, "fields", path))
        ),
        constructor=constructor,
        methods=tuple(
            _decode_method(m, f"{path}.methods[{i}]") for i, m in enumerate(_require_list(entry, "methods", path))
        ),
    )


def class_to_dict(cls: ClassTypeDef) -> dict[str, Any]:
    """Encode one class descriptor in the scanner's format."""
    d: dict[str, Any] = {
        "name": cls.name,
        "description": cls.description,
        "fields": [
            {"name": f.name, "description": f.description, "typeDef": type_def_to_dict(f.type_def)}
            for f in cls.fields
        ],
        "methods": [
            {
                "name": m.name,
                "description": m.description,
                "args": [_arg_to_dict(a) for a in m.args],
                "returnType": type_def_to_dict(m.return_type),
            }
            for m in cls.methods
        ],
    }
    if cls.constructor is not None:
        d["constructor"] = {"args": [_arg_to_dict(a) for a in cls.constructor.args]}
    return d


def type_def_from_dict(obj: Any, *, path: str = "$") -> TypeDef:
    """Decode a scanner TypeDef, following ``ListKind`` chains iteratively.

    Raises:
        ScannerOutputError: If a kind is unknown or its payload is missing.
    """
    depth = 0
    entry = _require_mapping(obj, path)
    while entry.get("kind") == LIST_KIND:
        path = f"{path}.typeDef"
        entry = _require_mapping(entry.get("typeDef"), path)
        depth += 1

    kind = entry.get("kind")
    if kind == OBJECT_KIND:
        inner: TypeDef = _build(ObjectTypeDef, path, name=_require(entry, "name", path))
    elif isinstance(kind, str) and kind in SCALAR_KINDS:
        inner = ScalarTypeDef(scalar=SCALAR_KINDS[kind])
    else:
        raise ScannerOutputError(f"{path}: unknown type kind {kind!r}")
    return list_of(inner, depth)


def type_def_to_dict(type_def: TypeDef) -> dict[str, Any]:
    """Encode a TypeDef in the scanner's format."""
    depth, inner = unwrap_list(type_def)
    if isinstance(inner, ObjectTypeDef):
        d: dict[str, Any] = {"kind": OBJECT_KIND, "name": inner.name}
    else:
        d = {"kind": _SCALAR_KIND_NAMES[inner.scalar]}
    for _ in range(depth):
        d = {"kind": LIST_KIND, "typeDef": d}
    return d


# ################
# Implementation
# ################

_SCALAR_KIND_NAMES: dict[ScalarKind, str] = {v: k for k, v in SCALAR_KINDS.items()}


def _require_mapping(obj: Any, path: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise ScannerOutputError(f"{path}: expected an object")
    return obj


def _require(entry: dict[str, Any], key: str, path: str) -> Any:
    if key not in entry:
        raise ScannerOutputError(f"{path}: missing required key '{key}'")
    return entry[key]


def _require_list(entry: dict[str, Any], key: str, path: str) -> list[Any]:
    value = entry.get(key, [])
    if not isinstance(value, list):
        raise ScannerOutputError(f"{path}: '{key}' must be a list")
    return value


def _build(model: type, path: str, **values: Any) -> Any:
    """Construct *model*, reporting validation failures against *path*."""
    try:
        return model(**values)
    except ValidationError as exc:
        raise ScannerOutputError(f"{path}: {exc}") from exc


def _decode_field(obj: Any, path: str) -> FieldTypeDef:
    entry = _require_mapping(obj, path)
    return _build(
        FieldTypeDef,
        path,
        name=_require(entry, "name", path),
        description=entry.get("description", ""),
        type_def=type_def_from_dict(_require(entry, "typeDef", path), path=f"{path}.typeDef"),
    )


def _decode_args(obj: Any, path: str) -> tuple[FunctionArg, ...]:
    if not isinstance(obj, list):
        raise ScannerOutputError(f"{path}: expected a list")
    args = []
    for i, raw in enumerate(obj):
        arg_path = f"{path}[{i}]"
        entry = _require_mapping(raw, arg_path)
        args.append(
            _build(
                FunctionArg,
                arg_path,
                name=_require(entry, "name", arg_path),
                description=entry.get("description", ""),
                optional=entry.get("optional", False),
                default_value=entry.get("defaultValue"),
                type_def=type_def_from_dict(_require(entry, "typeDef", arg_path), path=f"{arg_path}.typeDef"),
            )
        )
    return tuple(args)


def _decode_method(obj: Any, path: str) -> FunctionTypeDef:
    entry = _require_mapping(obj, path)
    return _build(
        FunctionTypeDef,
        path,
        name=_require(entry, "name", path),
        description=entry.get("description", ""),
        args=_decode_args(entry.get("args", []), f"{path}.args"),
        return_type=type_def_from_dict(_require(entry, "returnType", path), path=f"{path}.returnType"),
    )


def _arg_to_dict(arg: FunctionArg) -> dict[str, Any]:
    d: dict[str, Any] = {
        "name": arg.name,
        "description": arg.description,
        "optional": arg.optional,
        "typeDef": type_def_to_dict(arg.type_def),
    }
    if arg.default_value is not None:
        d["defaultValue"] = arg.default_value
    return d
