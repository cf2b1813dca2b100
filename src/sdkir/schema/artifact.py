# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of schema artifacts.

Artifacts are stored as compact JSON files for portability and human-readability.
The format is versioned so future schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from sdkir.model.entities import (
    ClassTypeDef,
    ConstructorTypeDef,
    FieldTypeDef,
    FunctionArg,
    FunctionTypeDef,
    Schema,
)
from sdkir.model.types import (
    ObjectTypeDef,
    ScalarKind,
    ScalarTypeDef,
    TypeDef,
    list_of,
    unwrap_list,
)

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "2"
ARTIFACT_SUFFIX = ".sdkir.json"

BuildInputs = dict[str, list[str]]


def serialize(schema: Schema, *, inputs: BuildInputs | None = None) -> str:
    """Serialize a Schema to a compact JSON string.

    Args:
        schema: The schema to encode.
        inputs: Optional record of what the schema was built from. It is
            stored under ``"src"`` and only consulted by the build cache.
    """
    obj = _schema_to_dict(schema)
    if inputs is not None:
        obj["src"] = inputs
    return json.dumps(obj, separators=(",", ":"))


def deserialize(data: str) -> Schema:
    """Deserialize a Schema from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`Schema`.

    Raises:
        ValueError: If the artifact format version is not recognised, a type
            kind is unknown, or an entry has an invalid shape.
    """
    return deserialize_with_inputs(data)[0]


def deserialize_with_inputs(data: str) -> tuple[Schema, BuildInputs | None]:
    """Like :func:`deserialize`, also returning the recorded build inputs, if any."""
    try:
        obj = json.loads(data)
    except RecursionError as exc:
        raise ValueError("Malformed artifact: nesting too deep") from exc
    if not isinstance(obj, dict):
        raise ValueError("Artifact must be a JSON object")
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    inputs = obj.get("src")
    if inputs is not None and not isinstance(inputs, dict):
        raise ValueError("Malformed artifact: 'src' must be an object")
    try:
        return _schema_from_dict(obj), inputs
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Malformed artifact: {exc!r}") from exc


def write_artifact(schema: Schema, path: Path, *, inputs: BuildInputs | None = None) -> None:
    """Write a schema artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(schema, inputs=inputs), encoding="utf-8")


def read_artifact(path: Path) -> Schema:
    """Read and deserialize a schema artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


def read_artifact_with_inputs(path: Path) -> tuple[Schema, BuildInputs | None]:
    """Read a schema artifact together with the build inputs recorded in it."""
    return deserialize_with_inputs(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _schema_to_dict(schema: Schema) -> dict[str, Any]:
    return {
        "v": ARTIFACT_FORMAT_VERSION,
        "classes": [_class_to_dict(c) for c in schema.classes],
    }


def _schema_from_dict(obj: dict[str, Any]) -> Schema:
    return Schema(classes=tuple(_class_from_dict(c) for c in obj.get("classes", [])))


def _class_to_dict(cls: ClassTypeDef) -> dict[str, Any]:
    d: dict[str, Any] = {
        "name": cls.name,
        "fields": [_field_to_dict(f) for f in cls.fields],
        "methods": [_function_to_dict(m) for m in cls.methods],
    }
    if cls.description:
        d["description"] = cls.description
    if cls.constructor is not None:
        d["constructor"] = {"args": [_arg_to_dict(a) for a in cls.constructor.args]}
    return d


def _class_from_dict(obj: dict[str, Any]) -> ClassTypeDef:
    constructor = None
    if "constructor" in obj:
        constructor = ConstructorTypeDef(args=tuple(_arg_from_dict(a) for a in obj["constructor"].get("args", [])))
    return ClassTypeDef(
        name=obj["name"],
        description=obj.get("description", ""),
        fields=tuple(_field_from_dict(f) for f in obj.get("fields", [])),
        constructor=constructor,
        methods=tuple(_function_from_dict(m) for m in obj.get("methods", [])),
    )


def _field_to_dict(f: FieldTypeDef) -> dict[str, Any]:
    d: dict[str, Any] = {"name": f.name, "type": _type_def_to_dict(f.type_def)}
    if f.description:
        d["description"] = f.description
    return d


def _field_from_dict(obj: dict[str, Any]) -> FieldTypeDef:
    return FieldTypeDef(
        name=obj["name"],
        type_def=_type_def_from_dict(obj["type"]),
        description=obj.get("description", ""),
    )


def _arg_to_dict(arg: FunctionArg) -> dict[str, Any]:
    d: dict[str, Any] = {
        "name": arg.name,
        "type": _type_def_to_dict(arg.type_def),
        "optional": arg.optional,
    }
    if arg.description:
        d["description"] = arg.description
    if arg.default_value is not None:
        d["default"] = arg.default_value
    return d


def _arg_from_dict(obj: dict[str, Any]) -> FunctionArg:
    return FunctionArg(
        name=obj["name"],
        type_def=_type_def_from_dict(obj["type"]),
        description=obj.get("description", ""),
        optional=obj.get("optional", False),
        default_value=obj.get("default"),
    )


def _function_to_dict(fn: FunctionTypeDef) -> dict[str, Any]:
    d: dict[str, Any] = {
        "name": fn.name,
        "args": [_arg_to_dict(a) for a in fn.args],
        "returns": _type_def_to_dict(fn.return_type),
    }
    if fn.description:
        d["description"] = fn.description
    return d


def _function_from_dict(obj: dict[str, Any]) -> FunctionTypeDef:
    return FunctionTypeDef(
        name=obj["name"],
        description=obj.get("description", ""),
        args=tuple(_arg_from_dict(a) for a in obj.get("args", [])),
        return_type=_type_def_from_dict(obj["returns"]),
    )


def _type_def_to_dict(type_def: TypeDef) -> dict[str, Any]:
    """Encode a TypeDef as a flat tagged dict with compact keys.

    List nesting is stored as a count under ``"d"`` (omitted when zero) on the
    innermost scalar or object, so the JSON document stays flat however
    deeply lists are nested.
    """
    depth, inner = unwrap_list(type_def)
    if isinstance(inner, ScalarTypeDef):
        d: dict[str, Any] = {"k": "scalar", "t": inner.scalar.value}
    else:
        d = {"k": "object", "n": inner.name}
    if depth:
        d["d"] = depth
    return d


def _type_def_from_dict(obj: dict[str, Any]) -> TypeDef:
    """Decode a TypeDef from a flat tagged dict."""
    kind = obj["k"]
    if kind == "scalar":
        inner: TypeDef = ScalarTypeDef(scalar=ScalarKind(obj["t"]))
    elif kind == "object":
        inner = ObjectTypeDef(name=obj["n"])
    else:
        raise ValueError(f"Unknown type def kind: {kind!r}")
    depth = obj.get("d", 0)
    if not isinstance(depth, int) or isinstance(depth, bool) or depth < 0:
        raise ValueError(f"Malformed artifact: invalid list depth {depth!r}")
    return list_of(inner, depth)
