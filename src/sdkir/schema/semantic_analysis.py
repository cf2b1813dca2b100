# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic analysis for schemas assembled from scanner output.

Checks structural correctness of the schema: duplicate names, unresolved
class references, and misplaced ``Void`` types. This is the name-resolution
pass that the type model itself never performs; it is distinct from
validation (calling-convention checks), which operates on an analyzed schema.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sdkir.model.entities import ClassTypeDef, FunctionArg, Schema
from sdkir.model.types import ScalarKind, ScalarTypeDef, TypeDef, referenced_class_name, unwrap_list

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SemanticError:
    """A structural error detected during semantic analysis.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


def analyze(
    schema: Schema,
    *,
    external_names: Iterable[str] | None = None,
) -> list[SemanticError]:
    """Perform semantic analysis on a Schema.

    Checks performed:
    - Duplicate class names across the schema.
    - Duplicate field names and duplicate method names within each class.
    - Duplicate argument names within each method and constructor.
    - Object type defs (including those nested in lists) must name a class
      defined in the schema or listed in *external_names*. Declaration order
      is irrelevant.
    - ``Void`` may only appear as a method return type, never as a field or
      argument type, nor as a list element.

    Args:
        schema: The schema to analyze.
        external_names: Class names provided outside this schema (for example
            by the engine's core API). References to them are accepted.

    Returns:
        A list of :class:`SemanticError` instances. An empty list means no
        semantic errors were found.
    """
    known = set(schema.class_names) | set(external_names or ())
    errors: list[SemanticError] = []

    errors.extend(_check_duplicates("schema", "class", (c.name for c in schema.classes)))
    for cls in schema.classes:
        errors.extend(_check_class(cls, known))

    return errors


# ################
# Implementation
# ################


def _check_duplicates(owner: str, what: str, names: Iterable[str]) -> list[SemanticError]:
    seen: set[str] = set()
    reported: set[str] = set()
    errors: list[SemanticError] = []
    for name in names:
        if name in seen and name not in reported:
            errors.append(SemanticError(f"Duplicate {what} name '{name}' in {owner}"))
            reported.add(name)
        seen.add(name)
    return errors


def _check_class(cls: ClassTypeDef, known: set[str]) -> list[SemanticError]:
    owner = f"class '{cls.name}'"
    errors: list[SemanticError] = []

    errors.extend(_check_duplicates(owner, "field", (f.name for f in cls.fields)))
    errors.extend(_check_duplicates(owner, "method", (m.name for m in cls.methods)))

    for f in cls.fields:
        errors.extend(_check_value_type(f"field '{cls.name}.{f.name}'", f.type_def, known))

    if cls.constructor is not None:
        errors.extend(_check_args(f"constructor of {owner}", cls.constructor.args, known))

    for method in cls.methods:
        location = f"method '{cls.name}.{method.name}'"
        errors.extend(_check_args(location, method.args, known))
        errors.extend(_check_reference(f"return type of {location}", method.return_type, known))
        depth, _ = unwrap_list(method.return_type)
        if depth > 0 and _is_void(method.return_type):
            errors.append(SemanticError(f"Return type of {location} is a list of Void"))

    return errors


def _check_args(location: str, args: tuple[FunctionArg, ...], known: set[str]) -> list[SemanticError]:
    errors = _check_duplicates(location, "argument", (a.name for a in args))
    for arg in args:
        errors.extend(_check_value_type(f"argument '{arg.name}' of {location}", arg.type_def, known))
    return errors


def _check_value_type(location: str, type_def: TypeDef, known: set[str]) -> list[SemanticError]:
    """Check a type def used as a stored or passed value (field or argument)."""
    if _is_void(type_def):
        return [SemanticError(f"Void is not a valid type for {location}")]
    return _check_reference(location, type_def, known)


def _check_reference(location: str, type_def: TypeDef, known: set[str]) -> list[SemanticError]:
    name = referenced_class_name(type_def)
    if name is not None and name not in known:
        return [SemanticError(f"Unresolved class reference '{name}' in {location}")]
    return []


def _is_void(type_def: TypeDef) -> bool:
    _, inner = unwrap_list(type_def)
    return isinstance(inner, ScalarTypeDef) and inner.scalar == ScalarKind.VOID
