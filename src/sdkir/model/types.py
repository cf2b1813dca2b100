# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""TypeDef variants: the shape of a field, argument, or return value."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ScalarKind(Enum):
    """Primitive values a scalar TypeDef can describe."""

    STRING = "String"
    INT = "Int"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    VOID = "Void"


class ScalarTypeDef(BaseModel):
    """A primitive value. Carries neither a class name nor an element type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["scalar"] = "scalar"
    scalar: ScalarKind


class ObjectTypeDef(BaseModel):
    """A reference, by name, to a class defined somewhere in the schema."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["object"] = "object"
    name: str = _Field(min_length=1)


class ListTypeDef(BaseModel):
    """A list whose elements are described by another TypeDef."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["list"] = "list"
    element_type: TypeDef


# The shape of any value: scalar, object reference, or list.
# The `kind` discriminator selects the variant on validation.
TypeDef = Annotated[
    ScalarTypeDef | ObjectTypeDef | ListTypeDef,
    _Field(discriminator="kind"),
]


def list_of(element_type: TypeDef, depth: int = 1) -> TypeDef:
    """Wrap *element_type* in *depth* nested lists.

    ``list_of(ObjectTypeDef(name="Container"), depth=2)`` describes a list of
    lists of ``Container``.

    Raises:
        ValueError: If *depth* is negative.
    """
    if depth < 0:
        raise ValueError(f"List depth must not be negative, got {depth}")
    result = element_type
    for _ in range(depth):
        result = ListTypeDef(element_type=result)
    return result


def unwrap_list(type_def: TypeDef) -> tuple[int, ScalarTypeDef | ObjectTypeDef]:
    """Return the list nesting depth of *type_def* and its innermost non-list TypeDef."""
    depth = 0
    current = type_def
    while isinstance(current, ListTypeDef):
        current = current.element_type
        depth += 1
    return depth, current


def referenced_class_name(type_def: TypeDef) -> str | None:
    """Return the class name an object TypeDef (possibly inside lists) refers to."""
    _, inner = unwrap_list(type_def)
    if isinstance(inner, ObjectTypeDef):
        return inner.name
    return None


ListTypeDef.model_rebuild()
