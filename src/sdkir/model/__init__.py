# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type model for SDK generation (type defs, fields, methods, classes)."""

from sdkir.model.entities import (
    ClassTypeDef,
    ConstructorTypeDef,
    FieldTypeDef,
    FunctionArg,
    FunctionTypeDef,
    Schema,
)
from sdkir.model.types import (
    ListTypeDef,
    ObjectTypeDef,
    ScalarKind,
    ScalarTypeDef,
    TypeDef,
    list_of,
    referenced_class_name,
    unwrap_list,
)

__all__ = [
    # Type defs
    "ScalarKind",
    "ScalarTypeDef",
    "ObjectTypeDef",
    "ListTypeDef",
    "TypeDef",
    "list_of",
    "unwrap_list",
    "referenced_class_name",
    # Descriptors
    "FieldTypeDef",
    "FunctionArg",
    "FunctionTypeDef",
    "ConstructorTypeDef",
    "ClassTypeDef",
    "Schema",
]
