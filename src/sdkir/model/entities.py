# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Composite descriptors built on TypeDef: fields, arguments, callables, classes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import Field as _Field

from sdkir.model.types import TypeDef, referenced_class_name

# ###############
# Public Interface
# ###############


class FieldTypeDef(BaseModel):
    """A named, described class field."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = _Field(min_length=1)
    type_def: TypeDef
    description: str = ""


class FunctionArg(BaseModel):
    """A parameter of a method or constructor.

    ``default_value`` is the serialized literal used when the caller omits an
    optional argument. It is kept verbatim; its shape is described by
    ``type_def`` and is never checked against it here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = _Field(min_length=1)
    type_def: TypeDef
    description: str = ""
    optional: bool = False
    default_value: str | None = None

    @model_validator(mode="after")
    def _check_default_requires_optional(self) -> FunctionArg:
        if self.default_value is not None and not self.optional:
            raise ValueError(f"argument '{self.name}' has a default value but is not optional")
        return self


class _Callable(BaseModel):
    """Shared argument handling for functions and constructors."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    args: tuple[FunctionArg, ...] = ()

    @property
    def required_args(self) -> tuple[FunctionArg, ...]:
        """Arguments every call site must supply, in declaration order."""
        return tuple(a for a in self.args if not a.optional)

    @property
    def optional_args(self) -> tuple[FunctionArg, ...]:
        """Arguments that may be omitted, in declaration order."""
        return tuple(a for a in self.args if a.optional)


class FunctionTypeDef(_Callable):
    """A method of a class. ``args`` order is the positional calling order."""

    name: str = _Field(min_length=1)
    return_type: TypeDef
    description: str = ""


class ConstructorTypeDef(_Callable):
    """The constructor of a class.

    Has no name and no return type: it always yields the enclosing class.
    """


class ClassTypeDef(BaseModel):
    """The public surface of one class, in source declaration order."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = _Field(min_length=1)
    description: str = ""
    fields: tuple[FieldTypeDef, ...] = ()
    constructor: ConstructorTypeDef | None = None
    methods: tuple[FunctionTypeDef, ...] = ()

    def get_field(self, name: str) -> FieldTypeDef | None:
        """Return the field called *name*, or None."""
        return next((f for f in self.fields if f.name == name), None)

    def get_method(self, name: str) -> FunctionTypeDef | None:
        """Return the method called *name*, or None."""
        return next((m for m in self.methods if m.name == name), None)

    @property
    def referenced_class_names(self) -> tuple[str, ...]:
        """Class names referenced by object TypeDefs anywhere in this class.

        Names appear once, in the order they are first encountered: fields,
        then constructor arguments, then each method's arguments and return type.
        """
        type_defs: list[TypeDef] = [f.type_def for f in self.fields]
        if self.constructor is not None:
            type_defs.extend(a.type_def for a in self.constructor.args)
        for method in self.methods:
            type_defs.extend(a.type_def for a in method.args)
            type_defs.append(method.return_type)

        names: dict[str, None] = {}
        for type_def in type_defs:
            name = referenced_class_name(type_def)
            if name is not None:
                names.setdefault(name, None)
        return tuple(names)


class Schema(BaseModel):
    """Every class discovered for one SDK surface."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    classes: tuple[ClassTypeDef, ...] = ()

    @property
    def class_names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self.classes)

    def get_class(self, name: str) -> ClassTypeDef | None:
        """Return the first class called *name*, or None."""
        return next((c for c in self.classes if c.name == name), None)
