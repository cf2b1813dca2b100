# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Calling-convention checks for SDK schemas.

These checks operate on schemas that passed semantic analysis and flag shapes
that generators in some target languages cannot reproduce faithfully.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sdkir.model.entities import ClassTypeDef, FunctionArg, Schema
from sdkir.views.render import format_arg

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal issue detected during validation.

    The schema remains usable, but generated bindings may be awkward or
    the issue indicates an unintentional declaration.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A fatal issue detected during validation.

    Generated bindings for at least one target language would be invalid.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running validation checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: Fatal errors that make the schema unusable for generation.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return len(self.errors) > 0


def validate(schema: Schema) -> ValidationResult:
    """Run all validation checks on an analyzed Schema.

    Checks performed:

    1. **Empty classes** (warning): a class with no fields, no constructor
       and no methods exposes nothing to generate.

    2. **Required after optional** (warning): a required argument declared
       after an optional one cannot be passed positionally in languages
       where optional parameters must trail.

    3. **Member name clash** (error): a field and a method of the same class
       share a name; most target languages cannot declare both.

    Args:
        schema: The schema to validate.

    Returns:
        A :class:`ValidationResult` containing any warnings and errors found.
    """
    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    for cls in schema.classes:
        warnings.extend(_check_empty_class(cls))
        warnings.extend(_check_argument_order(cls))
        errors.extend(_check_member_clash(cls))

    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################


def _check_empty_class(cls: ClassTypeDef) -> list[ValidationWarning]:
    if not cls.fields and cls.constructor is None and not cls.methods:
        return [ValidationWarning(f"Class '{cls.name}' has no fields, constructor, or methods")]
    return []


def _misplaced_required_arg(args: tuple[FunctionArg, ...]) -> FunctionArg | None:
    """Return the first required argument that follows an optional one."""
    seen_optional = False
    for arg in args:
        if arg.optional:
            seen_optional = True
        elif seen_optional:
            return arg
    return None


def _check_argument_order(cls: ClassTypeDef) -> list[ValidationWarning]:
    callables = []
    if cls.constructor is not None:
        callables.append((f"constructor of class '{cls.name}'", cls.constructor.args))
    callables.extend((f"method '{cls.name}.{m.name}'", m.args) for m in cls.methods)

    warnings = []
    for location, args in callables:
        arg = _misplaced_required_arg(args)
        if arg is not None:
            warnings.append(
                ValidationWarning(f"Required argument '{format_arg(arg)}' follows an optional argument in {location}")
            )
    return warnings


def _check_member_clash(cls: ClassTypeDef) -> list[ValidationError]:
    field_names = {f.name for f in cls.fields}
    return [
        ValidationError(f"Class '{cls.name}' declares both a field and a method named '{m.name}'")
        for m in cls.methods
        if m.name in field_names
    ]
