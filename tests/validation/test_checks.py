# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for SDKIR validation checks."""

from sdkir.model.entities import (
    ClassTypeDef,
    ConstructorTypeDef,
    FieldTypeDef,
    FunctionArg,
    FunctionTypeDef,
    Schema,
)
from sdkir.model.types import ScalarKind, ScalarTypeDef
from sdkir.validation import ValidationResult, validate

# ###############
# Helpers
# ###############

INT = ScalarTypeDef(scalar=ScalarKind.INT)


def _required(name: str) -> FunctionArg:
    return FunctionArg(name=name, type_def=INT)


def _optional(name: str) -> FunctionArg:
    return FunctionArg(name=name, type_def=INT, optional=True)


def _validate(*classes: ClassTypeDef) -> ValidationResult:
    return validate(Schema(classes=classes))


def _warnings(*classes: ClassTypeDef) -> list[str]:
    return [w.message for w in _validate(*classes).warnings]


def _errors(*classes: ClassTypeDef) -> list[str]:
    return [e.message for e in _validate(*classes).errors]


# ###############
# Empty classes
# ###############


class TestEmptyClass:
    def test_class_without_members_warns(self) -> None:
        assert _warnings(ClassTypeDef(name="Empty")) == ["Class 'Empty' has no fields, constructor, or methods"]

    def test_class_with_only_constructor_is_fine(self) -> None:
        assert _warnings(ClassTypeDef(name="A", constructor=ConstructorTypeDef())) == []

    def test_empty_class_is_not_an_error(self) -> None:
        assert not _validate(ClassTypeDef(name="Empty")).has_errors


# ###############
# Argument order
# ###############


class TestArgumentOrder:
    def test_optional_after_required_is_fine(self) -> None:
        fn = FunctionTypeDef(name="m", args=[_required("a"), _optional("b")], return_type=INT)
        assert _warnings(ClassTypeDef(name="A", methods=[fn])) == []

    def test_required_after_optional_in_method(self) -> None:
        fn = FunctionTypeDef(name="m", args=[_optional("a"), _required("b")], return_type=INT)
        assert _warnings(ClassTypeDef(name="A", methods=[fn])) == [
            "Required argument 'b: Int' follows an optional argument in method 'A.m'"
        ]

    def test_required_after_optional_in_constructor(self) -> None:
        ctor = ConstructorTypeDef(args=[_optional("a"), _required("b"), _required("c")])
        warnings = _warnings(ClassTypeDef(name="A", constructor=ctor))
        assert len(warnings) == 1
        assert "constructor of class 'A'" in warnings[0]


# ###############
# Member clashes
# ###############


class TestMemberClash:
    def test_field_and_method_share_a_name(self) -> None:
        cls = ClassTypeDef(
            name="A",
            fields=[FieldTypeDef(name="size", type_def=INT)],
            methods=[FunctionTypeDef(name="size", return_type=INT)],
        )
        assert _errors(cls) == ["Class 'A' declares both a field and a method named 'size'"]
        assert _validate(cls).has_errors

    def test_distinct_names_are_fine(self) -> None:
        cls = ClassTypeDef(
            name="A",
            fields=[FieldTypeDef(name="size", type_def=INT)],
            methods=[FunctionTypeDef(name="resize", return_type=INT)],
        )
        assert _errors(cls) == []
