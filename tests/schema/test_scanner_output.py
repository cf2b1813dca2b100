# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for decoding and encoding scanner documents."""

import json

import pytest

from sdkir.model.entities import ClassTypeDef, ConstructorTypeDef, FieldTypeDef, FunctionArg, FunctionTypeDef
from sdkir.model.types import ObjectTypeDef, ScalarKind, ScalarTypeDef, list_of, unwrap_list
from sdkir.schema.scanner_output import (
    ScannerOutputError,
    class_from_dict,
    class_to_dict,
    dump_scanner_output,
    load_scanner_output,
    type_def_from_dict,
    type_def_to_dict,
)

# ###############
# Helpers
# ###############

FOO_DOCUMENT = """\
[
  {
    "name": "Foo",
    "description": "A test class.",
    "fields": [
      {"name": "bar", "description": "", "typeDef": {"kind": "StringKind"}}
    ],
    "methods": [
      {
        "name": "baz",
        "description": "",
        "args": [
          {"name": "x", "description": "", "optional": false, "typeDef": {"kind": "IntegerKind"}},
          {"name": "limit", "description": "", "optional": true, "defaultValue": "10",
           "typeDef": {"kind": "IntegerKind"}}
        ],
        "returnType": {"kind": "BooleanKind"}
      }
    ]
  }
]
"""


def _error(obj: object) -> str:
    """Decode *obj* as a class entry and return the error message."""
    with pytest.raises(ScannerOutputError) as exc_info:
        class_from_dict(obj)
    return str(exc_info.value)


# ###############
# Decoding
# ###############


class TestLoad:
    def test_foo_document(self) -> None:
        (foo,) = load_scanner_output(FOO_DOCUMENT)
        assert foo.name == "Foo"
        assert foo.description == "A test class."
        assert foo.constructor is None
        assert foo.fields == (FieldTypeDef(name="bar", type_def=ScalarTypeDef(scalar=ScalarKind.STRING)),)
        baz = foo.methods[0]
        assert [a.name for a in baz.args] == ["x", "limit"]
        assert baz.args[1].optional is True
        assert baz.args[1].default_value == "10"
        assert baz.return_type == ScalarTypeDef(scalar=ScalarKind.BOOLEAN)

    def test_document_with_classes_key(self) -> None:
        text = json.dumps({"classes": [{"name": "A"}, {"name": "B"}]})
        assert [c.name for c in load_scanner_output(text)] == ["A", "B"]

    def test_constructor_is_decoded(self) -> None:
        entry = {
            "name": "A",
            "constructor": {"args": [{"name": "n", "typeDef": {"kind": "IntegerKind"}}]},
        }
        assert class_from_dict(entry).constructor == ConstructorTypeDef(
            args=[FunctionArg(name="n", type_def=ScalarTypeDef(scalar=ScalarKind.INT))]
        )

    def test_null_constructor_means_absent(self) -> None:
        assert class_from_dict({"name": "A", "constructor": None}).constructor is None

    def test_nested_list_type(self) -> None:
        obj = {"kind": "ListKind", "typeDef": {"kind": "ListKind", "typeDef": {"kind": "ObjectKind", "name": "Container"}}}
        assert type_def_from_dict(obj) == list_of(ObjectTypeDef(name="Container"), depth=2)

    def test_deep_list_chain_is_decoded_iteratively(self) -> None:
        obj: dict = {"kind": "ObjectKind", "name": "Leaf"}
        for _ in range(3000):
            obj = {"kind": "ListKind", "typeDef": obj}
        assert unwrap_list(type_def_from_dict(obj)) == (3000, ObjectTypeDef(name="Leaf"))

    @pytest.mark.parametrize(
        ("kind", "scalar"),
        [
            ("StringKind", ScalarKind.STRING),
            ("IntegerKind", ScalarKind.INT),
            ("FloatKind", ScalarKind.FLOAT),
            ("BooleanKind", ScalarKind.BOOLEAN),
            ("VoidKind", ScalarKind.VOID),
        ],
    )
    def test_scalar_kinds(self, kind: str, scalar: ScalarKind) -> None:
        assert type_def_from_dict({"kind": kind}) == ScalarTypeDef(scalar=scalar)


class TestErrors:
    def test_invalid_json(self) -> None:
        with pytest.raises(ScannerOutputError, match="Invalid JSON in scan.json"):
            load_scanner_output("{", source_label="scan.json")

    def test_document_must_be_a_list(self) -> None:
        with pytest.raises(ScannerOutputError, match="expected a list of classes"):
            load_scanner_output('"Foo"')

    def test_missing_class_name(self) -> None:
        assert "missing required key 'name'" in _error({"fields": []})

    def test_object_kind_without_name(self) -> None:
        message = _error({"name": "A", "fields": [{"name": "f", "typeDef": {"kind": "ObjectKind"}}]})
        assert "$.fields[0].typeDef" in message
        assert "missing required key 'name'" in message

    def test_list_kind_without_element(self) -> None:
        message = _error({"name": "A", "fields": [{"name": "f", "typeDef": {"kind": "ListKind"}}]})
        assert "$.fields[0].typeDef.typeDef: expected an object" in message

    def test_unknown_kind(self) -> None:
        message = _error({"name": "A", "fields": [{"name": "f", "typeDef": {"kind": "InputKind"}}]})
        assert "unknown type kind 'InputKind'" in message

    def test_default_without_optional(self) -> None:
        entry = {
            "name": "A",
            "methods": [
                {
                    "name": "m",
                    "args": [{"name": "a", "optional": False, "defaultValue": "1", "typeDef": {"kind": "IntegerKind"}}],
                    "returnType": {"kind": "VoidKind"},
                }
            ],
        }
        message = _error(entry)
        assert "$.methods[0].args[0]" in message
        assert "not optional" in message

    def test_fields_must_be_a_list(self) -> None:
        assert "'fields' must be a list" in _error({"name": "A", "fields": {}})

    def test_error_path_uses_source_label(self) -> None:
        with pytest.raises(ScannerOutputError, match=r"scan\.json\[1\]"):
            load_scanner_output('[{"name": "A"}, {}]', source_label="scan.json")

    def test_excessively_nested_document(self) -> None:
        depth = 100_000
        type_text = '{"kind":"ListKind","typeDef":' * depth + '{"kind":"StringKind"}' + "}" * depth
        text = '[{"name":"A","fields":[{"name":"f","typeDef":' + type_text + "}]}]"
        with pytest.raises(ScannerOutputError, match="scan.json: document is nested too deeply"):
            load_scanner_output(text, source_label="scan.json")


# ###############
# Encoding
# ###############


class TestDump:
    def test_type_def_encoding(self) -> None:
        assert type_def_to_dict(list_of(ObjectTypeDef(name="Foo"))) == {
            "kind": "ListKind",
            "typeDef": {"kind": "ObjectKind", "name": "Foo"},
        }
        assert type_def_to_dict(ScalarTypeDef(scalar=ScalarKind.INT)) == {"kind": "IntegerKind"}

    def test_absent_constructor_and_default_are_omitted(self) -> None:
        cls = ClassTypeDef(
            name="A",
            methods=[
                FunctionTypeDef(
                    name="m",
                    args=[FunctionArg(name="a", type_def=ScalarTypeDef(scalar=ScalarKind.INT), optional=True)],
                    return_type=ScalarTypeDef(scalar=ScalarKind.VOID),
                )
            ],
        )
        d = class_to_dict(cls)
        assert "constructor" not in d
        assert "defaultValue" not in d["methods"][0]["args"][0]

    def test_dump_then_load(self) -> None:
        classes = load_scanner_output(FOO_DOCUMENT)
        assert load_scanner_output(dump_scanner_output(classes)) == classes

    def test_too_deep_for_nested_encoding(self) -> None:
        cls = ClassTypeDef(
            name="A", fields=[FieldTypeDef(name="f", type_def=list_of(ScalarTypeDef(scalar=ScalarKind.INT), depth=3000))]
        )
        with pytest.raises(ScannerOutputError, match="too deep"):
            dump_scanner_output([cls])
