# Copyright 2026 SDKIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Plain-text rendering of type defs and classes for diagnostics.

Types use a compact, language-neutral notation: scalars by their primitive
name (``String``), object references by class name (``Container``), and lists
in brackets (``[[Container]]``). Optional arguments are suffixed with ``?``
and show their default literal when one is set.
"""

from __future__ import annotations

from sdkir.model.entities import ClassTypeDef, FunctionArg, FunctionTypeDef
from sdkir.model.types import ScalarTypeDef, TypeDef, unwrap_list

# ###############
# Public Interface
# ###############


def format_type_def(type_def: TypeDef) -> str:
    """Render *type_def* as ``String``, ``Container``, ``[Container]``, ..."""
    depth, inner = unwrap_list(type_def)
    name = inner.scalar.value if isinstance(inner, ScalarTypeDef) else inner.name
    return "[" * depth + name + "]" * depth


def format_arg(arg: FunctionArg) -> str:
    """Render an argument as ``name: Type``, ``name?: Type`` or ``name?: Type = default``."""
    marker = "?" if arg.optional else ""
    text = f"{arg.name}{marker}: {format_type_def(arg.type_def)}"
    if arg.default_value is not None:
        text += f" = {arg.default_value}"
    return text


def format_function(fn: FunctionTypeDef) -> str:
    """Render a method signature, e.g. ``baz(x: Int) -> Boolean``."""
    args = ", ".join(format_arg(a) for a in fn.args)
    return f"{fn.name}({args}) -> {format_type_def(fn.return_type)}"


def describe_class(cls: ClassTypeDef) -> str:
    """Render a multi-line outline of a class: fields, constructor, then methods."""
    lines = [f"class {cls.name}"]
    if cls.description:
        lines.append(f"  # {cls.description}")
    for f in cls.fields:
        lines.append(f"  field {f.name}: {format_type_def(f.type_def)}")
    if cls.constructor is not None:
        args = ", ".join(format_arg(a) for a in cls.constructor.args)
        lines.append(f"  constructor({args})")
    for method in cls.methods:
        lines.append(f"  method {format_function(method)}")
    return "\n".join(lines)
