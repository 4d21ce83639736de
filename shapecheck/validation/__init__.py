"""Composable Validators

Validator trees decide whether an untyped value (decoded JSON, external
input) has an expected shape. A failed call answers False and, when given
a context, records the path of every divergence.

Key Features:
- Primitive kind, literal, pattern and bounded-integer validators
- Structural combinators (object, record, array, tuple) that visit every child
- Short-circuiting union/intersection, also as ``|`` and ``&``
- Paths that resolve back to the failing value with ``access``
- ``typing`` projection of every validator through ``infer``
- ``check``/``ensure`` helpers for boundary code

Usage:
    from shapecheck.validation import object_, array, string, optional, i32, ValidationContext

    user = object_({"name": string, "age": optional(i32), "tags": array(string)})

    ctx = ValidationContext()
    if not user(payload, ctx):
        print(ctx.errors)  # [("tags", 1)]
"""

# Protocol and shared types
from .base import (
    MISSING,
    AccessPath,
    Missing,
    Predicate,
    Symbol,
    ValidationContext,
    Validator,
    ValueKind,
    as_validator,
    kind_of,
    predicate,
)

# Primitives
from .primitives import (
    AnyValue,
    Const,
    Kind,
    NumberRange,
    NumberString,
    OneOf,
    RegexPattern,
    any_,
    bigint,
    boolean,
    const,
    enum,
    i8,
    i16,
    i32,
    null,
    number,
    number_range,
    number_string,
    parses_as_number,
    regexp,
    strict_equals,
    string,
    symbol,
    u8,
    u16,
    u32,
    undefined,
    void,
)

# Combinators
from .modifiers import Nullable, OptionalOf, nullable, optional
from .structural import ArrayOf, ObjectShape, RecordOf, TupleOf, array, object_, record, tuple_
from .logical import AllOf, AnyOf, intersection, union

# Paths, projection and reporting
from .access import access, format_path
from .projection import infer
from .report import ValidationReport, check, ensure

__all__ = [
    "MISSING", "AccessPath", "Missing", "Predicate", "Symbol", "ValidationContext",
    "Validator", "ValueKind", "as_validator", "kind_of", "predicate",
    "AnyValue", "Const", "Kind", "NumberRange", "NumberString", "OneOf", "RegexPattern",
    "any_", "bigint", "boolean", "const", "enum", "i8", "i16", "i32", "null", "number",
    "number_range", "number_string", "parses_as_number", "regexp", "strict_equals",
    "string", "symbol", "u8", "u16", "u32", "undefined", "void",
    "Nullable", "OptionalOf", "nullable", "optional",
    "ArrayOf", "ObjectShape", "RecordOf", "TupleOf", "array", "object_", "record", "tuple_",
    "AllOf", "AnyOf", "intersection", "union",
    "access", "format_path", "infer",
    "ValidationReport", "check", "ensure",
]
