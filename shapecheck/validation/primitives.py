"""Primitive Validators

Leaf predicates over scalar kinds. Primitives never recurse, so they ignore
the context and path: a failing primitive only answers False and the
enclosing combinator records where it happened.

Every kind test goes through ``kind_of``; there is no coercion, so ``"1"``
is not a number and ``True`` is not an integer.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from functools import cached_property
from collections.abc import Iterable
from typing import Any, Literal

from shapecheck.errors import ErrorCode, SchemaDefinitionError

from .base import (
    MISSING,
    NUMBER_KINDS,
    AccessPath,
    Symbol,
    ValidationContext,
    Validator,
    ValueKind,
    kind_of,
    log,
)
from .projection import literal_of, union_of


# ============================================================================
# Kind Validators
# ============================================================================

@dataclass(frozen=True)
class AnyValue(Validator[Any]):
    """Accepts everything, including ``MISSING``."""

    @property
    def constraint_name(self) -> str:
        return "any"

    @property
    def accepts(self) -> Any:
        return Any

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        return True


@dataclass(frozen=True)
class Kind(Validator[Any]):
    """Accept values whose runtime kind is one of ``kinds``."""
    name: str
    kinds: frozenset[ValueKind]
    annotation: Any = field(default=Any, compare=False)

    @property
    def constraint_name(self) -> str:
        return self.name

    @property
    def accepts(self) -> Any:
        return self.annotation

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        return kind_of(value) in self.kinds


# ============================================================================
# Literal Validators
# ============================================================================

def strict_equals(left: Any, right: Any) -> bool:
    """Equality without cross-kind coercion: ``1 == 1.0`` holds, ``1 == True`` does not."""
    left_kind, right_kind = kind_of(left), kind_of(right)
    if left_kind in NUMBER_KINDS and right_kind in NUMBER_KINDS:
        return left == right
    if left_kind is not right_kind:
        return False
    if left_kind in (ValueKind.SYMBOL, ValueKind.UNDEFINED, ValueKind.NULL):
        return left is right
    if type(left) is not type(right):
        return False
    try:
        return bool(left == right)
    except Exception:
        return False


def _same_value_zero(left: Any, right: Any) -> bool:
    if isinstance(left, float) and isinstance(right, float) and math.isnan(left) and math.isnan(right):
        return True
    return strict_equals(left, right)


@dataclass(frozen=True)
class Const(Validator[Any]):
    """Accept exactly one value."""
    value: Any

    @property
    def constraint_name(self) -> str:
        return f"const[{self.value!r}]"

    @property
    def accepts(self) -> Any:
        return literal_of([self.value])

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        return strict_equals(value, self.value)


@dataclass(frozen=True)
class OneOf(Validator[Any]):
    """Accept any member of ``options``."""
    options: tuple[Any, ...]

    def __init__(self, options: Iterable[Any]):
        if isinstance(options, (str, bytes)) or not isinstance(options, Iterable):
            raise SchemaDefinitionError(f"enum options must be an iterable of values, got {type(options).__name__}",
                code=ErrorCode.E7000_SCHEMA_GENERIC)
        object.__setattr__(self, "options", tuple(options))

    @property
    def constraint_name(self) -> str:
        opts = [repr(o) for o in self.options[:5]]
        suffix = f"... +{len(self.options) - 5}" if len(self.options) > 5 else ""
        return f"one_of[{', '.join(opts)}{suffix}]"

    @property
    def accepts(self) -> Any:
        return literal_of(self.options)

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        return any(_same_value_zero(value, option) for option in self.options)


# ============================================================================
# String Validators
# ============================================================================

@dataclass(frozen=True)
class RegexPattern(Validator[str]):
    """Accept strings in which ``pattern`` finds a match."""
    pattern: str | re.Pattern
    flags: int = 0

    def __post_init__(self):
        if not isinstance(self.pattern, (str, re.Pattern)):
            raise SchemaDefinitionError(f"Expected a pattern string or compiled pattern, got {type(self.pattern).__name__}",
                code=ErrorCode.E7003_INVALID_PATTERN)
        if isinstance(self.pattern, re.Pattern) and self.flags:
            raise SchemaDefinitionError("flags cannot be combined with a compiled pattern; compile it with them instead",
                code=ErrorCode.E7003_INVALID_PATTERN)
        try:
            self._compiled
        except re.error as e:
            log.error("schema_definition_error", reason="invalid_pattern", pattern=str(self.pattern), error=str(e))
            raise SchemaDefinitionError(f"Invalid pattern {self.pattern!r}: {e}", code=ErrorCode.E7003_INVALID_PATTERN) from e

    @cached_property
    def _compiled(self) -> re.Pattern:
        if isinstance(self.pattern, re.Pattern):
            return self.pattern
        return re.compile(self.pattern, self.flags)

    @property
    def constraint_name(self) -> str:
        return f"pattern[{self._compiled.pattern}]"

    @property
    def accepts(self) -> Any:
        return str

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        return isinstance(value, str) and self._compiled.search(value) is not None


def parses_as_number(text: str) -> bool:
    """True if Python's numeric parsers read ``text`` as a number other than NaN.

    Decimal, exponent and ``inf`` forms go through ``float``; radix prefixes
    (``0b``, ``0o``, ``0x``) go through ``int(text, 0)``.
    """
    text = text.strip()
    if not text:
        return False
    try:
        return not math.isnan(float(text))
    except ValueError:
        pass
    try:
        int(text, 0)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class NumberString(Validator[str]):
    """Accept non-empty strings holding a numeric literal."""

    @property
    def constraint_name(self) -> str:
        return "number_string"

    @property
    def accepts(self) -> Any:
        return str

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        return isinstance(value, str) and parses_as_number(value)


# ============================================================================
# Numeric Validators
# ============================================================================

def _check_bound(bound: Any, name: str) -> None:
    if bound is not None and kind_of(bound) not in NUMBER_KINDS:
        log.error("schema_definition_error", reason="invalid_bound", bound=repr(bound))
        raise SchemaDefinitionError(f"{name} must be a number or None, got {type(bound).__name__}",
            code=ErrorCode.E7004_INVALID_BOUND)


@dataclass(frozen=True)
class NumberRange(Validator[int | float]):
    """Accept numbers in the half-open range ``[min_value, max_value)``.

    With ``integral`` set, the number must also have no fractional part.
    """
    min_value: int | float | None = None
    max_value: int | float | None = None
    integral: bool = False
    name: str | None = None

    def __post_init__(self):
        _check_bound(self.min_value, "min_value")
        _check_bound(self.max_value, "max_value")

    @property
    def constraint_name(self) -> str:
        if self.name:
            return self.name
        lo = "" if self.min_value is None else self.min_value
        hi = "" if self.max_value is None else self.max_value
        return f"{'int_' if self.integral else ''}range[{lo}, {hi})"

    @property
    def accepts(self) -> Any:
        return int | float

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        kind = kind_of(value)
        if kind not in NUMBER_KINDS:
            return False
        if self.integral and kind is ValueKind.FLOAT and not value.is_integer():
            return False
        if self.min_value is not None and not value >= self.min_value:
            return False
        if self.max_value is not None and not value < self.max_value:
            return False
        return True


# ============================================================================
# Instances and Factories
# ============================================================================

any_: Validator[Any] = AnyValue()
string: Validator[str] = Kind("string", frozenset({ValueKind.STRING}), str)
number: Validator[int | float] = Kind("number", NUMBER_KINDS, int | float)
boolean: Validator[bool] = Kind("boolean", frozenset({ValueKind.BOOLEAN}), bool)
bigint: Validator[int] = Kind("bigint", frozenset({ValueKind.INTEGER}), int)
symbol: Validator[Symbol] = Kind("symbol", frozenset({ValueKind.SYMBOL}), Symbol)
null: Validator[None] = Kind("null", frozenset({ValueKind.NULL}), None)
undefined: Validator[Any] = Kind("undefined", frozenset({ValueKind.UNDEFINED}), Literal[MISSING])
void: Validator[Any] = Kind("void", frozenset({ValueKind.NULL, ValueKind.UNDEFINED}), union_of([None, Literal[MISSING]]))
number_string: Validator[str] = NumberString()


def _int_range(bits: int, signed: bool, name: str) -> NumberRange:
    if signed:
        return NumberRange(-(2 ** (bits - 1)), 2 ** (bits - 1), integral=True, name=name)
    return NumberRange(0, 2 ** bits, integral=True, name=name)


i8 = _int_range(8, True, "i8")
u8 = _int_range(8, False, "u8")
i16 = _int_range(16, True, "i16")
u16 = _int_range(16, False, "u16")
i32 = _int_range(32, True, "i32")
u32 = _int_range(32, False, "u32")


def const(value: Any) -> Const:
    """Accept exactly ``value``."""
    return Const(value)


def enum(options: Iterable[Any]) -> OneOf:
    """Accept any member of ``options``."""
    return OneOf(options)


def regexp(pattern: str | re.Pattern, flags: int = 0) -> RegexPattern:
    """Accept strings in which ``pattern`` matches anywhere."""
    return RegexPattern(pattern, flags)


def number_range(min_value: int | float | None = None, max_value: int | float | None = None) -> NumberRange:
    """Accept numbers with ``min_value <= n < max_value``; a None bound is open."""
    return NumberRange(min_value, max_value)
