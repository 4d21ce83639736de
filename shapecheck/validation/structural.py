"""Structural Combinators

Objects, records, arrays and tuples. None of them short-circuit: every
child is checked so the context ends up with the path of every failing
child, in declaration or index order. A container never records its own
path; its parent does that when it sees the container fail.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import Any, TypeVar

from shapecheck.errors import ErrorCode, SchemaDefinitionError

from .base import MISSING, AccessPath, ValidationContext, Validator, ValueKind, as_validator, kind_of, log
from .projection import typed_dict

T = TypeVar("T")

# Never read, validated or accepted as a declared key.
RESERVED_KEY = "__proto__"


@dataclass(frozen=True)
class ObjectShape(Validator[Any]):
    """Mapping with declared fields.

    With ``exact`` set, keys that are not declared make the mapping fail.
    That failure is boolean-only: no path is recorded for it.
    """
    fields: Mapping[str, Validator[Any]]
    exact: bool = True

    def __hash__(self) -> int:
        return hash((tuple(self.fields.items()), self.exact))

    @property
    def constraint_name(self) -> str:
        mode = "exact" if self.exact else "open"
        return f"object[{', '.join(self.fields)}; {mode}]"

    @cached_property
    def accepts(self) -> Any:
        return typed_dict({k: v.accepts for k, v in self.fields.items() if k != RESERVED_KEY})

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        if kind_of(value) is not ValueKind.OBJECT:
            return False
        failed = False
        for key, validator in self.fields.items():
            if key == RESERVED_KEY:
                continue
            child_path = (*path, key)
            if not validator(value.get(key, MISSING), ctx, child_path):
                failed = True
                if ctx is not None:
                    ctx.record(child_path)
        if failed:
            return False
        if self.exact:
            return all(key in self.fields and key != RESERVED_KEY for key in value)
        return True


@dataclass(frozen=True)
class RecordOf(Validator[Any]):
    """Mapping whose every key and value conform.

    Keys are checked as strings; non-string keys are passed through ``str``.
    """
    key: Validator[Any]
    value: Validator[Any]

    @property
    def constraint_name(self) -> str:
        return f"record[{self.key.constraint_name}, {self.value.constraint_name}]"

    @property
    def accepts(self) -> Any:
        return dict[self.key.accepts, self.value.accepts]

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        if kind_of(value) is not ValueKind.OBJECT:
            return False
        failed = False
        for key, item in value.items():
            if key == RESERVED_KEY:
                continue
            child_path = (*path, key)
            if not self.key(key if isinstance(key, str) else str(key), ctx, child_path):
                failed = True
                if ctx is not None:
                    ctx.record(child_path)
            if not self.value(item, ctx, child_path):
                failed = True
                if ctx is not None:
                    ctx.record(child_path)
        return not failed


@dataclass(frozen=True)
class ArrayOf(Validator[Any]):
    """Sequence (list or tuple) whose every element conforms."""
    element: Validator[Any]

    @property
    def constraint_name(self) -> str:
        return f"array[{self.element.constraint_name}]"

    @property
    def accepts(self) -> Any:
        return Sequence[self.element.accepts]

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        if kind_of(value) is not ValueKind.ARRAY:
            return False
        failed = False
        for index, item in enumerate(value):
            child_path = (*path, index)
            if not self.element(item, ctx, child_path):
                failed = True
                if ctx is not None:
                    ctx.record(child_path)
        return not failed


@dataclass(frozen=True)
class TupleOf(Validator[Any]):
    """Fixed-arity sequence, one validator per position.

    Missing trailing elements are checked as ``MISSING``; surplus trailing
    elements have no validator and fail at their own index.
    """
    elements: tuple[Validator[Any], ...]

    @property
    def constraint_name(self) -> str:
        return f"tuple[{', '.join(v.constraint_name for v in self.elements)}]"

    @property
    def accepts(self) -> Any:
        if not self.elements:
            return tuple[()]
        return tuple[tuple(v.accepts for v in self.elements)]

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        if kind_of(value) is not ValueKind.ARRAY:
            return False
        declared, actual = len(self.elements), len(value)
        failed = False
        for index in range(max(declared, actual)):
            child_path = (*path, index)
            item = value[index] if index < actual else MISSING
            if index >= declared or not self.elements[index](item, ctx, child_path):
                failed = True
                if ctx is not None:
                    ctx.record(child_path)
        return not failed


# ============================================================================
# Factories
# ============================================================================

def object_(fields: Mapping[str, Any], exact: bool = True) -> ObjectShape:
    """Mapping with the declared ``fields``; ``exact`` rejects undeclared keys."""
    if not isinstance(fields, Mapping):
        log.error("schema_definition_error", reason="invalid_field_map", got=type(fields).__name__)
        raise SchemaDefinitionError(f"object_ expects a mapping of field validators, got {type(fields).__name__}",
            code=ErrorCode.E7002_INVALID_FIELD_MAP)
    bad_keys = [k for k in fields if not isinstance(k, str)]
    if bad_keys:
        log.error("schema_definition_error", reason="invalid_field_name", keys=repr(bad_keys))
        raise SchemaDefinitionError(f"object_ field names must be strings, got {bad_keys!r}",
            code=ErrorCode.E7002_INVALID_FIELD_MAP)
    return ObjectShape({key: as_validator(v) for key, v in fields.items()}, exact)


def record(key: Any, value: Any) -> RecordOf:
    """Mapping whose keys conform to ``key`` and values to ``value``."""
    return RecordOf(as_validator(key), as_validator(value))


def array(element: Validator[T]) -> Validator[Sequence[T]]:
    """Sequence whose every element conforms to ``element``."""
    return ArrayOf(as_validator(element))


def tuple_(elements: Iterable[Any]) -> TupleOf:
    """Fixed-arity sequence checked position by position."""
    if isinstance(elements, (str, bytes, Mapping)) or not isinstance(elements, Iterable) or isinstance(elements, Validator):
        raise SchemaDefinitionError(f"tuple_ expects a sequence of validators, got {type(elements).__name__}",
            code=ErrorCode.E7001_NOT_A_VALIDATOR)
    return TupleOf(tuple(as_validator(v) for v in elements))
