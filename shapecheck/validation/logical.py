"""Logical Combinators

Union and intersection short-circuit, unlike the structural combinators
which visit every child.

- ``AnyOf`` stops at the first accepting branch. Branches tried before it
  share the caller's context, so their recorded paths stay recorded.
- ``AllOf`` runs every member against the same value and path and stops
  at the first rejection. With no members it accepts everything.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from shapecheck.errors import ErrorCode, SchemaDefinitionError

from .base import AccessPath, ValidationContext, Validator, as_validator
from .projection import intersection_of, union_of


def _members(validators: Iterable[Any], combinator: str) -> tuple[Validator[Any], ...]:
    if isinstance(validators, (str, bytes)) or not isinstance(validators, Iterable) or isinstance(validators, Validator):
        raise SchemaDefinitionError(f"{combinator} expects a sequence of validators, got {type(validators).__name__}",
            code=ErrorCode.E7001_NOT_A_VALIDATOR)
    return tuple(as_validator(v) for v in validators)


@dataclass(frozen=True)
class AnyOf(Validator[Any]):
    """At least one validator must pass."""
    validators: tuple[Validator[Any], ...]

    @property
    def constraint_name(self) -> str:
        return f"any_of[{', '.join(v.constraint_name for v in self.validators)}]"

    @property
    def accepts(self) -> Any:
        return union_of([v.accepts for v in self.validators])

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        for validator in self.validators:
            if validator(value, ctx, path):
                return True
        return False


@dataclass(frozen=True)
class AllOf(Validator[Any]):
    """All validators must pass."""
    validators: tuple[Validator[Any], ...]

    @property
    def constraint_name(self) -> str:
        return f"all_of[{', '.join(v.constraint_name for v in self.validators)}]"

    @property
    def accepts(self) -> Any:
        return intersection_of([v.accepts for v in self.validators])

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        for validator in self.validators:
            if not validator(value, ctx, path):
                return False
        return True


def union(validators: Iterable[Any]) -> AnyOf:
    return AnyOf(_members(validators, "union"))


def intersection(validators: Iterable[Any]) -> AllOf:
    return AllOf(_members(validators, "intersection"))
