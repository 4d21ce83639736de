"""Modifier Combinators

Wrappers that widen what a validator accepts. They add no path segment
and never record: whatever the wrapped validator recorded stays as it is.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TypeVar

from .base import MISSING, AccessPath, ValidationContext, Validator, as_validator
from .projection import union_of

T = TypeVar("T")


@dataclass(frozen=True)
class OptionalOf(Validator[Any]):
    """Also accept ``None`` and ``MISSING``."""
    inner: Validator[Any]

    @property
    def constraint_name(self) -> str:
        return f"optional[{self.inner.constraint_name}]"

    @property
    def accepts(self) -> Any:
        return union_of([self.inner.accepts, None, Literal[MISSING]])

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        return value is None or value is MISSING or self.inner(value, ctx, path)


@dataclass(frozen=True)
class Nullable(Validator[Any]):
    """Also accept ``None``."""
    inner: Validator[Any]

    @property
    def constraint_name(self) -> str:
        return f"nullable[{self.inner.constraint_name}]"

    @property
    def accepts(self) -> Any:
        return union_of([self.inner.accepts, None])

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        return value is None or self.inner(value, ctx, path)


def optional(validator: Validator[T]) -> Validator[T | None]:
    return OptionalOf(as_validator(validator))


def nullable(validator: Validator[T]) -> Validator[T | None]:
    return Nullable(as_validator(validator))
