"""Validator Protocol and Shared Types

Every validator is an immutable object called as
``validator(value, ctx=None, path=())`` and answering with a bool. A True
answer certifies that ``value`` has the validator's accepted type; static
checkers see it through the ``TypeGuard`` return annotation.

The optional ``ValidationContext`` is the only side channel. Structural
combinators append the path of every failing child to it; when it is
``None`` nothing is recorded and nothing is allocated.
"""
from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, TypeGuard, TypeVar

from shapecheck.errors import ErrorCode, SchemaDefinitionError
from shapecheck.logging import validation_logger

T = TypeVar("T")

log = validation_logger()

AccessPath = tuple[Hashable, ...]


class Missing(Enum):
    """Marker for a value that is absent, as opposed to present and ``None``."""
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = Missing.MISSING


class Symbol:
    """A unique named token. Two symbols are equal only if they are the same object."""

    __slots__ = ("description",)

    def __init__(self, description: str | None = None):
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description!r})" if self.description is not None else "Symbol()"


class ValueKind(Enum):
    """Closed set of runtime kinds every primitive check is expressed in."""
    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    SYMBOL = "symbol"
    ARRAY = "array"
    OBJECT = "object"
    OTHER = "other"


ARRAY_TYPES = (list, tuple)


def kind_of(value: Any) -> ValueKind:
    """Classify a value. ``bool`` is checked before ``int`` since it subclasses it."""
    if value is MISSING:
        return ValueKind.UNDEFINED
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Symbol):
        return ValueKind.SYMBOL
    if isinstance(value, ARRAY_TYPES):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    return ValueKind.OTHER


NUMBER_KINDS = frozenset({ValueKind.INTEGER, ValueKind.FLOAT})


@dataclass
class ValidationContext:
    """Accumulates the path of every failure seen during one validation call.

    Create a fresh one per top-level call; reusing a context keeps the
    errors of earlier calls.
    """
    errors: list[AccessPath] = field(default_factory=list)

    def record(self, path: AccessPath) -> None:
        self.errors.append(path)

    def clear(self) -> None:
        self.errors.clear()

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def __len__(self) -> int:
        return len(self.errors)


class Validator(ABC, Generic[T]):
    """Base class for all validators.

    Validators are immutable and composable:
    - ``a | b``: union, first accepting branch wins
    - ``a & b``: intersection, stops at the first rejection
    """

    @abstractmethod
    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        """Answer whether ``value`` conforms. Never raises."""

    @property
    @abstractmethod
    def accepts(self) -> Any:
        """The ``typing`` annotation of the values this validator accepts."""

    @property
    def constraint_name(self) -> str:
        return type(self).__name__

    def __call__(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> TypeGuard[T]:
        return self.validate(value, ctx, path)

    def __or__(self, other: Any) -> Validator[Any]:
        from .logical import AnyOf, union
        left = self.validators if isinstance(self, AnyOf) else (self,)
        right = other.validators if isinstance(other, AnyOf) else (other,)
        return union([*left, *right])

    def __and__(self, other: Any) -> Validator[Any]:
        from .logical import AllOf, intersection
        left = self.validators if isinstance(self, AllOf) else (self,)
        right = other.validators if isinstance(other, AllOf) else (other,)
        return intersection([*left, *right])

    def __ror__(self, other: Any) -> Validator[Any]:
        return as_validator(other) | self

    def __rand__(self, other: Any) -> Validator[Any]:
        return as_validator(other) & self


def _positional_arity(fn: Callable[..., Any]) -> int:
    """How many of ``(value, ctx, path)`` a plain callable can take."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return 1
    count = 0
    for param in params:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return 3
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return max(1, min(count, 3))


@dataclass(frozen=True)
class Predicate(Validator[Any]):
    """Validator from a plain function.

    Usage:
        is_a = Predicate(lambda v: v == "A", name="is_a")
        object_({"a": is_a})
    """
    fn: Callable[..., Any]
    name: str = "predicate"
    annotation: Any = Any
    arity: int = field(default=0, compare=False)

    def __post_init__(self):
        if not self.arity:
            object.__setattr__(self, "arity", _positional_arity(self.fn))

    @property
    def constraint_name(self) -> str:
        return self.name

    @property
    def accepts(self) -> Any:
        return self.annotation

    def validate(self, value: Any, ctx: ValidationContext | None = None, path: AccessPath = ()) -> bool:
        args = (value, ctx, path)[:self.arity]
        try:
            return bool(self.fn(*args))
        except RecursionError:
            raise
        except Exception as e:
            log.warning("predicate_raised", predicate=self.name, error=repr(e), path=path)
            return False


def predicate(fn: Callable[..., Any], *, name: str | None = None, accepts: Any = Any) -> Predicate:
    """Wrap a plain function as a validator with an optional projected type."""
    if not callable(fn):
        raise SchemaDefinitionError(f"Expected a callable, got {type(fn).__name__}", code=ErrorCode.E7001_NOT_A_VALIDATOR)
    return Predicate(fn, name=name or getattr(fn, "__name__", "predicate"), annotation=accepts)


def as_validator(candidate: Any) -> Validator[Any]:
    """Normalize a combinator child: validators pass through, callables are wrapped."""
    if isinstance(candidate, Validator):
        return candidate
    if callable(candidate):
        return predicate(candidate)
    log.error("schema_definition_error", reason="not_a_validator", got=type(candidate).__name__)
    raise SchemaDefinitionError(
        f"Expected a validator or callable, got {type(candidate).__name__}",
        code=ErrorCode.E7001_NOT_A_VALIDATOR,
    )
