"""Type Projection

Maps a validator to the ``typing`` annotation of the values it accepts.
Python has no conditional types, so instead of a compile-time ``Infer``
every validator computes its own ``accepts`` annotation from its
children. The result is documentation-grade metadata: it never changes
what a validator accepts.

Usage:
    user = object_({"name": string, "tags": array(string)})
    infer(user)           # TypedDict("Object", {"name": str, "tags": Sequence[str]})
    infer(optional(i8))   # int | float | None | Literal[MISSING]
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, NoReturn, TypedDict, Union, is_typeddict

_LITERAL_TYPES = (str, bytes, int, bool, type(None), Enum)


def infer(validator: Any) -> Any:
    """Return the annotation of the values ``validator`` accepts."""
    from .base import as_validator
    return as_validator(validator).accepts


def union_of(annotations: list[Any] | tuple[Any, ...]) -> Any:
    """Union of annotations; ``NoReturn`` when nothing is accepted."""
    unique: list[Any] = []
    for ann in annotations:
        if ann is Any:
            return Any
        if ann not in unique:
            unique.append(ann)
    if not unique:
        return NoReturn
    if len(unique) == 1:
        return unique[0]
    return Union[tuple(unique)]


def literal_of(values: list[Any] | tuple[Any, ...]) -> Any:
    """``Literal[...]`` for literal-able values, their types for the rest."""
    literals = [v for v in values if isinstance(v, _LITERAL_TYPES)]
    others = [type(v) for v in values if not isinstance(v, _LITERAL_TYPES)]
    parts = [Literal[tuple(literals)]] if literals else []
    return union_of([*parts, *others])


def typed_dict(fields: dict[str, Any], name: str = "Object") -> Any:
    return TypedDict(name, fields)


def intersection_of(annotations: list[Any] | tuple[Any, ...]) -> Any:
    """Best available rendition of an intersection type.

    TypedDicts merge into one; anything else keeps the first member and
    carries the rest as ``Annotated`` metadata.
    """
    members = [ann for ann in annotations if ann is not Any]
    if not members:
        return Any
    if len(members) == 1:
        return members[0]
    if all(is_typeddict(m) for m in members):
        merged: dict[str, Any] = {}
        for m in members:
            merged.update(m.__annotations__)
        return typed_dict(merged, name="Intersection")
    return Annotated[(members[0], *members[1:])]
