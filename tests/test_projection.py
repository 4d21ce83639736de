"""Tests for the typing annotations validators project."""
from collections.abc import Sequence
from typing import Annotated, Any, Literal, NoReturn, Union, get_args, get_origin, is_typeddict

import pytest

from shapecheck import (
    MISSING,
    Symbol,
    any_,
    array,
    bigint,
    boolean,
    const,
    enum,
    i8,
    infer,
    intersection,
    null,
    nullable,
    number,
    number_range,
    number_string,
    object_,
    optional,
    predicate,
    record,
    regexp,
    string,
    symbol,
    tuple_,
    u32,
    undefined,
    union,
    void,
)


@pytest.mark.parametrize(
    "validator, expected",
    [
        (any_, Any),
        (string, str),
        (regexp("x"), str),
        (number_string, str),
        (number, int | float),
        (i8, int | float),
        (u32, int | float),
        (number_range(0, 1), int | float),
        (bigint, int),
        (boolean, bool),
        (symbol, Symbol),
        (null, None),
        (undefined, Literal[MISSING]),
        (void, Union[None, Literal[MISSING]]),
        (const("a"), Literal["a"]),
        (const(3), Literal[3]),
        (enum(["a", "b"]), Literal["a", "b"]),
        (enum(["a", 1.5]), Union[Literal["a"], float]),
    ],
)
def test_primitive_projection(validator, expected):
    assert infer(validator) == expected


def test_modifier_projection():
    assert infer(optional(string)) == Union[str, None, Literal[MISSING]]
    assert infer(nullable(string)) == Union[str, None]


def test_container_projection():
    assert infer(array(string)) == Sequence[str]
    assert infer(record(string, number)) == dict[str, int | float]
    assert infer(tuple_([string, bigint])) == tuple[str, int]
    assert infer(tuple_([])) == tuple[()]


def test_object_projects_to_typeddict():
    user = infer(object_({"name": string, "age": optional(i8), "__proto__": string}))
    assert is_typeddict(user)
    assert set(user.__annotations__) == {"name", "age"}
    assert user.__annotations__["name"] is str


def test_union_projection():
    assert infer(union([string, bigint])) == Union[str, int]
    assert infer(union([string, string])) is str
    assert infer(union([string, any_])) is Any
    assert infer(union([])) is NoReturn
    assert infer(string | null) == Union[str, None]


def test_intersection_projection():
    merged = infer(intersection([object_({"a": string}), object_({"b": number})]))
    assert is_typeddict(merged)
    assert set(merged.__annotations__) == {"a", "b"}

    assert infer(intersection([])) is Any
    assert infer(intersection([string, any_])) is str

    refined = infer(string & regexp("^x"))
    assert get_origin(refined) is Annotated
    assert get_args(refined) == (str, str)


def test_predicate_projection():
    assert infer(lambda v: True) is Any
    assert infer(predicate(lambda v: isinstance(v, int), accepts=int)) is int


def test_projection_does_not_change_acceptance():
    shape = object_({"a": string})
    before = shape({"a": "x"})
    infer(shape)
    assert shape({"a": "x"}) is before
