"""Tests for plain callables used as validators."""
import sys

import pytest

from shapecheck import (
    ErrorCode,
    Predicate,
    SchemaDefinitionError,
    ShapecheckError,
    ValidationContext,
    array,
    as_validator,
    number,
    object_,
    optional,
    predicate,
    string,
)


def test_one_argument_callable():
    is_a = as_validator(lambda v: v == "A")
    assert isinstance(is_a, Predicate)
    assert is_a("A")
    assert not is_a("B")


def test_callable_sees_context_and_path(ctx):
    def positive_or_report(value, ctx, path):
        if isinstance(value, int) and value > 0:
            return True
        if ctx is not None:
            ctx.record((*path, "sign"))
        return False

    assert not array(positive_or_report)([1, -1], ctx)
    assert ctx.errors == [(1, "sign"), (1,)]


def test_two_argument_callable(ctx):
    seen = []

    def with_ctx(value, ctx):
        seen.append(ctx)
        return True

    assert object_({"a": with_ctx})({"a": 1}, ctx)
    assert seen == [ctx]


def test_varargs_callable_gets_everything():
    seen = []

    def anything(*args):
        seen.append(args)
        return True

    assert predicate(anything)(1, None, ("p",))
    assert seen == [(1, None, ("p",))]


def test_builtin_callable():
    digits = predicate(str.isdigit)
    assert digits("123")
    assert not digits("12a")


def test_raising_callable_is_a_rejection():
    assert not predicate(lambda v: 1 / v)(0)
    assert not predicate(str.isdigit)(5)


def test_result_is_coerced_to_bool():
    truthy = predicate(lambda v: v)
    assert truthy(5) is True
    assert truthy("") is False


def test_name_defaults_to_function_name():
    def is_even(v):
        return v % 2 == 0

    assert predicate(is_even).constraint_name == "is_even"
    assert predicate(is_even, name="even").constraint_name == "even"


@pytest.mark.parametrize("candidate", [42, "string", None, {"a": string}])
def test_non_callables_are_rejected(candidate):
    with pytest.raises(SchemaDefinitionError) as exc_info:
        as_validator(candidate)
    err = exc_info.value
    assert err.code is ErrorCode.E7001_NOT_A_VALIDATOR
    assert isinstance(err, TypeError)
    assert isinstance(err, ShapecheckError)
    assert err.to_dict()["error"]["category"] == "schema"


def test_predicate_requires_a_callable():
    with pytest.raises(SchemaDefinitionError):
        predicate(3)


def _linked(depth):
    value = None
    for index in range(depth):
        value = {"v": index, "next": value}
    return value


def test_callables_allow_recursive_schemas(ctx):
    node = object_({"v": number, "next": optional(lambda v, c, p: node(v, c, p))})
    assert node(_linked(5), ctx)
    assert ctx.errors == []

    broken = {"v": 0, "next": {"v": "one", "next": None}}
    assert not node(broken, ctx)
    assert ctx.errors == [("next", "v"), ("next",)]


def test_recursion_error_propagates_through_callables():
    node = object_({"v": number, "next": optional(lambda v, c, p: node(v, c, p))})
    with pytest.raises(RecursionError):
        node(_linked(sys.getrecursionlimit()), ValidationContext())
