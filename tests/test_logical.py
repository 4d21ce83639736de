"""Tests for union and intersection, including operator sugar."""
import pytest

from shapecheck import (
    AllOf,
    AnyOf,
    SchemaDefinitionError,
    boolean,
    intersection,
    null,
    number,
    object_,
    string,
    union,
)


class TestUnion:
    def test_first_accepting_branch_wins(self):
        text_or_number = union([string, number])
        assert text_or_number("a")
        assert text_or_number(1)
        assert not text_or_number(True)

    def test_failure_adds_no_entry_of_its_own(self, ctx):
        assert not union([string, number])(None, ctx, ("x",))
        assert ctx.errors == []

    def test_rejected_branches_keep_their_entries(self, ctx):
        shape = union([object_({"a": string}), object_({"a": number})])
        assert shape({"a": 1}, ctx)
        assert ctx.errors == [("a",)]

    def test_short_circuits(self):
        calls = []

        def spy(value):
            calls.append(value)
            return True

        assert union([string, spy])("a")
        assert calls == []

    def test_empty_union_rejects_everything(self):
        assert not union([])(None)

    @pytest.mark.parametrize("validators", [string, "ab", None])
    def test_requires_a_sequence(self, validators):
        with pytest.raises(SchemaDefinitionError):
            union(validators)


class TestIntersection:
    def test_all_members_see_the_same_value(self):
        both = intersection([object_({"a": string}, exact=False), object_({"b": number}, exact=False)])
        assert both({"a": "x", "b": 1})
        assert not both({"a": "x"})

    def test_stops_at_first_failure(self, ctx):
        both = intersection([object_({"a": string}, exact=False), object_({"b": number}, exact=False)])
        assert not both({"a": 1, "b": "x"}, ctx)
        assert ctx.errors == [("a",)]

    def test_members_share_the_path(self, ctx):
        both = intersection([object_({"a": string}, exact=False)])
        assert not both({"a": 1}, ctx, ("outer",))
        assert ctx.errors == [("outer", "a")]

    def test_empty_intersection_accepts_everything(self):
        for value in (None, 1, "x", [], {}):
            assert intersection([])(value)


class TestOperators:
    def test_or_builds_flat_union(self):
        combined = string | number | boolean
        assert isinstance(combined, AnyOf)
        assert combined.validators == (string, number, boolean)
        assert combined(True)
        assert not combined(None)

    def test_and_builds_flat_intersection(self):
        combined = object_({"a": string}, exact=False) & object_({"b": number}, exact=False) & object_({}, exact=False)
        assert isinstance(combined, AllOf)
        assert len(combined.validators) == 3
        assert combined({"a": "x", "b": 2})

    def test_or_accepts_plain_callables(self):
        even = string | (lambda v: isinstance(v, int) and v % 2 == 0)
        assert even(4)
        assert not even(3)

    def test_or_with_null(self):
        assert (string | null)(None)

    def test_callable_on_the_left(self):
        combined = (lambda v: v == 0) | string
        assert isinstance(combined, AnyOf)
        assert combined.validators[1] is string
        assert combined(0)
        assert combined("a")
        assert not combined(1)

    def test_callable_on_the_left_of_and(self):
        combined = (lambda v: len(v) > 2) & string
        assert isinstance(combined, AllOf)
        assert combined("abc")
        assert not combined("ab")
