"""Tests for Option type."""

import asyncio
import copy
import dataclasses
import pickle
from unittest.mock import Mock

import pytest

from rusty_utils import option as O
from rusty_utils.exceptions import ExpectError, PatternError, UnwrapError
from rusty_utils.option import Nothing, Some, none


def test_some_creation():
    """Test Some creation."""
    option = O.some(42)
    assert O.is_some(option)
    assert not O.is_none(option)
    assert option.value == 42


def test_none_creation():
    """Test the absent value."""
    assert O.is_none(none)
    assert not O.is_some(none)


@pytest.mark.parametrize("option", [Some(0), Some(None), none])
def test_guards_are_exclusive(option):
    assert O.is_some(option) != O.is_none(option)
    assert option.is_some() == O.is_some(option)


class TestNothing:
    """Test the Nothing singleton."""

    def test_single_instance(self):
        assert Nothing() is none
        assert Nothing() is Nothing()

    def test_copy_and_pickle_keep_identity(self):
        assert copy.copy(none) is none
        assert copy.deepcopy(none) is none
        assert pickle.loads(pickle.dumps(none)) is none

    def test_immutable(self):
        with pytest.raises(AttributeError):
            none.value = 1

    def test_repr(self):
        assert repr(none) == "Nothing"

    def test_some_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Some(1).value = 2


class TestNullable:
    """Test conversions from and to None."""

    @pytest.mark.parametrize("value", [0, "", False, [], 0.0])
    def test_falsy_values_are_present(self, value):
        assert O.from_nullable(value) == Some(value)

    def test_none_is_absent(self):
        assert O.from_nullable(None) is none

    def test_to_nullable(self):
        assert O.to_nullable(Some(3)) == 3
        assert O.to_nullable(none) is None
        assert O.to_undefined(none) is None


class TestCombinators:
    """Test map, and_then, or_else and filter."""

    def test_map(self):
        assert O.map(Some(5), lambda x: x * 2) == Some(10)

    def test_map_none_does_not_call_func(self):
        func = Mock()
        assert O.map(none, func) is none
        func.assert_not_called()

    def test_and_then(self):
        assert O.and_then(Some("3"), lambda s: O.some(int(s))) == Some(3)
        assert O.and_then(Some(""), lambda s: none) is none

    def test_and_then_short_circuits(self):
        func = Mock()
        assert O.and_then(none, func) is none
        func.assert_not_called()

    def test_or_else(self):
        func = Mock(return_value=Some("fallback"))
        assert O.or_else(Some("x"), func) == Some("x")
        func.assert_not_called()
        assert O.or_else(none, func) == Some("fallback")

    def test_filter(self):
        assert O.filter(Some(4), lambda x: x % 2 == 0) == Some(4)
        assert O.filter(Some(3), lambda x: x % 2 == 0) is none
        assert O.filter(none, lambda x: True) is none

    def test_method_chaining(self):
        assert Some(" ada ").map(str.strip).filter(bool).unwrap_or("?") == "ada"
        assert Some("  ").map(str.strip).filter(bool).unwrap_or("?") == "?"


class TestUnwrap:
    """Test extraction operations."""

    def test_unwrap(self):
        assert O.unwrap(Some(1)) == 1

    def test_unwrap_none_raises(self):
        with pytest.raises(UnwrapError) as exc_info:
            O.unwrap(none)
        assert "Nothing" in str(exc_info.value)
        assert isinstance(exc_info.value, RuntimeError)

    def test_expect(self):
        assert O.expect(Some(1), "unused") == 1
        with pytest.raises(ExpectError) as exc_info:
            O.expect(none, "user must exist")
        assert str(exc_info.value) == "user must exist"

    def test_unwrap_or(self):
        assert O.unwrap_or(Some(1), 2) == 1
        assert O.unwrap_or(none, 2) == 2

    def test_unwrap_or_else(self):
        default = Mock(return_value=9)
        assert O.unwrap_or_else(Some(1), default) == 1
        default.assert_not_called()
        assert O.unwrap_or_else(none, default) == 9


class TestMatch:
    """Test pattern matching."""

    def test_branches(self):
        assert O.match(Some(2), some=lambda v: v * 10, none=lambda: -1) == 20
        assert O.match(none, some=lambda v: v * 10, none=lambda: -1) == -1

    def test_round_trip(self):
        for option in (Some("a"), none):
            assert O.match(option, some=O.some, none=lambda: none) == option

    def test_missing_branch(self):
        with pytest.raises(TypeError):
            O.match(none, some=lambda v: v)

    def test_non_callable_branch(self):
        with pytest.raises(PatternError):
            O.match(none, some=lambda v: v, none=None)


class TestMultiple:
    """Test combinators over several Options."""

    def test_map2(self):
        assert O.map2(Some(1), Some(2), lambda a, b: a + b) == Some(3)
        assert O.map2(Some(1), none, lambda a, b: a + b) is none

    def test_map3(self):
        assert O.map3(Some(1), Some(2), Some(3), lambda a, b, c: a * b * c) == Some(6)
        func = Mock()
        assert O.map3(none, Some(2), Some(3), func) is none
        func.assert_not_called()

    def test_combine(self):
        assert O.combine([Some(1), Some(2), Some(3)]) == Some([1, 2, 3])
        assert O.combine([Some(1), none, Some(3)]) is none
        assert O.combine([]) == Some([])

    def test_collect_some_vs_combine(self):
        options = [Some(1), none, Some(3)]
        assert O.collect_some(options) == [1, 3]
        assert O.combine(options) is none

    def test_collect_some_all_none(self):
        assert O.collect_some([none, none]) == []

    def test_find_some(self):
        assert O.find_some([none, Some("a"), Some("b")]) == Some("a")
        assert O.find_some([none, none]) is none
        assert O.find_some([]) is none


async def _value(value, delay=0.0):
    await asyncio.sleep(delay)
    return value


class TestAsync:
    """Test async combinators."""

    @pytest.mark.asyncio
    async def test_map_async(self):
        async def double(x):
            return x * 2

        assert await O.map_async(_value(Some(4)), double) == Some(8)
        assert await O.map_async(_value(Some(4)), str) == Some("4")
        assert await O.map_async(_value(none), double) is none

    @pytest.mark.asyncio
    async def test_and_then_async(self):
        async def lookup(key):
            return O.from_nullable({"a": 1}.get(key))

        assert await O.and_then_async(_value(Some("a")), lookup) == Some(1)
        assert await O.and_then_async(_value(Some("b")), lookup) is none

    @pytest.mark.asyncio
    async def test_and_then_async_short_circuits(self):
        func = Mock()
        assert await O.and_then_async(_value(none), func) is none
        func.assert_not_called()

    @pytest.mark.asyncio
    async def test_combine_async_keeps_input_order(self):
        options = [_value(Some(1), 0.02), _value(Some(2), 0.01), _value(Some(3))]
        assert await O.combine_async(options) == Some([1, 2, 3])

    @pytest.mark.asyncio
    async def test_combine_async_with_none(self):
        options = [_value(Some(1)), _value(none, 0.01)]
        assert await O.combine_async(options) is none
