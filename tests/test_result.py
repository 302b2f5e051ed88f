"""
Tests for the Result type.

Tests cover:
- Transformations (map, map_error, flat_map, filter)
- Recovery (recover, recover_with, or_else)
- Combining and sequencing results
- Accessors, including the unchecked ones
"""

import dataclasses

import pytest
from gs1_scanner.result import (
    Failure,
    IllegalStateError,
    Success,
    failable,
    failure,
    of_nullable,
    sequence,
    sequence_or,
    sequence_with_error_mapper,
    success,
)


class TestVariants:
    """Tests for the two variants."""

    def test_success_flags(self):
        result = success(1)
        assert result.is_success
        assert not result.is_failure

    def test_failure_flags(self):
        result = failure("boom")
        assert result.is_failure
        assert not result.is_success

    def test_equality(self):
        assert success(1) == Success(1)
        assert failure("e") == Failure("e")
        assert Success("x") != Failure("x")

    def test_results_are_immutable(self):
        result = success(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.value = 2


class TestTransformations:
    """Tests for map / map_error / flat_map / filter."""

    def test_map_success(self):
        assert success(2).map(lambda v: v * 10) == Success(20)

    def test_map_passes_failure_through(self):
        assert failure("e").map(lambda v: v * 10) == Failure("e")

    def test_map_does_not_touch_original(self):
        original = success([1])
        original.map(lambda v: v + [2])
        assert original == Success([1])

    def test_map_error(self):
        assert failure("e").map_error(str.upper) == Failure("E")
        assert success(1).map_error(str.upper) == Success(1)

    def test_flat_map_chains_successes(self):
        result = success(4).flat_map(lambda v: success(v + 1))
        assert result == Success(5)

    def test_flat_map_short_circuits(self):
        calls = []
        result = failure("e").flat_map(lambda v: calls.append(v) or success(v))
        assert result == Failure("e")
        assert calls == []

    def test_flat_map_propagates_inner_failure(self):
        assert success(1).flat_map(lambda v: failure("inner")) == Failure("inner")

    def test_chain_is_flat_map(self):
        assert success(1).chain(lambda v: success(v * 3)) == Success(3)

    def test_filter(self):
        assert success(5).filter(lambda v: v > 3, "small") == Success(5)
        assert success(1).filter(lambda v: v > 3, "small") == Failure("small")
        assert failure("e").filter(lambda v: True, "small") == Failure("e")


class TestRecovery:
    """Tests for recover / recover_with / or_else."""

    def test_recover(self):
        assert failure("e").recover(lambda e: len(e)) == Success(1)
        assert success(7).recover(lambda e: 0) == Success(7)

    def test_recover_with(self):
        assert failure("e").recover_with(lambda e: success("fixed")) == Success("fixed")
        assert failure("e").recover_with(lambda e: failure("still")) == Failure("still")
        assert success(7).recover_with(lambda e: success(0)) == Success(7)

    def test_or_else_value_and_callable(self):
        assert failure("e").or_else(success(1)) == Success(1)
        assert failure("e").or_else(lambda: success(2)) == Success(2)
        assert success(0).or_else(success(1)) == Success(0)


class TestCombine:
    """Tests for combining two results."""

    def test_both_success(self):
        assert success(2).combine(success(3), lambda a, b: a + b) == Success(5)

    def test_left_failure_collected(self):
        assert failure("a").combine(success(3), lambda a, b: a + b) == Failure(["a"])

    def test_right_failure_collected(self):
        assert success(2).combine(failure("b"), lambda a, b: a + b) == Failure(["b"])

    def test_both_failures_collected_in_order(self):
        assert failure("a").combine(failure("b"), lambda a, b: a + b) == Failure(["a", "b"])

    def test_error_mapper_reduces_two_errors(self):
        result = failure("a").combine(failure("b"), lambda x, y: x, lambda x, y: x + y)
        assert result == Failure("ab")

    def test_error_mapper_single_error(self):
        result = success(1).combine(failure("b"), lambda x, y: x, lambda x, y: x + y)
        assert result == Failure("b")


class TestSequence:
    """Tests for sequence and its variants."""

    def test_all_success(self):
        assert sequence([success(1), success(2), success(3)]) == Success([1, 2, 3])

    def test_collects_all_errors_in_order(self):
        results = [success(1), failure("x"), success(3), failure("y")]
        assert sequence(results) == Failure(["x", "y"])

    def test_empty(self):
        assert sequence([]) == Success([])

    def test_with_error_mapper(self):
        results = [failure("a"), success(1), failure("b")]
        assert sequence_with_error_mapper(results, lambda x, y: f"{x},{y}") == Failure("a,b")

    def test_sequence_or_constant_error(self):
        assert sequence_or([failure("a"), failure("b")], "bad") == Failure("bad")
        assert sequence_or([failure("a")], "bad") == Failure("bad")
        assert sequence_or([success(1)], "bad") == Success([1])


class TestAccessors:
    """Tests for accessors and side-effect helpers."""

    def test_unwrap(self):
        assert success(3).unwrap() == 3

    def test_unwrap_on_failure_raises(self):
        with pytest.raises(IllegalStateError):
            failure("e").unwrap()

    def test_unwrap_error(self):
        assert failure("e").unwrap_error() == "e"
        with pytest.raises(IllegalStateError):
            success(1).unwrap_error()

    def test_get_or_else(self):
        assert success(1).get_or_else(0) == 1
        assert failure("e").get_or_else(0) == 0
        assert failure("e").get_or_else_get(lambda: 9) == 9

    def test_get_or_raise(self):
        with pytest.raises(KeyError):
            failure("e").get_or_raise(lambda: KeyError("missing"))

    def test_if_success_and_if_failure(self):
        seen = []
        success(1).if_success(seen.append)
        failure("e").if_success(seen.append)
        failure("e").if_failure(seen.append)
        success(2).if_failure(seen.append)
        assert seen == [1, "e"]

    def test_if_success_or_else(self):
        seen = []
        failure("e").if_success_or_else(seen.append, lambda: seen.append("else"))
        success(1).if_success_or_else(seen.append, lambda: seen.append("else"))
        assert seen == ["else", 1]


class TestFactories:
    """Tests for of_nullable and failable."""

    def test_of_nullable(self):
        assert of_nullable(0, "none") == Success(0)
        assert of_nullable(None, "none") == Failure("none")

    def test_failable_success(self):
        assert failable(lambda: "ok", "failed") == Success("ok")

    def test_failable_exception(self):
        assert failable(lambda: int("x"), "failed") == Failure("failed")

    def test_failable_none(self):
        assert failable(lambda: None, "failed") == Failure("failed")
