"""
Value comparison used by every ledger assertion.

Absent values (``None``) compare by absence, values of different runtime types never
compare equal, text and numbers compare by value and everything else compares by
identity. Identity comparison is what catches a spy that was handed a copy of an
object instead of the object itself.
"""
from __future__ import annotations

import numbers
from enum import Enum
from functools import singledispatch
from typing import Any

from spykit.core.exceptions import exception_constants as msg
from spykit.core.exceptions.base import AssertionFailure, TypeMismatchError


class ComparisonStrategy(str, Enum):
    ABSENT = "absent"
    VALUE = "value"
    IDENTITY = "identity"


@singledispatch
def strategy_for(value: Any) -> ComparisonStrategy:
    return ComparisonStrategy.IDENTITY


@strategy_for.register(type(None))
def _(value: None) -> ComparisonStrategy:
    return ComparisonStrategy.ABSENT


@strategy_for.register(str)
@strategy_for.register(bytes)
@strategy_for.register(numbers.Number)
def _(value: Any) -> ComparisonStrategy:
    return ComparisonStrategy.VALUE


def register_value_type(cls: type) -> type:
    """Opt ``cls`` into comparison by value. Usable as a class decorator."""
    strategy_for.register(cls, lambda value: ComparisonStrategy.VALUE)
    return cls


def _raise_when_different_types(expected: Any, actual: Any) -> None:
    if type(expected) is not type(actual):
        raise TypeMismatchError(
            msg.TYPE_MISMATCH.format(
                EXPECTED=type(expected).__name__, ACTUAL=type(actual).__name__
            ),
            expected_type=type(expected),
            actual_type=type(actual),
        )


def _not_equal(expected: Any, actual: Any) -> AssertionFailure:
    return AssertionFailure(
        msg.VALUES_NOT_EQUAL.format(EXPECTED=expected, ACTUAL=actual),
        expected=expected,
        actual=actual,
    )


def assert_values_equal(expected: Any, actual: Any) -> None:
    if expected is None or actual is None:
        if expected is not actual:
            raise _not_equal(expected, actual)
        return

    _raise_when_different_types(expected, actual)

    if strategy_for(expected) is ComparisonStrategy.VALUE:
        if expected != actual:
            raise _not_equal(expected, actual)
    elif expected is not actual:
        raise AssertionFailure(
            msg.VALUES_NOT_SAME.format(EXPECTED=expected, ACTUAL=actual),
            expected=expected,
            actual=actual,
        )


def assert_values_equal_as_equal(expected: Any, actual: Any) -> None:
    """Like :func:`assert_values_equal` but uses ``==`` for every type, never identity."""
    if expected is None or actual is None:
        if expected is not actual:
            raise _not_equal(expected, actual)
        return

    _raise_when_different_types(expected, actual)
    if expected != actual:
        raise _not_equal(expected, actual)
