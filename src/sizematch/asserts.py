"""Assertion helpers that raise on failure."""

from __future__ import annotations

from typing import Any

from sizematch.constraints import Constraint, LogicalNot, SizeMatcher
from sizematch.iterators import is_countable


def assert_that(value: Any, constraint: Constraint, message: str = "") -> None:
    constraint.evaluate(value, message)


def assert_count(expected: int, haystack: Any, message: str = "") -> None:
    """Assert that *haystack* holds exactly *expected* elements."""
    if not is_countable(haystack):
        raise TypeError("Argument #2 of assert_count() must be countable or iterable")

    assert_that(haystack, SizeMatcher(expected), message)


def assert_not_count(expected: int, haystack: Any, message: str = "") -> None:
    """Assert that *haystack* does not hold exactly *expected* elements."""
    if not is_countable(haystack):
        raise TypeError("Argument #2 of assert_not_count() must be countable or iterable")

    assert_that(haystack, LogicalNot(SizeMatcher(expected)), message)
