"""Assert how many elements a collection, iterator or generator holds."""

from sizematch.asserts import assert_count, assert_not_count, assert_that
from sizematch.constraints import Constraint, LogicalNot, SizeMatcher
from sizematch.errors import ExpectationFailedError, IteratorRewindError, SizeMatchError
from sizematch.iterators import (
    ArrayIterator,
    GeneratorIterator,
    IteratorAggregate,
    NoRewindIterator,
    StatefulIterator,
)

__all__ = [
    "ArrayIterator",
    "Constraint",
    "ExpectationFailedError",
    "GeneratorIterator",
    "IteratorAggregate",
    "IteratorRewindError",
    "LogicalNot",
    "NoRewindIterator",
    "SizeMatchError",
    "SizeMatcher",
    "StatefulIterator",
    "assert_count",
    "assert_not_count",
    "assert_that",
]
