"""Constraint that checks how many elements a value holds."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sized
from typing import Any

from sizematch.constraints.base import Constraint
from sizematch.iterators import IteratorAggregate, StatefulIterator, is_one_shot


def _same_key(a: Any, b: Any) -> bool:
    return type(a) is type(b) and a == b


class SizeMatcher(Constraint):
    """Matches values holding exactly ``expected`` elements.

    Sized values are measured with ``len()``. Anything else that can be
    traversed is counted by walking it. Restartable iterators are put back at
    the key they held before counting. Sources that cannot restart are counted
    once and the result is remembered per object identity, so evaluating the
    same exhausted source again still reports its original size.

    Matchers built for several checks on the same value can share one
    ``cache`` dict so a one-shot source is only ever counted once.
    """

    def __init__(
        self,
        expected: int,
        logger: logging.Logger | None = None,
        cache: dict[int, tuple[Any, int]] | None = None,
    ) -> None:
        if isinstance(expected, bool) or not isinstance(expected, int):
            raise TypeError(f"expected count must be an int, got {type(expected).__name__}")
        self.expected = expected
        self.logger = logger or logging.getLogger(__name__)
        # id(source) -> (source, count); the source is held so its id stays unique
        self._resolved: dict[int, tuple[Any, int]] = {} if cache is None else cache

    def to_string(self) -> str:
        return f"count matches {self.expected}"

    def matches(self, other: Any) -> bool:
        return self.size_of(other) == self.expected

    def describe(self, other: Any) -> str:
        size = self.size_of(other)
        actual = "unavailable" if size is None else str(size)
        return f"actual size {actual} matches expected size {self.expected}"

    def size_of(self, other: Any) -> int | None:
        """Number of elements in *other*, or None if it cannot be sized."""
        if isinstance(other, Sized):
            return len(other)

        if isinstance(other, (IteratorAggregate, StatefulIterator, Iterable)):
            return self._size_of_traversable(other)

        self.logger.debug(f"No size available for {type(other).__name__}")
        return None

    def _size_of_traversable(self, traversable: Any) -> int:
        while isinstance(traversable, IteratorAggregate):
            traversable = traversable.get_iterator()

        cached = self._resolved.get(id(traversable))
        if cached is not None:
            self.logger.debug(f"Using cached size {cached[1]} for {type(traversable).__name__}")
            return cached[1]

        if isinstance(traversable, Sized):
            return len(traversable)

        if isinstance(traversable, StatefulIterator):
            return self._count_preserving_position(traversable)

        count = sum(1 for _ in traversable)
        self._remember(traversable, count)
        return count

    def _count_preserving_position(self, iterator: StatefulIterator) -> int:
        key = iterator.key()
        rewindable = self._try_rewind(iterator)

        count = 0
        while iterator.valid():
            count += 1
            iterator.next()

        if rewindable:
            self._move_to_key(iterator, key)
        else:
            self._remember(iterator, count)

        return count

    def _try_rewind(self, iterator: StatefulIterator) -> bool:
        if is_one_shot(iterator):
            self.logger.debug(f"Not rewinding one-shot {type(iterator).__name__}")
            return False

        try:
            iterator.rewind()
        except Exception as e:
            self.logger.debug(f"Rewind of {type(iterator).__name__} failed: {e}")
            return False

        return True

    @staticmethod
    def _move_to_key(iterator: StatefulIterator, key: Any) -> None:
        iterator.rewind()

        # 0, 0.0 and False compare equal but are different keys
        while iterator.valid() and not _same_key(iterator.key(), key):
            iterator.next()

    def _remember(self, traversable: Any, count: int) -> None:
        self.logger.debug(f"Caching size {count} for {type(traversable).__name__}")
        self._resolved[id(traversable)] = (traversable, count)
