"""Iterator capabilities understood by the size matcher.

Python iterators are forward-only. The classes here add the richer protocol
some sources carry: a readable position (``key``), restart (``rewind``) and
explicit validity checks, plus aggregates that hand out another traversable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, Sequence, Sized
from typing import Any

from sizematch.errors import IteratorRewindError


class IteratorAggregate(ABC):
    """An object that produces its elements through another traversable."""

    @abstractmethod
    def get_iterator(self) -> Any:
        """Return the underlying iterator, iterable or aggregate."""
        ...


class StatefulIterator(ABC):
    """Iterator with an inspectable and restartable position."""

    @abstractmethod
    def current(self) -> Any:
        """Element at the current position, or None when invalid."""
        ...

    @abstractmethod
    def key(self) -> Any:
        """Key of the current position, or None when invalid."""
        ...

    @abstractmethod
    def next(self) -> None:
        """Move forward by one element."""
        ...

    @abstractmethod
    def rewind(self) -> None:
        """Go back to the first element."""
        ...

    @abstractmethod
    def valid(self) -> bool:
        """Whether the current position holds an element."""
        ...

    def __iter__(self) -> Iterator[Any]:
        self.rewind()
        while self.valid():
            yield self.current()
            self.next()


class ArrayIterator(StatefulIterator):
    """Restartable iterator over a sequence or mapping."""

    def __init__(self, data: Sequence[Any] | Mapping[Any, Any] = ()) -> None:
        if isinstance(data, Mapping):
            self._keys = list(data.keys())
            self._values = [data[k] for k in self._keys]
        else:
            self._keys = list(range(len(data)))
            self._values = list(data)
        self._position = 0

    def __len__(self) -> int:
        return len(self._values)

    def current(self) -> Any:
        return self._values[self._position] if self.valid() else None

    def key(self) -> Any:
        return self._keys[self._position] if self.valid() else None

    def next(self) -> None:
        self._position += 1

    def rewind(self) -> None:
        self._position = 0

    def valid(self) -> bool:
        return self._position < len(self._values)


class NoRewindIterator(StatefulIterator):
    """Wrapper that turns ``rewind`` on the inner iterator into a no-op."""

    def __init__(self, inner: StatefulIterator) -> None:
        self.inner = inner

    def current(self) -> Any:
        return self.inner.current()

    def key(self) -> Any:
        return self.inner.key()

    def next(self) -> None:
        self.inner.next()

    def rewind(self) -> None:
        pass

    def valid(self) -> bool:
        return self.inner.valid()


_UNSET = object()


class GeneratorIterator(StatefulIterator):
    """One-shot stateful view over a Python generator or iterator.

    The wrapped source is not touched until the first call that needs an
    element. Keys are positions counted from 0. Once the source is exhausted
    ``current()`` and ``key()`` return None.
    """

    def __init__(self, source: Iterable[Any]) -> None:
        self._source = iter(source)
        self._current: Any = _UNSET
        self._position = -1
        self._exhausted = False

    def _fetch(self) -> None:
        try:
            self._current = next(self._source)
        except StopIteration:
            self._current = None
            self._exhausted = True
        self._position += 1

    def _prime(self) -> None:
        if self._position < 0:
            self._fetch()

    def current(self) -> Any:
        self._prime()
        return None if self._exhausted else self._current

    def key(self) -> Any:
        self._prime()
        return None if self._exhausted else self._position

    def next(self) -> None:
        self._prime()
        if not self._exhausted:
            self._fetch()

    def rewind(self) -> None:
        self._prime()
        if self._position > 0:
            raise IteratorRewindError("Cannot rewind a generator that was already run")

    def valid(self) -> bool:
        self._prime()
        return not self._exhausted


def is_one_shot(iterator: StatefulIterator) -> bool:
    """Whether *iterator* is known to be impossible to restart."""
    return isinstance(iterator, (GeneratorIterator, NoRewindIterator))


def is_countable(value: Any) -> bool:
    """Whether *value* exposes any capability the size matcher can use."""
    return isinstance(value, (Sized, Iterable, IteratorAggregate, StatefulIterator))
