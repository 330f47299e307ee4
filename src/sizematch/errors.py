"""Exception types raised by sizematch."""

from __future__ import annotations


class SizeMatchError(Exception):
    """Base class for sizematch errors."""


class ExpectationFailedError(SizeMatchError, AssertionError):
    """Raised when a constraint is evaluated and not met."""


class IteratorRewindError(SizeMatchError, RuntimeError):
    """Raised by one-shot iterators that cannot go back to the start."""
