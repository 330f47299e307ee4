"""Base class for constraints evaluated by assertions."""

from __future__ import annotations

import reprlib
from abc import ABC, abstractmethod
from typing import Any

from sizematch.errors import ExpectationFailedError

_repr = reprlib.Repr()
_repr.maxstring = 80
_repr.maxother = 80


def export(value: Any) -> str:
    """Short printable form of *value* for failure messages."""
    return _repr.repr(value)


class Constraint(ABC):
    @abstractmethod
    def matches(self, other: Any) -> bool:
        """Whether *other* satisfies the constraint."""
        ...

    @abstractmethod
    def to_string(self) -> str:
        """Describe the constraint, e.g. ``"count matches 3"``."""
        ...

    def describe(self, other: Any) -> str:
        """Second half of the failure sentence starting "Failed asserting that"."""
        return f"{export(other)} {self.to_string()}"

    def additional_failure_description(self, other: Any) -> str:
        return ""

    def evaluate(self, other: Any, description: str = "", return_result: bool = False) -> bool:
        """Evaluate the constraint against *other*.

        With ``return_result`` the outcome is returned. Otherwise a failed
        match raises ExpectationFailedError and a successful one returns True.
        """
        success = self.matches(other)

        if return_result:
            return success

        if not success:
            self.fail(other, description)

        return True

    def fail(self, other: Any, description: str = "") -> None:
        message = f"Failed asserting that {self.describe(other)}."

        additional = self.additional_failure_description(other)
        if additional:
            message = f"{message}\n{additional}"

        if description:
            message = f"{description}\n{message}"

        raise ExpectationFailedError(message)

    def __str__(self) -> str:
        return self.to_string()
