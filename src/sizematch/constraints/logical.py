"""Negation of another constraint."""

from __future__ import annotations

import re
from typing import Any

from sizematch.constraints.base import Constraint, export

_NEGATIONS = [
    ("count matches ", "count does not match "),
    ("matches ", "does not match "),
    ("contains ", "does not contain "),
    ("has ", "does not have "),
    ("is ", "is not "),
]

_PATTERN = re.compile(r"\b(" + "|".join(re.escape(p) for p, _ in _NEGATIONS) + ")")
_REPLACEMENTS = dict(_NEGATIONS)


def negate(text: str) -> str:
    """Rewrite the verb phrases of a constraint description into their negated form."""
    return _PATTERN.sub(lambda m: _REPLACEMENTS[m.group(1)], text)


class LogicalNot(Constraint):
    def __init__(self, constraint: Constraint) -> None:
        self.constraint = constraint

    def matches(self, other: Any) -> bool:
        return not self.constraint.matches(other)

    def to_string(self) -> str:
        return negate(self.constraint.to_string())

    def describe(self, other: Any) -> str:
        # Only the constraint text is negated, never the exported value
        if type(self.constraint).describe is Constraint.describe:
            return f"{export(other)} {self.to_string()}"
        return negate(self.constraint.describe(other))
