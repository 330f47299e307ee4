"""Base data structures for declarative size checks."""

from dataclasses import dataclass


@dataclass
class AssertionResult:
    """Result of evaluating a single size check.

    Attributes:
        name: Identifier for the check (e.g. "count:3").
        passed: Whether the check held.
        message: Human-readable detail about the result.
        score: Grade contribution, 1.0 (pass) or 0.0 (fail).
        weight: Relative importance of this check for weighted grade
            computation. Defaults to 1.0 (equal weight).
    """

    name: str
    passed: bool
    message: str
    score: float = 0.0
    weight: float = 1.0
