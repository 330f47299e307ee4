"""Declarative size checks returning results instead of raising."""

from sizematch.assertions.base import AssertionResult
from sizematch.assertions.deterministic import evaluate_assertion, evaluate_assertions

__all__ = ["AssertionResult", "evaluate_assertion", "evaluate_assertions"]
