"""Deterministic size checks (count, not_count)."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from sizematch.assertions.base import AssertionResult
from sizematch.constraints import LogicalNot, SizeMatcher


def _size_label(matcher: SizeMatcher, value: Any) -> str:
    size = matcher.size_of(value)
    return "size unavailable" if size is None else f"size {size}"


def check_count(
    value: Any,
    expected: int,
    logger: logging.Logger,
    cache: dict[int, tuple[Any, int]] | None = None,
) -> AssertionResult:
    """Check that a value holds exactly ``expected`` elements."""
    logger.info(f"Checking count: {type(value).__name__} against {expected}")

    matcher = SizeMatcher(expected, logger=logger, cache=cache)
    passed = matcher.evaluate(value, return_result=True)
    logger.info(f"Count of {type(value).__name__} passed={passed}")

    return AssertionResult(
        name=f"count:{expected}",
        passed=passed,
        message=_size_label(matcher, value) if passed else matcher.describe(value),
        score=1.0 if passed else 0.0,
    )


def check_not_count(
    value: Any,
    expected: int,
    logger: logging.Logger,
    cache: dict[int, tuple[Any, int]] | None = None,
) -> AssertionResult:
    """Check that a value does not hold exactly ``expected`` elements."""
    logger.info(f"Checking not_count: {type(value).__name__} against {expected}")

    matcher = SizeMatcher(expected, logger=logger, cache=cache)
    constraint = LogicalNot(matcher)
    passed = constraint.evaluate(value, return_result=True)
    logger.info(f"Not-count of {type(value).__name__} passed={passed}")

    return AssertionResult(
        name=f"not_count:{expected}",
        passed=passed,
        message=_size_label(matcher, value) if passed else constraint.describe(value),
        score=1.0 if passed else 0.0,
    )


def evaluate_assertion(
    value: Any,
    assertion_dict: dict[str, Any] | BaseModel,
    *,
    logger: logging.Logger | None = None,
    cache: dict[int, tuple[Any, int]] | None = None,
) -> AssertionResult:
    """Dispatch an assertion dict to the appropriate checker.

    Supported formats:
        {"count": 3}
        {"not_count": 0}

    Both types support an optional ``weight`` field (default 1.0) that
    controls relative importance in weighted grade computation.

    Checks given the same ``cache`` dict share counts of one-shot sources.

    Raises ValueError for empty dicts and unknown assertion types.
    """
    if not assertion_dict:
        raise ValueError("Empty assertion dict")

    if isinstance(assertion_dict, BaseModel):
        assertion_dict = assertion_dict.model_dump()

    if logger is None:
        logger = logging.getLogger(__name__)

    weight = assertion_dict.get("weight", 1.0)

    atype = next((k for k in assertion_dict if k != "weight"), None)
    if atype is None:
        raise ValueError("Assertion dict has no assertion type")
    expected = assertion_dict[atype]

    if atype == "count":
        result = check_count(value, expected, logger=logger, cache=cache)
    elif atype == "not_count":
        result = check_not_count(value, expected, logger=logger, cache=cache)
    else:
        raise ValueError(f"Unknown assertion type: '{atype}'")

    result.weight = weight
    return result


def evaluate_assertions(
    value: Any,
    assertions: list[dict[str, Any] | BaseModel],
    *,
    logger: logging.Logger | None = None,
) -> list[AssertionResult]:
    # Shared so a one-shot source keeps the size the first check counted
    cache: dict[int, tuple[Any, int]] = {}
    return [evaluate_assertion(value, a, logger=logger, cache=cache) for a in assertions]
