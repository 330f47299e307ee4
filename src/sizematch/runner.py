from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from sizematch.assertions.base import AssertionResult
from sizematch.assertions.deterministic import evaluate_assertions
from sizematch.config import CheckConfig
from sizematch.verbose import logger_for_config


@dataclass
class CheckRun:
    assertions: list[dict[str, Any]]
    metrics: dict[str, Any]
    all_passed: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def summarize(results: list[AssertionResult]) -> dict[str, Any]:
    """Collect pass counts and the weighted score for a list of check results."""
    passed = sum(1 for r in results if r.passed)
    failed = len(results) - passed
    pass_rate = (passed / len(results) * 100) if results else 0.0

    # Weighted score: sum(weight_i * score_i) / sum(weight_i) * 100
    total_weight = sum(r.weight for r in results)
    if total_weight > 0:
        weighted_score = sum(r.weight * r.score for r in results) / total_weight * 100
    else:
        weighted_score = 0.0

    return {
        "assertion_pass_count": passed,
        "assertion_fail_count": failed,
        "assertion_pass_rate": round(pass_rate, 2),
        "weighted_score": round(weighted_score, 2),
        "all_passed": failed == 0,
    }


def run_checks(
    value: Any,
    config: CheckConfig,
    logger: logging.Logger | None = None,
) -> CheckRun:
    """Evaluate every assertion in *config* against *value*."""
    if logger is None:
        logger = logger_for_config(config)

    logger.debug(f"Running {len(config.assertions)} size checks")
    results = evaluate_assertions(value, config.assertions, logger=logger)
    metrics = summarize(results)
    logger.debug(f"Size checks finished: weighted_score={metrics['weighted_score']}")

    return CheckRun(
        assertions=[asdict(r) for r in results],
        metrics=metrics,
        all_passed=metrics["all_passed"],
    )
