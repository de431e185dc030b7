from __future__ import annotations

from typing import Optional, Sequence

from decidemodel.config.settings import DEFAULT_CONFIG, ModelConfig
from decidemodel.models.signals import Answers, EvaluationResult
from decidemodel.models.types import Decision

SUM_DIGITS = 9


def weighted_sum(answers: Sequence[int], weights: Sequence[float]) -> float:
    if len(answers) != len(weights):
        raise ValueError(f"got {len(answers)} answers for {len(weights)} weights")
    # No range check: out-of-scale answers are evaluated as plain integers.
    # Rounded so an exact threshold total (e.g. 3.0) is not nudged across it.
    return round(sum(a * w for a, w in zip(answers, weights)), SUM_DIGITS)


def classify(total: float, config: ModelConfig = DEFAULT_CONFIG) -> Decision:
    t = config.thresholds
    if total > t.yes_above:
        return Decision.YES
    if total > t.confused_above:
        return Decision.CONFUSED
    return Decision.NO


def probabilistic_decision(
    q1: int,
    q2: int,
    q3: int,
    q4: int,
    q5: int,
    config: Optional[ModelConfig] = None,
) -> Decision:
    cfg = config or DEFAULT_CONFIG
    return classify(weighted_sum([q1, q2, q3, q4, q5], cfg.weights), cfg)


def evaluate(answers: Answers, config: Optional[ModelConfig] = None) -> EvaluationResult:
    cfg = config or DEFAULT_CONFIG
    total = weighted_sum(answers.as_list(), cfg.weights)
    return EvaluationResult(
        answers=answers,
        weighted_sum=total,
        decision=classify(total, cfg),
    )
