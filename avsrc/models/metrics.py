"""Cost-sensitive evaluation of classifier predictions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Sequence, Tuple

from avsrc.errors import ConfigurationError

from .classifier import classify_with_scores
from .markov_chain import TrainedModel
from .scorer import DEFAULT_POLICY, ScoringPolicy
from .types import Label, Symbol


@dataclass(frozen=True)
class CostMatrix:
    """Cost charged per ``(predicted, actual)`` outcome.

    ``true_positive`` is predicted dangerous / actually dangerous,
    ``false_positive`` predicted dangerous / actually harmless,
    ``false_negative`` predicted harmless / actually dangerous. A true
    negative is free unless configured otherwise.
    """

    true_positive: int = 2
    false_positive: int = 4
    false_negative: int = 8
    true_negative: int = 0

    def __post_init__(self) -> None:
        for name in ("true_positive", "false_positive", "false_negative", "true_negative"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"cost {name} must be non-negative")

    def cost(self, predicted: Label, actual: Label) -> int:
        if predicted == Label.DANGEROUS:
            if actual == Label.DANGEROUS:
                return self.true_positive
            return self.false_positive
        if actual == Label.DANGEROUS:
            return self.false_negative
        return self.true_negative


DEFAULT_COSTS = CostMatrix()


@dataclass(frozen=True)
class PredictionRecord:
    """Audit entry for one evaluated sequence."""

    actual: Label
    predicted: Label
    score_dangerous: float
    score_harmless: float

    @property
    def correct(self) -> bool:
        return self.actual == self.predicted


@dataclass(frozen=True)
class EvaluationSummary:
    """Aggregate cost and accuracy counters; unpacks as a 3-tuple."""

    total_cost: int
    correct_count: int
    total_count: int

    @property
    def accuracy(self) -> float:
        """Percentage of correct predictions, ``0.0`` for an empty evaluation set."""

        return _safe_divide(self.correct_count, self.total_count) * 100.0

    def __iter__(self) -> Iterator[int]:
        return iter((self.total_cost, self.correct_count, self.total_count))


def _safe_divide(numerator: float, denominator: float) -> float:
    """Return ``numerator / denominator`` guarding against zero denominators."""

    if denominator == 0:
        return 0.0
    return numerator / denominator


def evaluate(
    model: TrainedModel,
    eval_set: Iterable[Tuple[Label, Sequence[Symbol]]],
    *,
    policy: ScoringPolicy = DEFAULT_POLICY,
    costs: CostMatrix = DEFAULT_COSTS,
    on_prediction: Optional[Callable[[PredictionRecord], None]] = None,
) -> EvaluationSummary:
    """Classify each ``(actual, sequence)`` pair and aggregate the outcome.

    ``on_prediction`` receives one :class:`PredictionRecord` per sequence and
    has no influence on the returned totals.
    """

    total_cost = 0
    correct = 0
    total = 0

    for actual, sequence in eval_set:
        outcome = classify_with_scores(model, sequence, policy)
        record = PredictionRecord(
            actual=actual,
            predicted=outcome.label,
            score_dangerous=outcome.score_dangerous,
            score_harmless=outcome.score_harmless,
        )
        if on_prediction is not None:
            on_prediction(record)

        if record.correct:
            correct += 1
        total += 1
        total_cost += costs.cost(record.predicted, actual)

    return EvaluationSummary(total_cost=total_cost, correct_count=correct, total_count=total)


__all__ = [
    "DEFAULT_COSTS",
    "CostMatrix",
    "EvaluationSummary",
    "PredictionRecord",
    "evaluate",
]
