"""Two-class maximum-likelihood decision rule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .markov_chain import TrainedModel
from .scorer import DEFAULT_POLICY, ScoringPolicy, score
from .types import Label, Symbol


@dataclass(frozen=True)
class Classification:
    label: Label
    score_dangerous: float
    score_harmless: float


def classify_with_scores(
    model: TrainedModel,
    sequence: Sequence[Symbol],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> Classification:
    """Score ``sequence`` under both labels and pick the more likely one.

    Dangerous wins only on a strictly greater score; ties go to harmless.
    """

    symbols = tuple(sequence)
    dangerous = score(model, Label.DANGEROUS, symbols, policy)
    harmless = score(model, Label.HARMLESS, symbols, policy)
    label = Label.DANGEROUS if dangerous > harmless else Label.HARMLESS
    return Classification(label=label, score_dangerous=dangerous, score_harmless=harmless)


def classify(
    model: TrainedModel,
    sequence: Sequence[Symbol],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> Label:
    return classify_with_scores(model, sequence, policy).label


__all__ = ["Classification", "classify", "classify_with_scores"]
