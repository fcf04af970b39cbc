"""Markov chain estimation, scoring and cost evaluation."""

from .classifier import Classification, classify, classify_with_scores
from .discretizer import DEFAULT_DISCRETIZER, DiscretizerConfig, discretize, discretize_sequence
from .markov_chain import LabeledSequence, TrainedModel, TransitionKey, estimate
from .metrics import DEFAULT_COSTS, CostMatrix, EvaluationSummary, PredictionRecord, evaluate
from .scorer import DEFAULT_POLICY, ScoringPolicy, score
from .types import Label, Symbol, SymbolSequence

__all__ = [
    "Classification",
    "CostMatrix",
    "DEFAULT_COSTS",
    "DEFAULT_DISCRETIZER",
    "DEFAULT_POLICY",
    "DiscretizerConfig",
    "EvaluationSummary",
    "Label",
    "LabeledSequence",
    "PredictionRecord",
    "ScoringPolicy",
    "Symbol",
    "SymbolSequence",
    "TrainedModel",
    "TransitionKey",
    "classify",
    "classify_with_scores",
    "discretize",
    "discretize_sequence",
    "estimate",
    "evaluate",
    "score",
]
