"""Training, evaluation and end-to-end pipeline entry points."""

from .evaluate import EvaluationResult, evaluate_model
from .run_all import run_pipeline
from .train import TrainingArtifacts, train_model

__all__ = [
    "EvaluationResult",
    "TrainingArtifacts",
    "evaluate_model",
    "run_pipeline",
    "train_model",
]
