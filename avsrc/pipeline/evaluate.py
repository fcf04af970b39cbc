"""Evaluate a trained model against a labeled record file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from avsrc.io import (
    ensure_directory,
    load_cost_matrix,
    load_discretizer_config,
    load_labeled_sequences,
    load_paths_config,
    load_scoring_policy,
    open_prediction_log,
)
from avsrc.models import (
    CostMatrix,
    DiscretizerConfig,
    EvaluationSummary,
    ScoringPolicy,
    TrainedModel,
    evaluate,
)
from avsrc.util import get_logger

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """Evaluation totals plus the files written along the way."""

    summary: EvaluationSummary
    predictions_log: Path
    metrics_path: Optional[Path] = None


def _write_metrics(summary: EvaluationSummary, *, source: Path, output_dir: Path) -> Path:
    payload = {
        "source": str(source),
        "total_cost": summary.total_cost,
        "correct": summary.correct_count,
        "total": summary.total_count,
        "accuracy": round(summary.accuracy, 2),
    }
    output_path = ensure_directory(Path(output_dir)) / "evaluation_metrics.json"
    output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return output_path


def evaluate_model(
    model: TrainedModel,
    eval_path: Optional[Path] = None,
    *,
    predictions_log: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    discretizer: Optional[DiscretizerConfig] = None,
    policy: Optional[ScoringPolicy] = None,
    costs: Optional[CostMatrix] = None,
) -> EvaluationResult:
    """Classify every record in ``eval_path`` and aggregate cost and accuracy.

    All records are parsed before any prediction is made, so a malformed
    line fails the run without writing a partial log.
    """

    if eval_path is None or predictions_log is None:
        paths = load_paths_config()
        eval_path = eval_path or paths.eval
        predictions_log = predictions_log or paths.predictions_log
    source = Path(eval_path)
    log_path = Path(predictions_log)

    sequences = load_labeled_sequences(source, discretizer or load_discretizer_config())

    with open_prediction_log(log_path) as log_prediction:
        summary = evaluate(
            model,
            sequences,
            policy=policy or load_scoring_policy(),
            costs=costs or load_cost_matrix(),
            on_prediction=log_prediction,
        )
    _LOGGER.info("Predictions log saved to %s", log_path)
    _LOGGER.info(
        "Evaluated %d records: cost=%d correct=%d accuracy=%.2f%%",
        summary.total_count,
        summary.total_cost,
        summary.correct_count,
        summary.accuracy,
    )

    metrics_path = None
    if output_dir is not None:
        metrics_path = _write_metrics(summary, source=source, output_dir=output_dir)
        _LOGGER.info("Wrote evaluation metrics to %s", metrics_path)

    return EvaluationResult(
        summary=summary,
        predictions_log=log_path,
        metrics_path=metrics_path,
    )


__all__ = ["EvaluationResult", "evaluate_model"]
