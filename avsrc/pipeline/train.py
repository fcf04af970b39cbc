"""Train per-label Markov chains from a record file and persist diagnostics."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from avsrc.io import (
    ensure_directory,
    load_discretizer_config,
    load_labeled_sequences,
    load_paths_config,
    transition_matrix,
)
from avsrc.models import DiscretizerConfig, TrainedModel, estimate
from avsrc.util import get_logger

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class TrainingArtifacts:
    model: TrainedModel
    record_count: int
    diagnostics_path: Optional[Path] = None


def _write_diagnostics(
    model: TrainedModel,
    *,
    source: Path,
    record_count: int,
    diagnostics_dir: Path,
) -> Path:
    payload = {
        "source": str(source),
        "records": record_count,
        **model.as_dict(),
        "transition_matrices": {
            label.value: transition_matrix(model, label).round(6).to_dict(orient="index")
            for label in model.labels
        },
    }

    path = ensure_directory(Path(diagnostics_dir)) / "training_report.json"
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
    return path


def train_model(
    train_path: Optional[Path] = None,
    *,
    discretizer: Optional[DiscretizerConfig] = None,
    diagnostics_dir: Optional[Path] = None,
) -> TrainingArtifacts:
    """Read ``train_path``, discretize every record and estimate the model.

    ``MalformedInputError`` and ``InvalidTrainingDataError`` propagate to
    the caller; a partially parsed corpus is never used.
    """

    source = Path(train_path or load_paths_config().train)
    config = discretizer or load_discretizer_config()

    sequences = load_labeled_sequences(source, config)
    model = estimate(sequences)
    for label, count in model.sequence_counts.items():
        _LOGGER.info("Label %s: %d training sequences", label.value, count)

    diagnostics_path = None
    if diagnostics_dir is not None:
        diagnostics_path = _write_diagnostics(
            model,
            source=source,
            record_count=len(sequences),
            diagnostics_dir=diagnostics_dir,
        )
        _LOGGER.info("Wrote training diagnostics to %s", diagnostics_path)

    _LOGGER.info("Trained Markov chains from %d records in %s", len(sequences), source)
    return TrainingArtifacts(
        model=model,
        record_count=len(sequences),
        diagnostics_path=diagnostics_path,
    )


__all__ = ["TrainingArtifacts", "train_model"]
