"""Train on one record file, evaluate on another and report cost and accuracy."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from avsrc.errors import ConfigurationError, InvalidTrainingDataError, MalformedInputError
from avsrc.io import (
    format_summary,
    format_transition_matrices,
    load_cost_matrix,
    load_discretizer_config,
    load_paths_config,
    load_scoring_policy,
    load_settings_config,
)
from avsrc.util import get_logger

from .evaluate import EvaluationResult, evaluate_model
from .train import train_model

_LOGGER = get_logger(__name__)


def run_pipeline(
    train_path: Optional[Path] = None,
    eval_path: Optional[Path] = None,
    *,
    predictions_log: Optional[Path] = None,
    diagnostics_dir: Optional[Path] = None,
    show_matrices: bool = True,
    stream: Optional[TextIO] = None,
) -> EvaluationResult:
    """Run training and evaluation end to end using ``settings.yaml`` policy."""

    out = stream or sys.stdout
    settings = load_settings_config()
    paths = load_paths_config(settings)
    discretizer = load_discretizer_config(settings)

    _LOGGER.info("Training Markov chains")
    artifacts = train_model(
        train_path or paths.train,
        discretizer=discretizer,
        diagnostics_dir=diagnostics_dir,
    )
    if show_matrices:
        print(format_transition_matrices(artifacts.model), file=out)
        print(file=out)

    _LOGGER.info("Evaluating model")
    result = evaluate_model(
        artifacts.model,
        eval_path or paths.eval,
        predictions_log=predictions_log or paths.predictions_log,
        output_dir=diagnostics_dir,
        discretizer=discretizer,
        policy=load_scoring_policy(settings),
        costs=load_cost_matrix(settings),
    )
    print(format_summary(result.summary), file=out)
    return result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Classify sensor sequences as dangerous (G) or harmless (H)"
    )
    parser.add_argument("--train", type=Path, help="training record file")
    parser.add_argument("--eval", type=Path, help="evaluation record file")
    parser.add_argument("--predictions-log", type=Path, help="per-record prediction log")
    parser.add_argument(
        "--diagnostics-dir",
        type=Path,
        help="write training_report.json and evaluation_metrics.json here",
    )
    parser.add_argument(
        "--quiet-matrices",
        action="store_true",
        help="do not print the transition matrices",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        run_pipeline(
            args.train,
            args.eval,
            predictions_log=args.predictions_log,
            diagnostics_dir=args.diagnostics_dir,
            show_matrices=not args.quiet_matrices,
        )
    except (
        ConfigurationError,
        FileNotFoundError,
        InvalidTrainingDataError,
        MalformedInputError,
    ) as error:
        _LOGGER.error("Run failed: %s", error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
