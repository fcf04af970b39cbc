"""Human-readable transition matrices and evaluation summaries."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
import pandas as pd

from avsrc.models import EvaluationSummary, Label, TrainedModel


def transition_matrix(model: TrainedModel, label: Label) -> pd.DataFrame:
    """Return the transition probabilities of ``label`` as a square frame.

    Rows and columns cover every symbol observed in the label's transition
    table, sorted; unseen pairs are ``0.0``.
    """

    symbols = [symbol.value for symbol in model.observed_symbols(label)]
    position = {symbol: index for index, symbol in enumerate(symbols)}
    values = np.zeros((len(symbols), len(symbols)))
    for source, row in model.transition_rows(label).items():
        for destination, probability in row.items():
            values[position[source.value], position[destination.value]] = probability

    frame = pd.DataFrame(values, index=symbols, columns=symbols)
    frame.index.name = "from"
    frame.columns.name = "to"
    return frame


def format_transition_matrix(model: TrainedModel, label: Label) -> str:
    frame = transition_matrix(model, label)
    lines = [f"Transition Matrix for Label: {label.value}"]
    lines.append("\t" + "\t".join(frame.columns))
    for source, row in frame.iterrows():
        lines.append(source + "\t" + "\t".join(f"{value:.2f}" for value in row))
    return "\n".join(lines)


def format_transition_matrices(
    model: TrainedModel,
    labels: Optional[Iterable[Label]] = None,
) -> str:
    """Render one matrix block per label separated by blank lines."""

    selected = labels if labels is not None else model.labels
    return "\n\n".join(format_transition_matrix(model, label) for label in selected)


def format_summary(summary: EvaluationSummary) -> str:
    return "\n".join(
        [
            f"Total Cost: {summary.total_cost}",
            f"Predicted correctly {summary.correct_count} times out of "
            f"{summary.total_count} times.",
            f"Accuracy: {summary.accuracy:.2f}%",
        ]
    )


__all__ = [
    "format_summary",
    "format_transition_matrices",
    "format_transition_matrix",
    "transition_matrix",
]
