from __future__ import annotations

import numpy as np

from avsrc.io import (
    format_summary,
    format_transition_matrices,
    format_transition_matrix,
    transition_matrix,
)
from avsrc.models import EvaluationSummary, Label, Symbol, estimate

A, B, C = Symbol.LOW, Symbol.MID, Symbol.HIGH
G, H = Label.DANGEROUS, Label.HARMLESS


def _model():
    return estimate([(G, (A, B, C)), (G, (A, C)), (H, (C, C, A, A))])


def test_transition_matrix_rows_sum_to_one_and_fill_unseen_with_zero():
    frame = transition_matrix(_model(), G)

    assert list(frame.index) == ["A", "B", "C"]
    assert list(frame.columns) == ["A", "B", "C"]
    assert frame.loc["A", "B"] == 0.5
    assert frame.loc["A", "C"] == 0.5
    assert frame.loc["A", "A"] == 0.0
    # C never appears as a source under G.
    np.testing.assert_allclose(frame.loc[["A", "B"]].sum(axis=1).values, [1.0, 1.0])
    assert frame.loc["C"].sum() == 0.0


def test_format_transition_matrix():
    text = format_transition_matrix(_model(), H)

    assert text.splitlines() == [
        "Transition Matrix for Label: H",
        "\tA\tC",
        "A\t1.00\t0.00",
        "C\t0.50\t0.50",
    ]


def test_format_transition_matrices_covers_every_label():
    text = format_transition_matrices(_model())
    assert "Transition Matrix for Label: G" in text
    assert "Transition Matrix for Label: H" in text


def test_format_summary():
    text = format_summary(EvaluationSummary(total_cost=6, correct_count=1, total_count=2))
    assert text.splitlines() == [
        "Total Cost: 6",
        "Predicted correctly 1 times out of 2 times.",
        "Accuracy: 50.00%",
    ]
