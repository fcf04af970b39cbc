from __future__ import annotations

import pytest

from avsrc.errors import ConfigurationError
from avsrc.models import CostMatrix, EvaluationSummary, Label, Symbol, estimate, evaluate

A, B, C = Symbol.LOW, Symbol.MID, Symbol.HIGH
G, H = Label.DANGEROUS, Label.HARMLESS


@pytest.fixture
def model():
    return estimate([(G, (A, B, C)), (H, (C, C, A, A))])


@pytest.mark.parametrize(
    "predicted,actual,expected",
    [
        (G, G, 2),
        (G, H, 4),
        (H, G, 8),
        (H, H, 0),
    ],
)
def test_cost_matrix_defaults(predicted, actual, expected):
    assert CostMatrix().cost(predicted, actual) == expected


def test_cost_matrix_rejects_negative_costs():
    with pytest.raises(ConfigurationError):
        CostMatrix(false_negative=-1)


def test_evaluate_reference_scenario(model):
    summary = evaluate(model, [(G, (A, B, C)), (H, (A, B, C))])

    total_cost, correct, total = summary
    assert total_cost == 6
    assert correct == 1
    assert total == 2
    assert f"{summary.accuracy:.2f}" == "50.00"


def test_true_negative_is_free(model):
    summary = evaluate(model, [(H, (C, C, A, A))])
    assert summary == EvaluationSummary(total_cost=0, correct_count=1, total_count=1)


def test_missed_dangerous_sequence_costs_most(model):
    summary = evaluate(model, [(G, (C, C, A, A))])
    assert tuple(summary) == (8, 0, 1)


def test_evaluate_is_idempotent(model):
    eval_set = [(G, (A, B, C)), (H, (A, B, C)), (H, (C, C, A)), (G, (B,))]

    assert tuple(evaluate(model, eval_set)) == tuple(evaluate(model, eval_set))


def test_evaluate_reports_each_prediction(model):
    seen = []
    summary = evaluate(model, [(G, (A, B, C)), (H, (A, B, C))], on_prediction=seen.append)

    assert [(record.actual, record.predicted) for record in seen] == [(G, G), (H, G)]
    assert [record.correct for record in seen] == [True, False]
    assert seen[0].score_dangerous > seen[0].score_harmless
    assert summary.total_cost == 6


def test_custom_costs(model):
    costs = CostMatrix(true_positive=0, false_positive=1, false_negative=10, true_negative=0)
    assert evaluate(model, [(H, (A, B, C))], costs=costs).total_cost == 1


def test_empty_evaluation_set_has_zero_accuracy(model):
    summary = evaluate(model, [])
    assert tuple(summary) == (0, 0, 0)
    assert summary.accuracy == 0.0
