from __future__ import annotations

import math

import numpy as np
import pytest

from avsrc.errors import ConfigurationError, InvalidTrainingDataError, MalformedInputError
from avsrc.models import Label, ScoringPolicy, Symbol, classify, estimate, score
from avsrc.models.classifier import classify_with_scores

A, B, C = Symbol.LOW, Symbol.MID, Symbol.HIGH
G, H = Label.DANGEROUS, Label.HARMLESS


def _training_set():
    return [
        (G, (A, B, C)),
        (G, (A, B, B)),
        (G, (B, C)),
        (H, (C, C, A, A)),
        (H, (A, A, A)),
        (H, (C,)),
    ]


def test_estimate_distributions_are_normalized():
    model = estimate(_training_set())

    for label in Label:
        np.testing.assert_allclose(sum(model.initial[label].values()), 1.0)
    for row in model.transitions.values():
        np.testing.assert_allclose(sum(row.values()), 1.0)


def test_estimate_counts_and_probabilities():
    model = estimate(_training_set())

    assert model.sequence_counts[G] == 3
    assert model.sequence_counts[H] == 3
    assert model.initial_probability(G, A) == pytest.approx(2 / 3)
    assert model.initial_probability(G, B) == pytest.approx(1 / 3)
    assert model.initial_probability(G, C) is None
    assert model.transition_probability(G, A, B) == pytest.approx(1.0)
    assert model.transition_probability(G, B, C) == pytest.approx(2 / 3)
    assert model.transition_probability(G, B, B) == pytest.approx(1 / 3)
    assert model.transition_probability(H, C, C) == pytest.approx(0.5)
    assert model.transition_probability(H, B, A) is None


def test_single_symbol_sequence_only_contributes_initial_counts():
    model = estimate([(G, (A,)), (H, (B,))])

    assert model.initial_probability(G, A) == pytest.approx(1.0)
    assert model.initial_probability(H, B) == pytest.approx(1.0)
    assert dict(model.transitions) == {}


def test_estimate_is_deterministic():
    assert estimate(_training_set()).as_dict() == estimate(_training_set()).as_dict()


def test_estimate_rejects_label_without_sequences():
    with pytest.raises(InvalidTrainingDataError):
        estimate([(G, (A, B))])


def test_estimate_rejects_empty_sequence():
    with pytest.raises(MalformedInputError):
        estimate([(G, ()), (H, (A,))])


def test_trained_model_is_read_only():
    model = estimate(_training_set())
    with pytest.raises(TypeError):
        model.initial[G][C] = 0.5  # type: ignore[index]


def test_score_of_memorized_sequence():
    model = estimate([(G, (A, B, C)), (H, (C, C, A, A))])

    assert score(model, G, (A, B, C)) == pytest.approx(math.log(0.1))
    assert score(model, H, (A, B, C)) == pytest.approx(math.log(0.9) + 3 * math.log(0.01))


def test_unseen_transition_costs_exactly_the_smoothing_floor():
    model = estimate([(G, (A, B)), (H, (C, C))])

    seen = score(model, G, (A, B))
    unseen = score(model, G, (A, C))
    assert unseen - seen == pytest.approx(math.log(0.01))


def test_score_is_finite_for_unseen_symbols():
    model = estimate([(G, (A,)), (H, (A,))])
    value = score(model, H, (C, B, C, C))
    assert math.isfinite(value)


def test_typical_continuation_scores_higher():
    model = estimate([(G, (A, B, C)), (G, (A, B, C)), (H, (C, C, C))])

    typical = score(model, G, (A, B, C))
    atypical = score(model, G, (A, B, A))
    assert typical >= atypical


def test_score_rejects_empty_sequence():
    model = estimate(_training_set())
    with pytest.raises(MalformedInputError):
        score(model, G, ())


def test_classify_memorized_dangerous_path():
    model = estimate([(G, (A, B, C)), (H, (C, C, A, A))])
    assert classify(model, (A, B, C)) is G
    assert classify(model, (C, C, A, A)) is H


def test_classify_tie_favours_harmless():
    model = estimate([(G, (A, B)), (H, (A, B))])
    policy = ScoringPolicy(priors={G: 0.5, H: 0.5})

    outcome = classify_with_scores(model, (A, B), policy)
    assert outcome.score_dangerous == outcome.score_harmless
    assert outcome.label is H


def test_scoring_policy_validates_ranges():
    with pytest.raises(ConfigurationError):
        ScoringPolicy(smoothing_floor=0.0)
    with pytest.raises(ConfigurationError):
        ScoringPolicy(priors={G: 0.1})
    with pytest.raises(ConfigurationError):
        ScoringPolicy(priors={G: 1.5, H: 0.5})
