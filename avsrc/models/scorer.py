"""Log-likelihood scoring of symbol sequences under a trained model."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

from avsrc.errors import ConfigurationError, MalformedInputError

from .markov_chain import TrainedModel
from .types import Label, Symbol


def _default_priors() -> Mapping[Label, float]:
    return {Label.DANGEROUS: 0.1, Label.HARMLESS: 0.9}


@dataclass(frozen=True)
class ScoringPolicy:
    """Class priors and the probability substituted for unseen events."""

    smoothing_floor: float = 0.01
    priors: Mapping[Label, float] = field(default_factory=_default_priors)

    def __post_init__(self) -> None:
        if not 0.0 < self.smoothing_floor <= 1.0:
            raise ConfigurationError(
                f"smoothing_floor must be in (0, 1], got {self.smoothing_floor}"
            )

        priors = {Label(label): float(value) for label, value in self.priors.items()}
        for label in Label:
            if label not in priors:
                raise ConfigurationError(f"missing class prior for label {label.value}")
            if not 0.0 < priors[label] <= 1.0:
                raise ConfigurationError(
                    f"class prior for {label.value} must be in (0, 1], got {priors[label]}"
                )
        object.__setattr__(self, "priors", MappingProxyType(priors))

    def prior(self, label: Label) -> float:
        return self.priors[label]


DEFAULT_POLICY = ScoringPolicy()


def score(
    model: TrainedModel,
    label: Label,
    sequence: Sequence[Symbol],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> float:
    """Return the natural-log likelihood of ``sequence`` under ``label``.

    The score sums the log class prior, the log initial probability of the
    first symbol and the log probability of every transition. Initial
    symbols or transitions absent from the model contribute
    ``log(policy.smoothing_floor)`` instead, so the result is always finite.
    """

    symbols = tuple(sequence)
    if not symbols:
        raise MalformedInputError("cannot score an empty sequence")

    floor = policy.smoothing_floor
    log_likelihood = math.log(policy.prior(label))

    initial = model.initial_probability(label, symbols[0])
    log_likelihood += math.log(initial if initial is not None else floor)

    for current, following in zip(symbols, symbols[1:]):
        probability = model.transition_probability(label, current, following)
        log_likelihood += math.log(probability if probability is not None else floor)

    return log_likelihood


__all__ = ["DEFAULT_POLICY", "ScoringPolicy", "score"]
