"""Per-label Markov chain estimation from labeled symbol sequences."""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from avsrc.errors import InvalidTrainingDataError, MalformedInputError

from .types import Label, Symbol

TransitionKey = Tuple[Label, Symbol]
LabeledSequence = Tuple[Label, Sequence[Symbol]]


@dataclass(frozen=True)
class TrainedModel:
    """Initial and transition distributions for every label.

    Transition rows are keyed by ``(label, source)`` so each row can be
    checked for normalization independently. Pairs never observed during
    training are absent rather than stored as zero.
    """

    initial: Mapping[Label, Mapping[Symbol, float]]
    transitions: Mapping[TransitionKey, Mapping[Symbol, float]]
    sequence_counts: Mapping[Label, int]

    @property
    def labels(self) -> Tuple[Label, ...]:
        return tuple(self.initial.keys())

    def initial_probability(self, label: Label, symbol: Symbol) -> Optional[float]:
        return self.initial.get(label, {}).get(symbol)

    def transition_probability(
        self, label: Label, source: Symbol, destination: Symbol
    ) -> Optional[float]:
        return self.transitions.get((label, source), {}).get(destination)

    def transition_rows(self, label: Label) -> Dict[Symbol, Mapping[Symbol, float]]:
        """Return the transition rows for ``label`` keyed by source symbol."""

        return {
            source: row
            for (row_label, source), row in self.transitions.items()
            if row_label == label
        }

    def observed_symbols(self, label: Label) -> List[Symbol]:
        """Return the sorted symbols seen as a source or destination under ``label``."""

        symbols = set()
        for source, row in self.transition_rows(label).items():
            symbols.add(source)
            symbols.update(row.keys())
        return sorted(symbols)

    def as_dict(self) -> Dict[str, Any]:
        """Represent the model with plain string keys for JSON diagnostics."""

        transitions: Dict[str, Dict[str, Dict[str, float]]] = {
            label.value: {} for label in self.labels
        }
        for (label, source), row in sorted(self.transitions.items()):
            transitions[label.value][source.value] = {
                destination.value: probability
                for destination, probability in sorted(row.items())
            }

        return {
            "sequence_counts": {
                label.value: count for label, count in self.sequence_counts.items()
            },
            "initial": {
                label.value: {
                    symbol.value: probability
                    for symbol, probability in sorted(distribution.items())
                }
                for label, distribution in self.initial.items()
            },
            "transitions": transitions,
        }


def _normalize(counts: Counter) -> Mapping[Symbol, float]:
    total = sum(counts.values())
    return MappingProxyType({symbol: count / total for symbol, count in counts.items()})


def estimate(
    training_set: Iterable[LabeledSequence],
    labels: Sequence[Label] = tuple(Label),
) -> TrainedModel:
    """Estimate initial and transition distributions for each of ``labels``.

    Raises
    ------
    MalformedInputError
        If a sequence is empty or carries a label outside ``labels``.
    InvalidTrainingDataError
        If any label ends up with no training sequences.
    """

    initial_counts: Dict[Label, Counter] = {label: Counter() for label in labels}
    transition_counts: Dict[TransitionKey, Counter] = defaultdict(Counter)

    for label, sequence in training_set:
        if label not in initial_counts:
            raise MalformedInputError(f"unexpected label {label!r} in training set")
        symbols = tuple(sequence)
        if not symbols:
            raise MalformedInputError("training sequences must contain at least one symbol")

        initial_counts[label][symbols[0]] += 1
        for current, following in zip(symbols, symbols[1:]):
            transition_counts[(label, current)][following] += 1

    missing = [label.value for label, counts in initial_counts.items() if not counts]
    if missing:
        raise InvalidTrainingDataError(
            "cannot normalize distributions, no training sequences for label(s): "
            + ", ".join(missing)
        )

    initial = {label: _normalize(counts) for label, counts in initial_counts.items()}
    transitions = {key: _normalize(counts) for key, counts in transition_counts.items()}
    sequence_counts = {
        label: sum(counts.values()) for label, counts in initial_counts.items()
    }

    return TrainedModel(
        initial=MappingProxyType(initial),
        transitions=MappingProxyType(transitions),
        sequence_counts=MappingProxyType(sequence_counts),
    )


__all__ = ["LabeledSequence", "TrainedModel", "TransitionKey", "estimate"]
