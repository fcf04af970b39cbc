"""Map raw integer sensor readings onto the symbol alphabet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from avsrc.errors import ConfigurationError

from .types import Symbol, SymbolSequence


@dataclass(frozen=True)
class DiscretizerConfig:
    """Inclusive upper edges of the low and mid bands."""

    low_upper: int = 27
    mid_upper: int = 42

    def __post_init__(self) -> None:
        if self.low_upper >= self.mid_upper:
            raise ConfigurationError(
                "discretizer low_upper must be below mid_upper, "
                f"got {self.low_upper} >= {self.mid_upper}"
            )


DEFAULT_DISCRETIZER = DiscretizerConfig()


def discretize(value: int, config: DiscretizerConfig = DEFAULT_DISCRETIZER) -> Symbol:
    if value <= config.low_upper:
        return Symbol.LOW
    if value <= config.mid_upper:
        return Symbol.MID
    return Symbol.HIGH


def discretize_sequence(
    values: Iterable[int],
    config: DiscretizerConfig = DEFAULT_DISCRETIZER,
) -> SymbolSequence:
    """Discretize every reading in ``values`` preserving order."""

    return tuple(discretize(value, config) for value in values)


__all__ = ["DEFAULT_DISCRETIZER", "DiscretizerConfig", "discretize", "discretize_sequence"]
