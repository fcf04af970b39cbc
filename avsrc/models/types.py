"""Symbol and label alphabets used by the Markov-chain models."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from avsrc.errors import MalformedInputError


class Symbol(str, Enum):
    """Discretized sensor band."""

    LOW = "A"
    MID = "B"
    HIGH = "C"

    def __str__(self) -> str:
        return self.value


class Label(str, Enum):
    """Classification categories; the token is what appears in record files."""

    DANGEROUS = "G"
    HARMLESS = "H"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: str) -> "Label":
        """Return the label for ``token``. Matching is exact and case-sensitive."""

        try:
            return cls(token)
        except ValueError as exc:
            expected = ", ".join(label.value for label in cls)
            raise MalformedInputError(
                f"unknown label {token!r}; expected one of {expected}"
            ) from exc


SymbolSequence = Tuple[Symbol, ...]


__all__ = ["Label", "Symbol", "SymbolSequence"]
