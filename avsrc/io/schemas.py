"""Pydantic schema and line parser for labeled record files."""

from __future__ import annotations

import re
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from avsrc.errors import MalformedInputError
from avsrc.models import (
    DEFAULT_DISCRETIZER,
    DiscretizerConfig,
    Label,
    SymbolSequence,
    discretize_sequence,
)

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class SequenceRecord(BaseModel):
    """One record: a label followed by one or more integer sensor readings."""

    label: Label
    values: Tuple[int, ...] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("values", mode="before")
    @classmethod
    def _parse_tokens(cls, value: Any):
        parsed: List[int] = []
        for token in value or ():
            if isinstance(token, bool):
                raise ValueError(f"observation {token!r} is not an integer")
            if isinstance(token, int):
                parsed.append(token)
                continue
            text = str(token)
            if not _INTEGER_TOKEN.fullmatch(text):
                raise ValueError(f"observation {token!r} is not an integer")
            parsed.append(int(text))
        return parsed

    def symbols(self, config: DiscretizerConfig = DEFAULT_DISCRETIZER) -> SymbolSequence:
        return discretize_sequence(self.values, config)


def _describe(error: ValidationError) -> str:
    details = []
    for entry in error.errors():
        location = ".".join(str(part) for part in entry.get("loc", ()))
        details.append(f"{location}: {entry.get('msg')}" if location else str(entry.get("msg")))
    return "; ".join(details)


def parse_record_line(
    line: str,
    *,
    source: str = "<input>",
    line_number: Optional[int] = None,
) -> SequenceRecord:
    """Parse a whitespace-separated ``<label> <int> [<int> ...]`` line.

    Raises
    ------
    MalformedInputError
        If the line has fewer than two tokens, an unknown label or a
        non-integer observation.
    """

    where = source if line_number is None else f"{source}:{line_number}"
    tokens = line.split()
    if len(tokens) < 2:
        raise MalformedInputError(
            f"{where}: expected a label followed by at least one observation, "
            f"got {len(tokens)} token(s)"
        )

    label_token, *observations = tokens
    try:
        label = Label.parse(label_token)
    except MalformedInputError as exc:
        raise MalformedInputError(f"{where}: {exc}") from exc

    try:
        return SequenceRecord(label=label, values=observations)
    except ValidationError as exc:
        raise MalformedInputError(f"{where}: {_describe(exc)}") from exc


__all__ = ["SequenceRecord", "parse_record_line"]
