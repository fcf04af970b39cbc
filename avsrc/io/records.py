"""Read labeled record files into validated records and symbol sequences."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from avsrc.models import DEFAULT_DISCRETIZER, DiscretizerConfig, Label, SymbolSequence

from .schemas import SequenceRecord, parse_record_line


def read_records(path: Path) -> List[SequenceRecord]:
    """Parse every line of ``path``; the first malformed line aborts the read."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"record file missing at {path}")

    records: List[SequenceRecord] = []
    with path.open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            records.append(parse_record_line(line, source=str(path), line_number=line_number))
    return records


def load_labeled_sequences(
    path: Path,
    config: DiscretizerConfig = DEFAULT_DISCRETIZER,
) -> List[Tuple[Label, SymbolSequence]]:
    """Return ``(label, symbols)`` pairs for every record in ``path``."""

    return [(record.label, record.symbols(config)) for record in read_records(path)]


__all__ = ["load_labeled_sequences", "read_records"]
