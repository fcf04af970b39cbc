"""Per-record audit log of actual versus predicted labels."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator

from avsrc.models import PredictionRecord

from .file_locator import ensure_directory


def format_prediction(record: PredictionRecord) -> str:
    return f"Actual: {record.actual.value}, Predicted: {record.predicted.value}"


@contextmanager
def open_prediction_log(path: Path) -> Iterator[Callable[[PredictionRecord], None]]:
    """Yield a callback that appends one line per prediction to ``path``.

    The file is truncated on open so every run produces a fresh log.
    """

    path = Path(path)
    ensure_directory(path.parent)
    with path.open("w", encoding="utf-8") as handle:

        def _write(record: PredictionRecord) -> None:
            handle.write(format_prediction(record) + "\n")

        yield _write


__all__ = ["format_prediction", "open_prediction_log"]
