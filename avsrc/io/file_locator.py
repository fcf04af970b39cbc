"""Path utilities for locating config, data and output files."""

from __future__ import annotations

from pathlib import Path
from typing import Union


_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def get_config_path(name: str) -> Path:
    """Return the path to a configuration file under ``config/``."""

    return _PROJECT_ROOT / "config" / name


def get_data_path(*parts: str) -> Path:
    """Return a path under the ``data`` directory."""

    return _PROJECT_ROOT.joinpath("data", *parts)


def resolve_path(path: Union[str, Path]) -> Path:
    """Anchor relative ``path`` values at the project root."""

    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return _PROJECT_ROOT / candidate


def ensure_directory(path: Path) -> Path:
    """Ensure ``path`` exists as a directory and return it."""

    path.mkdir(parents=True, exist_ok=True)
    return path


__all__ = [
    "ensure_directory",
    "get_config_path",
    "get_data_path",
    "resolve_path",
]
