"""Markov-chain hazard classifier for discretized sensor sequences."""

from .errors import ConfigurationError, InvalidTrainingDataError, MalformedInputError

__all__ = [
    "ConfigurationError",
    "InvalidTrainingDataError",
    "MalformedInputError",
    "io",
    "models",
    "pipeline",
    "util",
]
