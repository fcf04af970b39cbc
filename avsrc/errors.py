"""Exception types shared by the training and evaluation pipeline."""

from __future__ import annotations


class MalformedInputError(ValueError):
    """Raised when a record cannot be parsed into a label and observations."""


class InvalidTrainingDataError(ValueError):
    """Raised when the training corpus cannot produce a normalized model."""


class ConfigurationError(ValueError):
    """Raised when a policy constant in ``settings.yaml`` is out of range."""


__all__ = ["ConfigurationError", "InvalidTrainingDataError", "MalformedInputError"]
