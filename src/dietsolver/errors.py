"""Exception hierarchy for dietsolver."""

from __future__ import annotations


class DietSolverError(Exception):
    """Base exception for dietsolver errors."""

    pass


class CatalogError(DietSolverError):
    """Raised when a food catalog is malformed or cannot be loaded."""

    def __init__(self, message: str, entry: str | None = None):
        super().__init__(message)
        self.entry = entry


class InvalidRequirementError(DietSolverError):
    """Raised when a requirement map contains unknown keys or bad values."""

    pass


class ConfigError(DietSolverError):
    """Raised when the configuration file cannot be parsed."""

    pass
