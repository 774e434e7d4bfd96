"""Custom exceptions for the wine cellar."""


class CellarError(Exception):
    """Base exception for the wine cellar."""

    pass


class InvalidQueryError(CellarError):
    """Raised when a wine query is malformed (blank region, bad limit)."""

    pass
