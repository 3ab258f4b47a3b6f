"""Custom exceptions for bondstats."""

from __future__ import annotations


class BondStatsError(Exception):
    """Base class of every error raised by the package."""


class ParseError(BondStatsError, ValueError):
    """Raised when the input cannot be split into rows and fields at all."""

    error_code = "BS_PARSE"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.error_code}: {message}")


class SchemaError(BondStatsError, ValueError):
    """Raised when a record schema is inconsistent."""


class EmptySampleError(BondStatsError, ValueError):
    """Raised when a statistic is undefined because the sample is empty."""
