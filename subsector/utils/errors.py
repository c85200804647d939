"""Typed failures raised at the subsector's boundary operations."""

from enum import Enum


class ErrorType(Enum):
    """Classification of subsector errors."""

    OUT_OF_BOUNDS = "out_of_bounds"
    PARSE_ERROR = "parse_error"
    ASSET_LOAD = "asset_load"
    EMPTY_SOURCE = "empty_source"


class SubsectorError(Exception):
    """Base class for all recoverable and fatal subsector errors."""

    error_type: ErrorType

    def __init__(self, message: str):
        """Initialize error.

        Args:
            message: Human-readable error message
        """
        self.message = message
        super().__init__(message)


class OutOfBoundsError(SubsectorError):
    """Raised when a coordinate falls outside the subsector grid."""

    error_type = ErrorType.OUT_OF_BOUNDS


class SubsectorParseError(SubsectorError):
    """Raised for malformed coordinates, JSON, or unknown table entries."""

    error_type = ErrorType.PARSE_ERROR


class AssetLoadError(SubsectorError):
    """Raised when a bundled reference table is missing or corrupt.

    This indicates a broken installation rather than a user error, so callers
    should not try to recover from it.
    """

    error_type = ErrorType.ASSET_LOAD


class EmptySourceError(SubsectorError):
    """Raised when moving a world from a coordinate with no occupant."""

    error_type = ErrorType.EMPTY_SOURCE
