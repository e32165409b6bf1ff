"""Custom exception hierarchy for chipsinput."""

from __future__ import annotations


class ChipsError(Exception):
    """Base class for all custom errors raised by chipsinput."""


# --- layered hierarchy ---

class DomainError(ChipsError):
    """Base class for errors raised by the chip data source."""


class ApplicationError(ChipsError):
    """Base class for errors raised by interaction and presentation layers."""


# --- Domain errors ---

class ChipPreconditionError(DomainError, TypeError):
    """Raised when a required chip or chip collection is missing."""


class ChipNotFoundError(DomainError, LookupError):
    """Raised when a chip or position is not in the expected partition."""


class ChipNotFilterableError(DomainError):
    """Raised when a non-filterable chip is taken from the filtered pool."""


# --- Application errors ---

class ChipInputError(ApplicationError):
    """Raised when typed text cannot be turned into a chip."""


class ChipSourceError(ChipsError):
    """Raised when a candidate chip file cannot be read or parsed."""
