"""State engine for chip-style selection inputs."""

from .core import ChipDataSource, ListChipDataSource
from .core.observers import ChangeObserver, SelectionObserver
from .errors import (
    ChipNotFilterableError,
    ChipNotFoundError,
    ChipPreconditionError,
    ChipsError,
)
from .models.chip import Chip

__all__ = [
    "ChangeObserver",
    "Chip",
    "ChipDataSource",
    "ChipNotFilterableError",
    "ChipNotFoundError",
    "ChipPreconditionError",
    "ChipsError",
    "ListChipDataSource",
    "SelectionObserver",
]

__version__ = "0.1.0"
