from .data_source import ChipDataSource
from .list_data_source import ListChipDataSource
from .observers import ChangeObserver, ObserverRegistry, SelectionObserver

__all__ = [
    "ChangeObserver",
    "ChipDataSource",
    "ListChipDataSource",
    "ObserverRegistry",
    "SelectionObserver",
]
