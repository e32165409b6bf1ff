from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..models.chip import Chip
from .observers import ChangeObserver, SelectionObserver


class ChipDataSource(ABC):
    """Partition store capability: filtered candidates vs. selected chips.

    Implementations own three chip sets (``original``, ``filtered`` and
    ``selected``) and are the only place allowed to change their membership.
    """

    # --- Queries ---

    @abstractmethod
    def get_selected_chips(self) -> List[Chip]:
        """Selected chips sorted by title"""
        pass

    @abstractmethod
    def get_filtered_chips(self) -> List[Chip]:
        pass

    @abstractmethod
    def get_original_chips(self) -> List[Chip]:
        pass

    @abstractmethod
    def get_filtered_chip(self, position: int) -> Chip:
        pass

    @abstractmethod
    def get_selected_chip(self, position: int) -> Chip:
        pass

    @abstractmethod
    def exists_in_filtered(self, chip: Optional[Chip]) -> bool:
        pass

    @abstractmethod
    def exists_in_selected(self, chip: Optional[Chip]) -> bool:
        pass

    @abstractmethod
    def exists_in_data_source(self, chip: Optional[Chip]) -> bool:
        """True when the chip is in any partition"""
        pass

    # --- Mutations ---

    @abstractmethod
    def set_filterable_chips(self, chips: Optional[Iterable[Chip]]) -> None:
        pass

    @abstractmethod
    def add_filtered_chip(self, chip: Optional[Chip]) -> None:
        pass

    @abstractmethod
    def add_selected_chip(self, chip: Optional[Chip]) -> None:
        pass

    @abstractmethod
    def remove_selected_chip(self, chip: Optional[Chip]) -> None:
        pass

    @abstractmethod
    def set_selected_chips(self, chips: Optional[Iterable[Chip]]) -> None:
        pass

    @abstractmethod
    def take_chip(self, chip: Optional[Chip]) -> None:
        """Move a filterable chip from the filtered pool into the selection"""
        pass

    @abstractmethod
    def take_chip_at(self, position: int) -> None:
        pass

    @abstractmethod
    def replace_chip(self, chip: Optional[Chip]) -> None:
        """Move a selected chip back to the filtered pool (if filterable)"""
        pass

    @abstractmethod
    def replace_chip_at(self, position: int) -> None:
        pass

    @abstractmethod
    def clear_filtered_chips(self) -> None:
        pass

    @abstractmethod
    def clear_selected_chips(self) -> None:
        pass

    # --- Observers ---

    @abstractmethod
    def add_changed_observer(self, observer: ChangeObserver) -> None:
        pass

    @abstractmethod
    def remove_changed_observer(self, observer: ChangeObserver) -> bool:
        pass

    @abstractmethod
    def add_selection_observer(self, observer: SelectionObserver) -> None:
        pass

    @abstractmethod
    def remove_selection_observer(self, observer: SelectionObserver) -> bool:
        pass
