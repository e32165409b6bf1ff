"""Set-backed chip data source.

Chips are partitioned into three insertion-ordered sets:

* ``original`` - every chip offered to the user as a candidate,
* ``filtered`` - candidates that can currently be picked,
* ``selected`` - chips the user has chosen.

A chip is never in ``filtered`` and ``selected`` at the same time, and
``filtered`` is always contained in ``original``. Moving a chip between
partitions is a remove from one set followed by an insert into the other.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ..errors import ChipNotFilterableError, ChipNotFoundError, ChipPreconditionError
from ..models.chip import Chip
from .data_source import ChipDataSource
from .observers import ChangeObserver, ObserverRegistry, SelectionObserver

_logger = logging.getLogger(__name__)


def _require_chip(chip: Optional[Chip]) -> Chip:
    if chip is None:
        raise ChipPreconditionError("Chip cannot be None")
    return chip


def _require_chips(chips: Optional[Iterable[Chip]]) -> List[Chip]:
    if chips is None:
        raise ChipPreconditionError("Chips cannot be None")
    chips = list(chips)
    if any(chip is None for chip in chips):
        raise ChipPreconditionError("Chips cannot contain None")
    return chips


def _require_position(position: Optional[int]) -> int:
    if position is None:
        raise ChipPreconditionError("Position cannot be None")
    if isinstance(position, bool) or not isinstance(position, int):
        raise ChipPreconditionError(f"Position must be an int, got {type(position).__name__}")
    return position


class ListChipDataSource(ChipDataSource):
    """In-memory partition store used from the UI thread.

    There is no locking; every call runs to completion, observer callbacks
    included, on the calling thread.
    """

    def __init__(self) -> None:
        # Each dict maps a chip to itself: an insertion-ordered set that remembers
        # the first inserted instance.
        self._original: Dict[Chip, Chip] = {}
        self._filtered: Dict[Chip, Chip] = {}
        self._selected: Dict[Chip, Chip] = {}
        self._change_observers: ObserverRegistry[ChangeObserver] = ObserverRegistry("change")
        self._selection_observers: ObserverRegistry[SelectionObserver] = ObserverRegistry("selection")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_selected_chips(self) -> List[Chip]:
        return sorted(self._selected, key=lambda chip: chip.sort_key)

    def get_filtered_chips(self) -> List[Chip]:
        return list(self._filtered)

    def get_original_chips(self) -> List[Chip]:
        return list(self._original)

    def get_filtered_chip(self, position: int) -> Chip:
        return self._chip_at(self.get_filtered_chips(), _require_position(position), "filtered")

    def get_selected_chip(self, position: int) -> Chip:
        return self._chip_at(self.get_selected_chips(), _require_position(position), "selected")

    def exists_in_filtered(self, chip: Optional[Chip]) -> bool:
        return _require_chip(chip) in self._filtered

    def exists_in_selected(self, chip: Optional[Chip]) -> bool:
        return _require_chip(chip) in self._selected

    def exists_in_data_source(self, chip: Optional[Chip]) -> bool:
        chip = _require_chip(chip)
        return chip in self._original or chip in self._filtered or chip in self._selected

    @property
    def selected_count(self) -> int:
        return len(self._selected)

    @property
    def filtered_count(self) -> int:
        return len(self._filtered)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def set_filterable_chips(self, chips: Optional[Iterable[Chip]]) -> None:
        chips = _require_chips(chips)
        for chip in chips:
            self._offer(chip)
        _logger.debug("Offered %d filterable chips", len(chips))
        self._notify_changed()

    def add_filtered_chip(self, chip: Optional[Chip]) -> None:
        self._offer(_require_chip(chip))
        self._notify_changed()

    def add_selected_chip(self, chip: Optional[Chip]) -> None:
        chip = _require_chip(chip)
        self._filtered.pop(chip, None)
        self._original.pop(chip, None)
        self._selected.setdefault(chip, chip)
        _logger.debug("Selected chip %r", chip.id)
        self._notify_changed()
        self._notify_selected(chip)

    def remove_selected_chip(self, chip: Optional[Chip]) -> None:
        chip = _require_chip(chip)
        self._selected.pop(chip, None)
        _logger.debug("Removed selected chip %r", chip.id)
        self._notify_changed()

    def set_selected_chips(self, chips: Optional[Iterable[Chip]]) -> None:
        chips = _require_chips(chips)
        self._original.clear()
        self._selected.clear()
        for chip in chips:
            self._filtered.pop(chip, None)
        # Candidates that stay offered keep their place in the original pool.
        for chip in self._filtered:
            self._original.setdefault(chip, chip)
        for chip in chips:
            self._original.setdefault(chip, chip)
            self._selected.setdefault(chip, chip)
        _logger.debug("Preloaded %d selected chips", len(chips))
        self._notify_changed()

    def take_chip(self, chip: Optional[Chip]) -> None:
        chip = _require_chip(chip)
        stored = self._filtered.get(chip)
        if stored is None:
            raise ChipNotFoundError(f"Chip {chip.id!r} is not in the filtered chips")
        if not stored.filterable:
            raise ChipNotFilterableError(f"Cannot take non-filterable chip {chip.id!r}")
        self._move_to_selected(stored)

    def take_chip_at(self, position: int) -> None:
        found = self._chip_at(self.get_filtered_chips(), _require_position(position), "filtered")
        if found.filterable:
            self._move_to_selected(found)
            return
        # A chip whose flag was cleared after it was offered only joins the selection.
        self._filtered.pop(found, None)
        self._selected.setdefault(found, found)
        self._notify_changed()
        self._notify_selected(found)

    def replace_chip(self, chip: Optional[Chip]) -> None:
        chip = _require_chip(chip)
        stored = self._selected.get(chip)
        if stored is None:
            raise ChipNotFoundError(f"Chip {chip.id!r} is not in the selected chips")
        self._move_out_of_selected(stored)

    def replace_chip_at(self, position: int) -> None:
        found = self._chip_at(self.get_selected_chips(), _require_position(position), "selected")
        self._move_out_of_selected(found)

    def clear_filtered_chips(self) -> None:
        self._original.clear()
        self._filtered.clear()
        self._notify_changed()

    def clear_selected_chips(self) -> None:
        snapshot = self.get_selected_chips()
        self._selected.clear()
        _logger.debug("Cleared %d selected chips", len(snapshot))
        self._notify_changed()
        for chip in snapshot:
            self._notify_unselected(chip)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def add_changed_observer(self, observer: ChangeObserver) -> None:
        self._change_observers.add(observer)

    def remove_changed_observer(self, observer: ChangeObserver) -> bool:
        return self._change_observers.remove(observer)

    def add_selection_observer(self, observer: SelectionObserver) -> None:
        self._selection_observers.add(observer)

    def remove_selection_observer(self, observer: SelectionObserver) -> bool:
        return self._selection_observers.remove(observer)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _offer(self, chip: Chip) -> None:
        chip.filterable = True
        selected = self._selected.get(chip)
        if selected is not None:
            # Flagged only; it returns to the pool when unselected.
            selected.filterable = True
            return
        self._original.setdefault(chip, chip)
        self._filtered.setdefault(chip, chip).filterable = True

    def _move_to_selected(self, chip: Chip) -> None:
        self._original.pop(chip, None)
        self._filtered.pop(chip, None)
        self._selected.setdefault(chip, chip)
        _logger.debug("Took chip %r", chip.id)
        self._notify_changed()
        self._notify_selected(chip)

    def _move_out_of_selected(self, chip: Chip) -> None:
        del self._selected[chip]
        if chip.filterable:
            self._filtered.setdefault(chip, chip)
            self._original.setdefault(chip, chip)
        _logger.debug("Replaced chip %r (restored=%s)", chip.id, chip.filterable)
        self._notify_changed()
        self._notify_unselected(chip)

    @staticmethod
    def _chip_at(chips: List[Chip], position: int, partition: str) -> Chip:
        if not 0 <= position < len(chips):
            raise ChipNotFoundError(
                f"No {partition} chip at position {position} (size {len(chips)})"
            )
        return chips[position]

    def _notify_changed(self) -> None:
        self._change_observers.notify(lambda observer: observer.on_chip_data_source_changed())

    def _notify_selected(self, chip: Chip) -> None:
        self._selection_observers.notify(lambda observer: observer.on_chip_selected(chip))

    def _notify_unselected(self, chip: Chip) -> None:
        self._selection_observers.notify(lambda observer: observer.on_chip_unselected(chip))
