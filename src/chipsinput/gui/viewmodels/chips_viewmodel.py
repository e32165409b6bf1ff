"""ChipsViewModel (MVVM); pure Python, no Qt dependency.

Keeps the header state of a chips input in sync with its data source: how
many chips are selected and whether the selected-chips area should be shown.
"""

from __future__ import annotations

import logging

from ...core.data_source import ChipDataSource
from ...models.chip import Chip
from .signal import ObservableProperty, Signal


class ChipsViewModel:
    """Header and selection state for one chip data source."""

    def __init__(self, data_source: ChipDataSource) -> None:
        self._data_source = data_source
        self._logger = logging.getLogger(__name__)

        # Observable properties
        self.selected_count = ObservableProperty("selected_count", 0)
        self.header_visible = ObservableProperty("header_visible", False)
        self.last_selected: ObservableProperty = ObservableProperty("last_selected", None)

        # Signals
        self.chip_selected = Signal("chip_selected")
        self.chip_unselected = Signal("chip_unselected")

        data_source.add_changed_observer(self)
        data_source.add_selection_observer(self)
        self._refresh()

    @property
    def data_source(self) -> ChipDataSource:
        return self._data_source

    def header_text(self) -> str:
        count = self.selected_count.value
        if count == 0:
            return ""
        return f"{count} selected"

    # ------------------------------------------------------------------
    # Data source observers
    # ------------------------------------------------------------------
    def on_chip_data_source_changed(self) -> None:
        self._refresh()

    def on_chip_selected(self, chip: Chip) -> None:
        self.last_selected.value = chip
        self.chip_selected.emit(chip)

    def on_chip_unselected(self, chip: Chip) -> None:
        if self.last_selected.value == chip:
            self.last_selected.value = None
        self.chip_unselected.emit(chip)

    def dispose(self) -> None:
        """Stop observing the data source."""
        self._data_source.remove_changed_observer(self)
        self._data_source.remove_selection_observer(self)

    def _refresh(self) -> None:
        count = len(self._data_source.get_selected_chips())
        self.selected_count.value = count
        self.header_visible.value = count > 0
        self._logger.debug("Chips header refreshed: %d selected", count)
