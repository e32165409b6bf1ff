"""List model exposing the filterable candidate chips to a picker list."""

from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt, Signal, Slot

from ....core.data_source import ChipDataSource
from ....models.chip import Chip
from .roles import chip_data, role_names

_LOGGER = logging.getLogger(__name__)


def _matches(chip: Chip, needle: str) -> bool:
    if needle in chip.title.casefold():
        return True
    return chip.subtitle is not None and needle in chip.subtitle.casefold()


class FilteredChipsModel(QAbstractListModel):
    """Candidate chips narrowed by the text typed into the chips input.

    Matching is a case-insensitive substring test against the title and the
    subtitle. An empty filter text shows every filtered chip.
    """

    # Qt Signals use camelCase by convention (noqa: N815)
    filterTextChanged = Signal(str)  # noqa: N815

    def __init__(self, data_source: ChipDataSource, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._data_source = data_source
        self._filter_text = ""
        self._chips: list[Chip] = []
        self._rebuild()
        data_source.add_changed_observer(self)

    def roleNames(self) -> dict[int, bytes]:  # noqa: N802  # Qt override
        return role_names(super().roleNames())

    def rowCount(self, parent: QModelIndex | None = None) -> int:  # noqa: N802  # Qt override
        if parent is not None and parent.isValid():
            return 0
        return len(self._chips)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        row = index.row()
        if not index.isValid() or row < 0 or row >= len(self._chips):
            return None
        return chip_data(self._chips[row], role)

    def chip_at(self, row: int) -> Chip | None:
        if 0 <= row < len(self._chips):
            return self._chips[row]
        return None

    def filter_text(self) -> str:
        return self._filter_text

    @Slot(str)
    def set_filter_text(self, text: str) -> None:
        text = text or ""
        if text == self._filter_text:
            return
        self._filter_text = text
        self.refresh()
        self.filterTextChanged.emit(text)

    # ------------------------------------------------------------------
    # Data source observer
    # ------------------------------------------------------------------
    def on_chip_data_source_changed(self) -> None:
        self.refresh()

    @Slot()
    def refresh(self) -> None:
        self.beginResetModel()
        self._rebuild()
        self.endResetModel()

    def dispose(self) -> None:
        self._data_source.remove_changed_observer(self)

    def _rebuild(self) -> None:
        chips = self._data_source.get_filtered_chips()
        needle = self._filter_text.strip().casefold()
        if needle:
            chips = [chip for chip in chips if _matches(chip, needle)]
        self._chips = chips
        _LOGGER.debug("Filtered chips model holds %d rows for %r", len(chips), needle)
