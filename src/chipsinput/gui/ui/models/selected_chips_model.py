"""List model adapting the selected chips into rows for a chip view."""

from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt, Signal, Slot

from ....core.data_source import ChipDataSource
from ....models.chip import Chip
from .roles import chip_data, role_names

_LOGGER = logging.getLogger(__name__)


class SelectedChipsModel(QAbstractListModel):
    """Rows mirror ``get_selected_chips()``, sorted by title.

    The model observes its data source and resets whenever the data source
    reports a change, then emits ``countChanged`` so the owning layout can
    show or hide the chips header.
    """

    # Qt Signals use camelCase by convention (noqa: N815)
    countChanged = Signal(int)  # noqa: N815

    def __init__(self, data_source: ChipDataSource, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._data_source = data_source
        self._chips: list[Chip] = data_source.get_selected_chips()
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

    # ------------------------------------------------------------------
    # Data source observer
    # ------------------------------------------------------------------
    def on_chip_data_source_changed(self) -> None:
        self.refresh()

    @Slot()
    def refresh(self) -> None:
        """Rebuild the rows from the data source."""
        self.beginResetModel()
        self._chips = self._data_source.get_selected_chips()
        self.endResetModel()
        _LOGGER.debug("Selected chips model reset to %d rows", len(self._chips))
        self.countChanged.emit(len(self._chips))

    def dispose(self) -> None:
        self._data_source.remove_changed_observer(self)
