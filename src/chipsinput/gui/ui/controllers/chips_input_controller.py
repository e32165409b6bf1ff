"""Controller translating chips-input interactions into data source calls."""

from __future__ import annotations

import logging
from typing import Any, Optional

from PySide6.QtCore import QObject, Signal

from ....config import ChipOptions
from ....core.data_source import ChipDataSource
from ....errors import ChipInputError, ChipsError
from ....errors.handler import ErrorHandler
from ....models.chip import Chip

_LOGGER = logging.getLogger(__name__)


class ChipsInputController(QObject):
    """Handle typing, deleting and picking chips for a single chips input.

    Views forward raw interactions here (keyboard "done", backspace on an
    empty field, the delete button of a chip, a click on a candidate). Every
    state change goes through the data source, so list models and view
    models observing it update on their own. Errors are reported through the
    :class:`ErrorHandler` and never escape into the Qt event loop.
    """

    # Qt Signals use camelCase by convention (noqa: N815)
    detailsRequested = Signal(object)  # noqa: N815
    keyboardHideRequested = Signal()  # noqa: N815
    inputCleared = Signal()  # noqa: N815

    def __init__(
        self,
        data_source: ChipDataSource,
        error_handler: ErrorHandler,
        options: ChipOptions | None = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._data_source = data_source
        self._errors = error_handler
        self._options = options or ChipOptions()

    @property
    def options(self) -> ChipOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def submit_text(self, text: str) -> Chip | None:
        """Turn the typed *text* into a selected custom chip.

        Returns the new chip, or ``None`` when the text was rejected.
        """

        try:
            if not self._options.allow_custom_chips:
                raise ChipInputError("Custom chips are not allowed")
            if not text or not text.strip():
                raise ChipInputError("Cannot create a chip from blank text")
            chip = Chip.custom(text)
            self._data_source.add_selected_chip(chip)
        except ChipsError as exc:
            self._report(exc, action="submit_text")
            return None
        self.inputCleared.emit()
        return chip

    def backspace(self, current_text: str) -> Chip | None:
        """Unselect the last chip when backspace is pressed on an empty input."""

        if current_text:
            return None
        chips = self._data_source.get_selected_chips()
        if not chips:
            return None
        last = chips[-1]
        try:
            self._data_source.replace_chip_at(len(chips) - 1)
        except ChipsError as exc:
            self._report(exc, action="backspace")
            return None
        return last

    def delete_chip(self, position: int) -> bool:
        """Unselect the chip at *position* of the selected chips."""

        try:
            self._data_source.replace_chip_at(position)
        except ChipsError as exc:
            self._report(exc, action="delete_chip", position=position)
            return False
        return True

    def click_chip(self, position: int) -> None:
        """Ask the view to show the details of the chip at *position*."""

        if not self._options.show_details:
            return
        try:
            chip = self._data_source.get_selected_chip(position)
        except ChipsError as exc:
            self._report(exc, action="click_chip", position=position)
            return
        self.detailsRequested.emit(chip)

    def pick_candidate(self, chip: Chip) -> bool:
        """Move a candidate from the filtered list into the selection."""

        try:
            self._data_source.take_chip(chip)
        except ChipsError as exc:
            self._report(exc, action="pick_candidate")
            return False
        self.inputCleared.emit()
        if self._options.hide_keyboard_on_chip_click:
            self.keyboardHideRequested.emit()
        return True

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _report(self, error: ChipsError, **context: Any) -> None:
        _LOGGER.debug("Chips input action rejected: %s", error)
        self._errors.handle(error, context=context)
