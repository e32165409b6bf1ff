"""Forward data source notifications onto an :class:`EventBus`."""

from __future__ import annotations

from ..core.data_source import ChipDataSource
from ..models.chip import Chip
from .bus import EventBus
from .domain_events import ChipSelectedEvent, ChipsChangedEvent, ChipUnselectedEvent

_SOURCE = "chip_data_source"


class ChipEventPublisher:
    """Observe a data source and republish each notification as a domain event.

    Components that already listen on the application bus (status bars,
    badges) can then react to chip selection without holding a reference to
    the data source.
    """

    def __init__(self, data_source: ChipDataSource, event_bus: EventBus) -> None:
        self._data_source = data_source
        self._event_bus = event_bus
        data_source.add_changed_observer(self)
        data_source.add_selection_observer(self)

    def on_chip_data_source_changed(self) -> None:
        self._event_bus.publish(
            ChipsChangedEvent(
                source=_SOURCE,
                selected_count=len(self._data_source.get_selected_chips()),
                filtered_count=len(self._data_source.get_filtered_chips()),
            )
        )

    def on_chip_selected(self, chip: Chip) -> None:
        self._event_bus.publish(ChipSelectedEvent(source=_SOURCE, chip=chip))

    def on_chip_unselected(self, chip: Chip) -> None:
        self._event_bus.publish(ChipUnselectedEvent(source=_SOURCE, chip=chip))

    def dispose(self) -> None:
        self._data_source.remove_changed_observer(self)
        self._data_source.remove_selection_observer(self)
