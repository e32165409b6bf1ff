"""Observer contracts and per-store subscriber registries.

Both observer kinds are called synchronously on the thread that performed the
mutation, before the mutating call returns. Change observers always hear
about a mutation before selection observers do.

Observers must not mutate the data source from inside a callback; the
resulting notification order is undefined.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, List, Protocol, TypeVar, runtime_checkable

from ..models.chip import Chip

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class ChangeObserver(Protocol):
    """Told that the visible contents of a data source changed."""

    def on_chip_data_source_changed(self) -> None: ...


@runtime_checkable
class SelectionObserver(Protocol):
    """Told when a chip moves into or out of the selected partition."""

    def on_chip_selected(self, chip: Chip) -> None: ...

    def on_chip_unselected(self, chip: Chip) -> None: ...


class ObserverRegistry(Generic[T]):
    """Ordered list of observers owned by a single data source.

    Registering the same observer twice keeps both registrations, so it is
    notified twice. Failures raised by one observer are logged and do not
    stop delivery to the others.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._observers: List[T] = []

    def add(self, observer: T) -> None:
        self._observers.append(observer)

    def remove(self, observer: T) -> bool:
        """Drop one registration of *observer*; return ``False`` if absent."""

        try:
            self._observers.remove(observer)
        except ValueError:
            return False
        return True

    def notify(self, callback: Callable[[T], None]) -> None:
        # Iterate over a copy so registrations made mid-dispatch apply next time.
        for observer in list(self._observers):
            try:
                callback(observer)
            except Exception:
                _logger.exception("%s observer %r failed", self._name, observer)

    def clear(self) -> None:
        self._observers.clear()

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._observers))

    def __contains__(self, observer: object) -> bool:
        return observer in self._observers
