"""Pure Python signals for the chip view models; no Qt dependency.

``Signal`` carries view-model events to whichever toolkit renders them and
``ObservableProperty`` wraps a single bindable value.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Synchronous callback list, emitted on the caller's thread.

    A handler is connected at most once. Exceptions raised by a handler are
    logged and the remaining handlers still run, matching ``EventBus``.
    """

    def __init__(self, name: str = "signal") -> None:
        self._name = name
        self._handlers: list[Callable] = []

    def connect(self, handler: Callable) -> Callable:
        if handler not in self._handlers:
            self._handlers.append(handler)
        return handler

    def disconnect(self, handler: Callable) -> bool:
        try:
            self._handlers.remove(handler)
        except ValueError:
            return False
        return True

    def emit(self, *args: Any) -> None:
        for handler in list(self._handlers):
            try:
                handler(*args)
            except Exception:
                _logger.exception("Handler %r for %s failed", handler, self._name)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)


class ObservableProperty:
    """Bindable value; emits ``changed(new, old)`` when the value differs."""

    def __init__(self, name: str, initial_value: Any = None) -> None:
        self._value = initial_value
        self.changed = Signal(f"{name}.changed")

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._value == new_value:
            return
        old_value = self._value
        self._value = new_value
        self.changed.emit(new_value, old_value)
