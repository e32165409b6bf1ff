"""Route errors raised while driving a chips input to the log, the bus and the UI."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from ..events.bus import Event, EventBus
from . import ApplicationError, ChipsError


class ErrorSeverity(Enum):
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @property
    def surfaces_in_ui(self) -> bool:
        return self in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)


UiCallback = Callable[[str, ErrorSeverity], None]


def severity_for(error: BaseException) -> ErrorSeverity:
    """Pick the default severity for *error* from its place in the hierarchy.

    Rejected user input (:class:`ApplicationError`) is only a warning. Anything
    else from chipsinput, data source violations included, is an error, and
    exceptions from outside the package are critical.
    """

    if isinstance(error, ApplicationError):
        return ErrorSeverity.WARNING
    if isinstance(error, ChipsError):
        return ErrorSeverity.ERROR
    return ErrorSeverity.CRITICAL


@dataclass(kw_only=True)
class ErrorOccurredEvent(Event):
    error: Exception
    severity: ErrorSeverity
    context: Dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return f"{self.error.__class__.__name__}: {self.error}"


class ErrorHandler:
    """Log an error, publish it as :class:`ErrorOccurredEvent` and, for
    errors the user has to see, forward the message to the UI callback."""

    def __init__(self, logger: logging.Logger, event_bus: EventBus) -> None:
        self._logger = logger
        self._events = event_bus
        self._ui_callback: Optional[UiCallback] = None

    def register_ui_callback(self, callback: Optional[UiCallback]) -> None:
        """Install *callback*, or remove the current one when given ``None``."""
        self._ui_callback = callback

    def handle(
        self,
        error: Exception,
        severity: Optional[ErrorSeverity] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> ErrorSeverity:
        """Report *error* and return the severity it was reported at."""

        if severity is None:
            severity = severity_for(error)
        details = dict(context or {})
        event = ErrorOccurredEvent(error=error, severity=severity, context=details)

        # LogRecord reserves names such as "message", so context is nested.
        self._logger.log(severity.value, event.message, extra={"context": details})
        self._events.publish(event)

        if self._ui_callback is not None and severity.surfaces_in_ui:
            self._ui_callback(str(error), severity)
        return severity
