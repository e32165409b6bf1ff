import logging
from unittest.mock import Mock

import pytest

from chipsinput.errors import ChipInputError, ChipNotFoundError, ChipSourceError
from chipsinput.errors.handler import ErrorHandler, ErrorOccurredEvent, ErrorSeverity, severity_for
from chipsinput.events.bus import EventBus


def test_handle_error_logs_and_publishes():
    logger = Mock(spec=logging.Logger)
    event_bus = Mock(spec=EventBus)
    handler = ErrorHandler(logger, event_bus)

    error = ChipNotFoundError("missing chip")
    handler.handle(error, ErrorSeverity.ERROR, context={"action": "replace"})

    level, message = logger.log.call_args[0]
    assert level == logging.ERROR
    assert message == "ChipNotFoundError: missing chip"
    assert logger.log.call_args[1]["extra"] == {"context": {"action": "replace"}}
    event = event_bus.publish.call_args[0][0]
    assert isinstance(event, ErrorOccurredEvent)
    assert event.error is error
    assert event.severity == ErrorSeverity.ERROR
    assert event.context == {"action": "replace"}


@pytest.mark.parametrize(
    "error,expected",
    [
        (ChipInputError("blank"), ErrorSeverity.WARNING),
        (ChipNotFoundError("gone"), ErrorSeverity.ERROR),
        (ChipSourceError("bad json"), ErrorSeverity.ERROR),
        (RuntimeError("bug"), ErrorSeverity.CRITICAL),
    ],
)
def test_default_severity_follows_error_type(error, expected):
    logger = Mock(spec=logging.Logger)
    handler = ErrorHandler(logger, Mock(spec=EventBus))

    assert severity_for(error) is expected
    assert handler.handle(error) is expected
    assert logger.log.call_args[0][0] == expected.value


def test_explicit_severity_wins():
    logger = Mock(spec=logging.Logger)
    handler = ErrorHandler(logger, Mock(spec=EventBus))

    assert handler.handle(ChipNotFoundError("stale row"), ErrorSeverity.INFO) is ErrorSeverity.INFO
    assert logger.log.call_args[0][0] == logging.INFO


def test_context_is_copied():
    event_bus = Mock(spec=EventBus)
    handler = ErrorHandler(Mock(spec=logging.Logger), event_bus)
    context = {"position": 3}

    handler.handle(ChipNotFoundError("gone"), context=context)
    context["position"] = 4

    assert event_bus.publish.call_args[0][0].context == {"position": 3}


def test_ui_callback():
    handler = ErrorHandler(Mock(spec=logging.Logger), Mock(spec=EventBus))
    callback = Mock()
    handler.register_ui_callback(callback)

    handler.handle(RuntimeError("ui error"))

    callback.assert_called_with("ui error", ErrorSeverity.CRITICAL)


def test_warnings_stay_out_of_ui():
    handler = ErrorHandler(Mock(spec=logging.Logger), Mock(spec=EventBus))
    callback = Mock()
    handler.register_ui_callback(callback)

    handler.handle(ChipInputError("blank text"))

    callback.assert_not_called()


def test_unregister_ui_callback():
    handler = ErrorHandler(Mock(spec=logging.Logger), Mock(spec=EventBus))
    callback = Mock()
    handler.register_ui_callback(callback)
    handler.register_ui_callback(None)

    handler.handle(ChipNotFoundError("gone"))

    callback.assert_not_called()


def test_real_logger_accepts_context(caplog):
    bus = EventBus()
    received = []
    bus.subscribe(ErrorOccurredEvent, received.append)
    handler = ErrorHandler(logging.getLogger("chipsinput.test"), bus)

    with caplog.at_level(logging.ERROR, logger="chipsinput.test"):
        handler.handle(ChipNotFoundError("gone"), context={"message": "clashes with LogRecord"})

    assert len(received) == 1
    assert received[0].message == "ChipNotFoundError: gone"
    assert caplog.records[0].context == {"message": "clashes with LogRecord"}
