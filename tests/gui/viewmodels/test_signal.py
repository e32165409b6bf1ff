"""Tests for the pure Python Signal and ObservableProperty classes.

These tests run without Qt.
"""

from chipsinput.gui.viewmodels.signal import ObservableProperty, Signal


class TestSignal:
    def test_connect_and_emit(self):
        sig = Signal()
        received = []
        sig.connect(lambda v: received.append(v))

        sig.emit(42)

        assert received == [42]

    def test_connect_returns_handler(self):
        sig = Signal()

        @sig.connect
        def handler(value):
            pass

        assert handler is not None
        assert sig.handler_count == 1

    def test_disconnect(self):
        sig = Signal()
        received = []
        handler = lambda v: received.append(v)
        sig.connect(handler)
        sig.emit(1)

        assert sig.disconnect(handler) is True
        sig.emit(2)

        assert received == [1]

    def test_disconnect_missing_returns_false(self):
        assert Signal().disconnect(lambda: None) is False

    def test_duplicate_connect_ignored(self):
        sig = Signal()
        handler = lambda: None
        sig.connect(handler)
        sig.connect(handler)
        assert sig.handler_count == 1

    def test_handler_exception_does_not_break_others(self):
        sig = Signal("chips")
        received = []

        def bad():
            raise RuntimeError("oops")

        sig.connect(bad)
        sig.connect(lambda: received.append("ok"))
        sig.emit()

        assert received == ["ok"]


class TestObservableProperty:
    def test_initial_value(self):
        assert ObservableProperty("count", 3).value == 3

    def test_change_emits_new_and_old(self):
        prop = ObservableProperty("count", 0)
        changes = []
        prop.changed.connect(lambda new, old: changes.append((new, old)))

        prop.value = 2

        assert changes == [(2, 0)]

    def test_same_value_does_not_emit(self):
        prop = ObservableProperty("count", 1)
        changes = []
        prop.changed.connect(lambda new, old: changes.append(new))

        prop.value = 1

        assert changes == []
