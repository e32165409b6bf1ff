import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Qt models are exercised without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from chipsinput.core.list_data_source import ListChipDataSource  # noqa: E402
from chipsinput.models.chip import Chip  # noqa: E402


class RecordingObserver:
    """Change and selection observer that records every callback in order."""

    def __init__(self, log=None, name="observer"):
        self.log = [] if log is None else log
        self.name = name

    def on_chip_data_source_changed(self):
        self.log.append((self.name, "changed", None))

    def on_chip_selected(self, chip):
        self.log.append((self.name, "selected", chip.id))

    def on_chip_unselected(self, chip):
        self.log.append((self.name, "unselected", chip.id))

    def events(self, kind=None):
        return [entry for entry in self.log if kind is None or entry[1] == kind]


def make_chip(chip_id, title=None, **kwargs):
    return Chip(id=chip_id, title=title if title is not None else str(chip_id).title(), **kwargs)


def snapshot(data_source):
    return (
        [chip.id for chip in data_source.get_original_chips()],
        [chip.id for chip in data_source.get_filtered_chips()],
        [chip.id for chip in data_source.get_selected_chips()],
    )


@pytest.fixture
def contacts():
    return [
        make_chip("zoe", "Zoe", subtitle="zoe@example.com"),
        make_chip("amy", "Amy", subtitle="amy@example.com"),
        make_chip("bob", "Bob", subtitle="bob@example.com"),
    ]


@pytest.fixture
def data_source():
    return ListChipDataSource()


@pytest.fixture
def loaded(data_source, contacts):
    data_source.set_filterable_chips(contacts)
    return data_source


@pytest.fixture
def observer(data_source):
    recorder = RecordingObserver()
    data_source.add_changed_observer(recorder)
    data_source.add_selection_observer(recorder)
    return recorder


@pytest.fixture
def qt_core_app():
    QtCore = pytest.importorskip("PySide6.QtCore", reason="PySide6 is required for model tests", exc_type=ImportError)
    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])
    yield app
