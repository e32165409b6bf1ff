"""Tests for SelectedChipsModel."""

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for model tests", exc_type=ImportError)

from PySide6.QtCore import Qt  # noqa: E402

from chipsinput.core.list_data_source import ListChipDataSource  # noqa: E402
from chipsinput.gui.ui.models import ChipRoles, SelectedChipsModel  # noqa: E402
from conftest import make_chip  # noqa: E402


@pytest.fixture
def model_and_source(qt_core_app):
    data_source = ListChipDataSource()
    data_source.set_filterable_chips(
        [make_chip("zoe", "Zoe"), make_chip("amy", "Amy", subtitle="amy@example.com")]
    )
    model = SelectedChipsModel(data_source)
    yield model, data_source
    model.dispose()


def test_starts_empty(model_and_source):
    model, _ = model_and_source

    assert model.rowCount() == 0


def test_rows_follow_sorted_selection(model_and_source):
    model, data_source = model_and_source

    data_source.take_chip_at(0)
    data_source.take_chip_at(0)

    assert model.rowCount() == 2
    assert model.data(model.index(0, 0), Qt.ItemDataRole.DisplayRole) == "Amy"
    assert model.data(model.index(1, 0), ChipRoles.TITLE) == "Zoe"


def test_roles(model_and_source):
    model, data_source = model_and_source
    data_source.take_chip_at(1)
    index = model.index(0, 0)

    assert model.data(index, ChipRoles.ID) == "amy"
    assert model.data(index, ChipRoles.SUBTITLE) == "amy@example.com"
    assert model.data(index, ChipRoles.FILTERABLE) is True
    assert model.data(index, ChipRoles.CHIP) is model.chip_at(0)
    assert model.data(index, Qt.ItemDataRole.ToolTipRole) == "amy@example.com"


def test_invalid_index_returns_none(model_and_source):
    model, _ = model_and_source

    assert model.data(model.index(5, 0), Qt.ItemDataRole.DisplayRole) is None
    assert model.chip_at(5) is None


def test_count_changed_emitted_on_every_change(model_and_source):
    model, data_source = model_and_source
    counts = []
    model.countChanged.connect(counts.append)

    data_source.take_chip_at(0)
    data_source.clear_selected_chips()

    assert counts == [1, 0]


def test_role_names_include_chip_roles(model_and_source):
    model, _ = model_and_source
    names = model.roleNames()

    assert names[ChipRoles.TITLE] == b"title"
    assert names[ChipRoles.AVATAR_URI] == b"avatarUri"


def test_dispose_detaches_from_source(model_and_source):
    model, data_source = model_and_source
    model.dispose()

    data_source.take_chip_at(0)

    assert model.rowCount() == 0
