"""Role definitions shared by the chip list models."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict

from PySide6.QtCore import Qt

from ....models.chip import Chip


class ChipRoles(IntEnum):
    """Custom roles exposed to QML or widgets."""

    ID = Qt.ItemDataRole.UserRole + 1
    TITLE = Qt.ItemDataRole.UserRole + 2
    SUBTITLE = Qt.ItemDataRole.UserRole + 3
    AVATAR_URI = Qt.ItemDataRole.UserRole + 4
    FILTERABLE = Qt.ItemDataRole.UserRole + 5
    CHIP = Qt.ItemDataRole.UserRole + 6


def role_names(base: Dict[int, bytes] | None = None) -> Dict[int, bytes]:
    """Return a mapping of Qt role numbers to byte names."""

    mapping: Dict[int, bytes] = {} if base is None else dict(base)
    mapping.update(
        {
            ChipRoles.ID: b"chipId",
            ChipRoles.TITLE: b"title",
            ChipRoles.SUBTITLE: b"subtitle",
            ChipRoles.AVATAR_URI: b"avatarUri",
            ChipRoles.FILTERABLE: b"filterable",
            ChipRoles.CHIP: b"chip",
        }
    )
    return mapping


def chip_data(chip: Chip, role: int) -> Any:
    """Return the value of *role* for *chip*, or ``None`` for unknown roles."""

    if role in (Qt.ItemDataRole.DisplayRole, ChipRoles.TITLE):
        return chip.title
    if role == Qt.ItemDataRole.ToolTipRole:
        return chip.subtitle or chip.title
    if role == ChipRoles.ID:
        return chip.id
    if role == ChipRoles.SUBTITLE:
        return chip.subtitle
    if role == ChipRoles.AVATAR_URI:
        return chip.avatar_uri
    if role == ChipRoles.FILTERABLE:
        return chip.filterable
    if role == ChipRoles.CHIP:
        return chip
    return None
