"""Default configuration values for chipsinput."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Final, Mapping

DEFAULT_HINT: Final[str] = "Add recipients"

# The selected-chips area grows with its content up to this many rows before
# it starts scrolling.
DEFAULT_MAX_ROWS: Final[int] = 3

DEFAULT_DELETE_ICON_ALPHA: Final[float] = 0.53

# Prefix for the identity of chips created from typed text.
CUSTOM_CHIP_ID_PREFIX: Final[str] = "custom:"


@dataclass(frozen=True)
class ChipOptions:
    """Behavioural options shared by the chip input collaborators."""

    show_details: bool = True
    show_avatar: bool = True
    show_delete: bool = True
    allow_custom_chips: bool = True
    hide_keyboard_on_chip_click: bool = True
    max_rows: int = DEFAULT_MAX_ROWS
    hint: str = DEFAULT_HINT
    delete_icon_alpha: float = DEFAULT_DELETE_ICON_ALPHA

    def __post_init__(self) -> None:
        if self.max_rows < 1:
            raise ValueError(f"max_rows must be at least 1, got {self.max_rows}")
        if not 0.0 <= self.delete_icon_alpha <= 1.0:
            raise ValueError(
                f"delete_icon_alpha must be within [0, 1], got {self.delete_icon_alpha}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> ChipOptions:
        """Build options from *data*, ignoring keys that are not options."""

        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
