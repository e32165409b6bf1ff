"""The chip entity tracked by the chip data sources."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional

from ..config import CUSTOM_CHIP_ID_PREFIX


@dataclass(eq=False)
class Chip:
    """A selectable item such as a contact or a tag.

    Two chips are the same entity when their ``id`` values are equal; every
    other field, ``filterable`` included, is ignored by ``==`` and ``hash()``.
    The data source flips ``filterable`` on chips that already sit inside its
    sets, so the flag must never take part in hashing.
    """

    id: Hashable
    title: str
    subtitle: Optional[str] = None
    avatar_uri: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    filterable: bool = False

    @classmethod
    def custom(cls, text: str) -> Chip:
        """Return a non-filterable chip built from user-typed *text*."""

        title = text.strip()
        return cls(id=f"{CUSTOM_CHIP_ID_PREFIX}{uuid.uuid4()}", title=title, filterable=False)

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.title, str(self.id))

    @property
    def is_custom(self) -> bool:
        return isinstance(self.id, str) and self.id.startswith(CUSTOM_CHIP_ID_PREFIX)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chip):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: Chip) -> bool:
        if not isinstance(other, Chip):
            return NotImplemented
        return self.sort_key < other.sort_key
