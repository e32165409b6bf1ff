from dataclasses import dataclass

from .bus import Event


@dataclass(kw_only=True)
class DomainEvent(Event):
    source: str = ""


@dataclass(kw_only=True)
class ChipsChangedEvent(DomainEvent):
    selected_count: int = 0
    filtered_count: int = 0


@dataclass(kw_only=True)
class ChipSelectedEvent(DomainEvent):
    chip: object = None


@dataclass(kw_only=True)
class ChipUnselectedEvent(DomainEvent):
    chip: object = None
