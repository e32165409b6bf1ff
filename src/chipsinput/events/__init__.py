from .bus import Event, EventBus, Subscription
from .domain_events import (
    ChipSelectedEvent,
    ChipsChangedEvent,
    ChipUnselectedEvent,
    DomainEvent,
)
from .publisher import ChipEventPublisher

__all__ = [
    "ChipEventPublisher",
    "ChipSelectedEvent",
    "ChipsChangedEvent",
    "ChipUnselectedEvent",
    "DomainEvent",
    "Event",
    "EventBus",
    "Subscription",
]
