"""
Event Use Cases

Tenant-scoped event reads and writes, member registrations and the public
event listing.
"""

from .dtos import (
    EventCategoryInfo,
    EventCommand,
    EventDetail,
    EventListResponse,
    EventSummary,
    PublicEvent,
    PublicEventsResponse,
    RegistrationCommand,
    RegistrationInfo,
)
from .get_event_use_case import GetEventUseCase
from .list_events_use_case import EVENT_LIST_FILTERS, ListEventsUseCase
from .list_public_events_use_case import ListPublicEventsUseCase
from .register_for_event_use_case import RegisterForEventUseCase, total_cost_for
from .save_event_use_cases import CreateEventUseCase, UpdateEventUseCase

__all__ = [
    "ListEventsUseCase",
    "GetEventUseCase",
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "RegisterForEventUseCase",
    "ListPublicEventsUseCase",
    "EVENT_LIST_FILTERS",
    "total_cost_for",
    "EventCommand",
    "RegistrationCommand",
    "EventCategoryInfo",
    "EventSummary",
    "EventDetail",
    "EventListResponse",
    "RegistrationInfo",
    "PublicEvent",
    "PublicEventsResponse",
]
