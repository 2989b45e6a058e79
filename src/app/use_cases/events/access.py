"""
Event visibility and DTO mapping shared by the event use cases.
"""

from typing import List, Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import BOARD_ROLE_TYPES, Event, EventVisibility, RoleType
from src.domain.permissions import PermissionCode, PermissionSet

from .dtos import EventCategoryInfo, EventSummary


def visible_tiers(role_type: Optional[RoleType], permissions: PermissionSet) -> List[EventVisibility]:
    """
    Visibility tiers a member may see.

    Public events are visible to everyone, member events need events.read.all
    or a board-level role, board events need a board-level role.
    """
    board_level = role_type in BOARD_ROLE_TYPES
    tiers = [EventVisibility.public]
    if board_level or permissions.has(PermissionCode.events_read_all):
        tiers.append(EventVisibility.members)
    if board_level:
        tiers.append(EventVisibility.board)
    return tiers


async def category_info(uow: UnitOfWork, event: Event, cache: dict) -> Optional[EventCategoryInfo]:
    if event.category_id is None:
        return None
    if event.category_id not in cache:
        category = await uow.categories.get_by_id(event.category_id)
        cache[event.category_id] = (
            EventCategoryInfo.model_validate(category, from_attributes=True) if category else None
        )
    return cache[event.category_id]


def event_summary(
    event: Event, category: Optional[EventCategoryInfo], registration_count: int
) -> EventSummary:
    return EventSummary(
        id=event.id,
        title=event.title,
        title_en=event.title_en,
        type=event.type,
        start_date=event.start_date,
        end_date=event.end_date,
        location=event.location,
        is_online=event.is_online,
        visibility=event.visibility,
        is_cancelled=event.is_cancelled,
        registration_required=event.registration_required,
        max_participants=event.max_participants,
        category=category,
        registration_count=registration_count,
    )
