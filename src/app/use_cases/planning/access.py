"""
Authorization and DTO mapping shared by the planning use cases.
"""

from typing import Optional, Tuple

from libs.result import Error
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import MEMBER_NOT_FOUND, PLANNING_FEATURE, load_actor, require_feature
from src.app.use_cases.events.dtos import EventCategoryInfo
from src.domain.entities import EventCategory, LionsYear, Member, PlannedEvent
from src.domain.permissions import PermissionCode

from .dtos import CategoryInfo, LionsYearSummary, PlannedEventInfo
from .errors import FORBIDDEN, LIONS_YEAR_NOT_FOUND, PLANNED_EVENT_NOT_FOUND


async def authorize(
    uow: UnitOfWork, auth_user_id: str, permission: PermissionCode
) -> Tuple[Optional[Member], Optional[Error]]:
    """
    Signed-in member allowed to use annual planning.

    Requires the planning feature on the member's club and the given permission.
    """
    actor = await load_actor(uow, auth_user_id)
    if actor is None:
        return None, MEMBER_NOT_FOUND

    error = await require_feature(uow, actor.tenant_id, PLANNING_FEATURE)
    if error:
        return None, error

    permissions = await PermissionEvaluator(uow).permissions_for(actor)
    if not permissions.has(permission):
        return None, FORBIDDEN
    return actor, None


async def load_year(
    uow: UnitOfWork, actor: Member, year_id
) -> Tuple[Optional[LionsYear], Optional[Error]]:
    year = await uow.lions_years.get_by_id(year_id)
    if year is None or year.tenant_id != actor.tenant_id:
        return None, LIONS_YEAR_NOT_FOUND
    return year, None


async def load_planned_event(
    uow: UnitOfWork, actor: Member, planned_event_id
) -> Tuple[Optional[PlannedEvent], Optional[LionsYear], Optional[Error]]:
    """Planned event and its year; events of other clubs are reported as missing"""
    planned_event = await uow.planned_events.get_by_id(planned_event_id)
    if planned_event is None:
        return None, None, PLANNED_EVENT_NOT_FOUND
    year = await uow.lions_years.get_by_id(planned_event.lions_year_id)
    if year is None or year.tenant_id != actor.tenant_id:
        return None, None, PLANNED_EVENT_NOT_FOUND
    return planned_event, year, None


def category_dto(category: EventCategory) -> CategoryInfo:
    return CategoryInfo.model_validate(category, from_attributes=True)


async def planned_event_dto(
    uow: UnitOfWork, planned_event: PlannedEvent, cache: dict
) -> PlannedEventInfo:
    if planned_event.category_id not in cache:
        category = await uow.categories.get_by_id(planned_event.category_id)
        cache[planned_event.category_id] = (
            EventCategoryInfo.model_validate(category, from_attributes=True) if category else None
        )
    return PlannedEventInfo(
        id=planned_event.id,
        lions_year_id=planned_event.lions_year_id,
        title=planned_event.title,
        description=planned_event.description,
        date=planned_event.date,
        end_date=planned_event.end_date,
        status=planned_event.status,
        is_mandatory=planned_event.is_mandatory,
        invitation_text=planned_event.invitation_text,
        published_event_id=planned_event.published_event_id,
        category=cache[planned_event.category_id],
    )


def year_summary(year: LionsYear, planned_event_count: int) -> LionsYearSummary:
    return LionsYearSummary(
        id=year.id,
        name=year.name,
        start_date=year.start_date,
        end_date=year.end_date,
        status=year.status,
        planned_event_count=planned_event_count,
        created_at=year.created_at,
        updated_at=year.updated_at,
    )
