"""
Event Category Use Cases

Event types of a club ("Terminarten"), shared by events and planned events.
"""

import logging
import re
from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.errors import DuplicateEntryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import EventCategory
from src.domain.permissions import PermissionCode

from .access import authorize, category_dto
from .dtos import CategoryCommand, CategoryInfo, CategoryListResponse, DeleteResponse
from .errors import (
    CATEGORY_EXISTS,
    CATEGORY_NOT_FOUND,
    INVALID_COLOR,
    NAME_REQUIRED,
    category_in_use,
)

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#00338D"
COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


def _changes(command: CategoryCommand) -> dict:
    changes = {}
    for name, value in command.model_dump(exclude_unset=True).items():
        if isinstance(value, str):
            value = value.strip() or None
        if value is None and name in ("name", "color", "sort_order"):
            continue
        changes[name] = value
    return changes


class ListCategoriesUseCase:
    """Requires planning.read; ordered by sort order, then name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str) -> Result[CategoryListResponse]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_read)
            if error:
                return Return.err(error)

            categories = await self.uow.categories.list_for_tenant(actor.tenant_id)
            return Return.ok(CategoryListResponse(categories=[category_dto(c) for c in categories]))


class CreateCategoryUseCase:
    """
    Business Rules:
    - Requires planning.edit
    - Name is required and unique within the club
    - Color defaults to Lions blue; sort order defaults to the end of the list
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str, command: CategoryCommand) -> Result[CategoryInfo]:
        changes = _changes(command)
        if not changes.get("name"):
            return Return.err(NAME_REQUIRED)
        if "color" in changes and not COLOR_PATTERN.match(changes["color"]):
            return Return.err(INVALID_COLOR)

        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_edit)
            if error:
                return Return.err(error)

            if await self.uow.categories.get_by_tenant_and_name(actor.tenant_id, changes["name"]):
                return Return.err(CATEGORY_EXISTS)

            if "sort_order" not in changes:
                changes["sort_order"] = await self.uow.categories.max_sort_order(actor.tenant_id) + 1
            changes.setdefault("color", DEFAULT_COLOR)

            category = EventCategory(tenant_id=actor.tenant_id, **changes)
            try:
                await self.uow.categories.create(category)
                await self.uow.commit()
            except DuplicateEntryError:
                return Return.err(CATEGORY_EXISTS)

            logger.info(f"Event category created: {category.id} ({category.name})")
            return Return.ok(category_dto(category))


class UpdateCategoryUseCase:
    """Requires planning.edit; a new name must not be taken by another category"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, auth_user_id: str, category_id: UUID, command: CategoryCommand
    ) -> Result[CategoryInfo]:
        changes = _changes(command)
        if "name" in command.model_fields_set and not changes.get("name"):
            return Return.err(NAME_REQUIRED)
        if "color" in changes and not COLOR_PATTERN.match(changes["color"]):
            return Return.err(INVALID_COLOR)

        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_edit)
            if error:
                return Return.err(error)

            category = await self.uow.categories.get_by_id(category_id)
            if category is None or category.tenant_id != actor.tenant_id:
                return Return.err(CATEGORY_NOT_FOUND)

            name = changes.get("name")
            if name and name != category.name:
                other = await self.uow.categories.get_by_tenant_and_name(actor.tenant_id, name)
                if other is not None and other.id != category.id:
                    return Return.err(CATEGORY_EXISTS)

            for field_name, value in changes.items():
                setattr(category, field_name, value)

            try:
                await self.uow.categories.update(category)
                await self.uow.commit()
            except DuplicateEntryError:
                return Return.err(CATEGORY_EXISTS)

            return Return.ok(category_dto(category))


class DeleteCategoryUseCase:
    """Requires planning.edit; refused while planned events or events use the category"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str, category_id: UUID) -> Result[DeleteResponse]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_edit)
            if error:
                return Return.err(error)

            category = await self.uow.categories.get_by_id(category_id)
            if category is None or category.tenant_id != actor.tenant_id:
                return Return.err(CATEGORY_NOT_FOUND)

            planned_events = await self.uow.planned_events.count_by_category(category.id)
            events = await self.uow.categories.count_events(category.id)
            if planned_events or events:
                return Return.err(category_in_use(planned_events, events))

            await self.uow.categories.delete(category)
            await self.uow.commit()
            logger.info(f"Event category deleted: {category.id} ({category.name})")
            return Return.ok(DeleteResponse())
