"""
Profile Use Cases

Read and update the signed-in member's own profile.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import MEMBER_NOT_FOUND, load_actor
from src.domain.base import utcnow

from .dtos import ProfileResponse, RoleInfo, UpdatedProfile, UpdateProfileResponse

SUPPORTED_LOCALES = ("de", "en")
DEFAULT_LOCALE = "de"


class GetProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str) -> Result[ProfileResponse]:
        async with self.uow:
            member = await load_actor(self.uow, auth_user_id)
            if member is None:
                return Return.err(MEMBER_NOT_FOUND)

            tenant = await self.uow.tenants.get_by_id(member.tenant_id)
            role = await self.uow.roles.get_by_id(member.role_id) if member.role_id else None

            return Return.ok(
                ProfileResponse(
                    id=member.id,
                    first_name=member.first_name,
                    last_name=member.last_name,
                    email=member.email,
                    phone=member.phone,
                    locale=member.locale,
                    email_notifications=member.email_notifications,
                    avatar_url=member.avatar_url,
                    role=RoleInfo(type=role.type.value, name=role.name) if role else None,
                    tenant_name=tenant.name,
                )
            )


class UpdateProfileUseCase:
    """
    Business Rules:
    - First and last name are required and stored trimmed
    - Phone is optional; blank clears it
    - Locale is de or en, defaulting to de
    - Email notifications default to on
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        auth_user_id: str,
        first_name: Optional[str],
        last_name: Optional[str],
        phone: Optional[str] = None,
        locale: Optional[str] = None,
        email_notifications: Optional[bool] = None,
    ) -> Result[UpdateProfileResponse]:
        first_name = (first_name or "").strip()
        last_name = (last_name or "").strip()
        if not first_name or not last_name:
            return Return.err(
                Error("NAME_REQUIRED", "Vorname und Nachname sind erforderlich")
            )

        if locale and locale not in SUPPORTED_LOCALES:
            return Return.err(Error("INVALID_LOCALE", f"Ungültige Sprache: {locale}"))

        async with self.uow:
            member = await load_actor(self.uow, auth_user_id)
            if member is None:
                return Return.err(MEMBER_NOT_FOUND)

            member.first_name = first_name
            member.last_name = last_name
            member.phone = (phone or "").strip() or None
            member.locale = locale or DEFAULT_LOCALE
            member.email_notifications = (
                True if email_notifications is None else email_notifications
            )
            member.updated_at = utcnow()

            await self.uow.members.update(member)
            await self.uow.commit()

            return Return.ok(
                UpdateProfileResponse(
                    member=UpdatedProfile(
                        id=member.id,
                        first_name=member.first_name,
                        last_name=member.last_name,
                        phone=member.phone,
                        locale=member.locale,
                        email_notifications=member.email_notifications,
                    )
                )
            )
