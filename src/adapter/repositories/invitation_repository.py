from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import DuplicateEntryError
from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import Invitation, InvitationStatus

from .base import flush


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        stmt = select(Invitation).where(Invitation.token == token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_token_or_id(self, token_or_id: str) -> Optional[Invitation]:
        """Get invitation by token, falling back to its ID"""
        try:
            invitation_id = UUID(token_or_id)
        except ValueError:
            return await self.get_by_token(token_or_id)

        stmt = select(Invitation).where(
            or_(Invitation.token == token_or_id, Invitation.id == invitation_id)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_pending_by_tenant_and_email(
        self, tenant_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by tenant and email"""
        stmt = select(Invitation).where(
            Invitation.tenant_id == tenant_id,
            Invitation.email == email.lower(),
            Invitation.status == InvitationStatus.pending,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_tenant_id(self, tenant_id: UUID) -> List[Invitation]:
        """Get all pending invitations of a tenant"""
        stmt = (
            select(Invitation)
            .where(
                Invitation.tenant_id == tenant_id,
                Invitation.status == InvitationStatus.pending,
            )
            .order_by(Invitation.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await flush(self.session)
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await flush(self.session)
        await self.session.refresh(invitation)
        return invitation

    async def delete(self, invitation: Invitation) -> None:
        """Hard-delete an invitation"""
        await self.session.delete(invitation)
        await flush(self.session)

    async def delete_stale(
        self,
        tenant_id: UUID,
        email: str,
        statuses: Sequence[InvitationStatus] = (InvitationStatus.expired, InvitationStatus.revoked),
    ) -> int:
        """Delete finished invitations for (tenant, email) so a new row can take their status"""
        stmt = delete(Invitation).where(
            Invitation.tenant_id == tenant_id,
            Invitation.email == email.lower(),
            Invitation.status.in_(list(statuses)),
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_by_inviter(self, member_id: UUID) -> int:
        """Delete every invitation authored by a member"""
        stmt = delete(Invitation).where(Invitation.invited_by_id == member_id)
        result = await self.session.execute(stmt)
        return result.rowcount

    async def mark_accepted(self, invitation_id: UUID, accepted_at: datetime) -> bool:
        """Move a pending invitation to accepted; False if it was no longer pending"""
        stmt = (
            update(Invitation)
            .where(
                Invitation.id == invitation_id,
                Invitation.status == InvitationStatus.pending,
            )
            .values(status=InvitationStatus.accepted, accepted_at=accepted_at)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise DuplicateEntryError(str(exc.orig)) from exc
        return result.rowcount == 1
