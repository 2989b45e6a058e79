from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from src.domain.entities import Invitation, InvitationStatus


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_by_token_or_id(self, token_or_id: str) -> Optional[Invitation]:
        """Get invitation by token, falling back to its ID"""
        pass

    @abstractmethod
    async def get_pending_by_tenant_and_email(
        self, tenant_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by tenant and email"""
        pass

    @abstractmethod
    async def get_pending_by_tenant_id(self, tenant_id: UUID) -> List[Invitation]:
        """Get all pending invitations of a tenant"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def delete(self, invitation: Invitation) -> None:
        """Hard-delete an invitation"""
        pass

    @abstractmethod
    async def delete_stale(
        self,
        tenant_id: UUID,
        email: str,
        statuses: Sequence[InvitationStatus] = (InvitationStatus.expired, InvitationStatus.revoked),
    ) -> int:
        """Delete finished invitations for (tenant, email) so a new row can take their status"""
        pass

    @abstractmethod
    async def delete_by_inviter(self, member_id: UUID) -> int:
        """Delete every invitation authored by a member"""
        pass

    @abstractmethod
    async def mark_accepted(self, invitation_id: UUID, accepted_at: datetime) -> bool:
        """Move a pending invitation to accepted; False if it was no longer pending"""
        pass
