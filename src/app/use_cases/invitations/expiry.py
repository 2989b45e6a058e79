from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Invitation, InvitationStatus


async def expire_invitation(uow: UnitOfWork, invitation: Invitation) -> None:
    """Persist the lazy PENDING -> EXPIRED transition and commit"""
    await uow.invitations.delete_stale(
        invitation.tenant_id, invitation.email, statuses=(InvitationStatus.expired,)
    )
    invitation.status = InvitationStatus.expired
    await uow.invitations.update(invitation)
    await uow.commit()
