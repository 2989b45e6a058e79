"""
Invitation Use Cases

Invite, list, inspect, accept, resend and revoke club invitations.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .create_invitation_use_case import CreateInvitationUseCase
from .dtos import (
    AcceptInvitationResponse,
    CreatedInvitation,
    CreateInvitationResponse,
    InvitationDetails,
    InvitationListResponse,
    InvitationSummary,
    ResendInvitationResponse,
    RevokeInvitationResponse,
)
from .get_invitation_use_case import GetInvitationUseCase
from .list_invitations_use_case import ListInvitationsUseCase
from .resend_invitation_use_case import ResendInvitationUseCase
from .revoke_invitation_use_case import RevokeInvitationUseCase

__all__ = [
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    "GetInvitationUseCase",
    "AcceptInvitationUseCase",
    "ResendInvitationUseCase",
    "RevokeInvitationUseCase",
    "CreateInvitationResponse",
    "CreatedInvitation",
    "InvitationListResponse",
    "InvitationSummary",
    "InvitationDetails",
    "AcceptInvitationResponse",
    "ResendInvitationResponse",
    "RevokeInvitationResponse",
]
