"""
Lions Hub Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    BOARD_ROLE_TYPES,
    ROLE_DESCRIPTIONS,
    ROLE_NAMES,
    EventVisibility,
    InvitationStatus,
    LionsYearStatus,
    MemberStatus,
    PlannedEventStatus,
    RegistrationStatus,
    RoleType,
    role_display_name,
)

# Export all entities
from .tenant import Tenant
from .role import Permission, Role, RolePermission
from .member import Member
from .invitation import Invitation
from .event import Event, EventCategory, EventRegistration
from .planning import LionsYear, PlannedEvent

__all__ = [
    # Enums
    "MemberStatus",
    "RoleType",
    "InvitationStatus",
    "EventVisibility",
    "RegistrationStatus",
    "LionsYearStatus",
    "PlannedEventStatus",
    "ROLE_NAMES",
    "ROLE_DESCRIPTIONS",
    "BOARD_ROLE_TYPES",
    "role_display_name",
    # Entities
    "Tenant",
    "Permission",
    "Role",
    "RolePermission",
    "Member",
    "Invitation",
    "Event",
    "EventCategory",
    "EventRegistration",
    "LionsYear",
    "PlannedEvent",
]
