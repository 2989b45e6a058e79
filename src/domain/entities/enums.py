"""
Lions Hub Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MemberStatus(str, Enum):
    """Member account status"""

    active = "active"
    inactive = "inactive"
    pending = "pending"


class RoleType(str, Enum):
    """Role type within a club; at most one role per type and tenant"""

    admin = "ADMIN"
    president = "PRESIDENT"
    secretary = "SECRETARY"
    board = "BOARD"
    member = "MEMBER"
    guest = "GUEST"


class InvitationStatus(str, Enum):
    """Invitation status; transitions only leave pending"""

    pending = "pending"
    accepted = "accepted"
    expired = "expired"
    revoked = "revoked"


class EventVisibility(str, Enum):
    """Who may see an event"""

    public = "public"
    members = "members"
    board = "board"


class RegistrationStatus(str, Enum):
    """A member's response to an event"""

    registered = "registered"
    maybe = "maybe"
    declined = "declined"


class LionsYearStatus(str, Enum):
    """Planning state of a Lions year; at most one year per club is active"""

    draft = "draft"
    planning = "planning"
    active = "active"
    archived = "archived"


class PlannedEventStatus(str, Enum):
    planned = "planned"
    confirmed = "confirmed"
    cancelled = "cancelled"


ROLE_NAMES = {
    RoleType.admin: "Administrator",
    RoleType.president: "Präsident",
    RoleType.secretary: "Sekretär",
    RoleType.board: "Vorstand",
    RoleType.member: "Mitglied",
    RoleType.guest: "Gast",
}

ROLE_DESCRIPTIONS = {
    RoleType.admin: "Vollzugriff auf alle Funktionen",
    RoleType.president: "Clubleitung mit erweiterten Rechten",
    RoleType.secretary: "Verwaltung von Events und Mitgliedern",
    RoleType.board: "Vorstandsmitglied mit erweiterten Rechten",
    RoleType.member: "Aktives Clubmitglied",
    RoleType.guest: "Eingeschränkter Zugriff",
}

BOARD_ROLE_TYPES = frozenset(
    {RoleType.admin, RoleType.president, RoleType.secretary, RoleType.board}
)


def role_display_name(role_type: str) -> str:
    """Human-readable role name; unknown types are returned unchanged."""
    try:
        return ROLE_NAMES[RoleType(role_type)]
    except ValueError:
        return role_type
