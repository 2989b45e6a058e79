"""
Permission catalog and capability checks.

Codes are a closed enumeration. Every code is ``<resource>.<action>`` where
the action may itself contain dots (``members.read.full``).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, NamedTuple

from .entities.enums import RoleType

logger = logging.getLogger(__name__)


class PermissionCode(str, Enum):
    events_read = "events.read"
    events_read_all = "events.read.all"
    events_create = "events.create"
    events_edit = "events.edit"
    events_delete = "events.delete"
    events_register = "events.register"

    members_read = "members.read"
    members_read_full = "members.read.full"
    members_create = "members.create"
    members_edit = "members.edit"
    members_delete = "members.delete"
    members_invite = "members.invite"

    planning_read = "planning.read"
    planning_edit = "planning.edit"
    planning_admin = "planning.admin"

    website_read = "website.read"
    website_edit = "website.edit"

    settings_read = "settings.read"
    settings_edit = "settings.edit"

    admin_users = "admin.users"
    admin_roles = "admin.roles"
    admin_tenant = "admin.tenant"

    @property
    def resource(self) -> str:
        return self.value.split(".", 1)[0]

    @property
    def action(self) -> str:
        return self.value.split(".", 1)[1]


class PermissionInfo(NamedTuple):
    code: PermissionCode
    name: str
    description: str


PERMISSION_CATALOG: List[PermissionInfo] = [
    PermissionInfo(PermissionCode.events_read, "Events ansehen", "Kann öffentliche Events sehen"),
    PermissionInfo(PermissionCode.events_read_all, "Alle Events ansehen", "Kann alle Events inkl. interner sehen"),
    PermissionInfo(PermissionCode.events_create, "Events erstellen", "Kann neue Events anlegen"),
    PermissionInfo(PermissionCode.events_edit, "Events bearbeiten", "Kann Events bearbeiten"),
    PermissionInfo(PermissionCode.events_delete, "Events löschen", "Kann Events löschen"),
    PermissionInfo(PermissionCode.events_register, "Für Events anmelden", "Kann sich für Events anmelden"),
    PermissionInfo(PermissionCode.members_read, "Mitglieder ansehen", "Kann Mitgliederliste sehen (Basis)"),
    PermissionInfo(PermissionCode.members_read_full, "Mitglieder Details", "Kann alle Mitglieder-Details sehen"),
    PermissionInfo(PermissionCode.members_create, "Mitglieder anlegen", "Kann Mitglieder manuell anlegen"),
    PermissionInfo(PermissionCode.members_edit, "Mitglieder bearbeiten", "Kann Mitglieder bearbeiten"),
    PermissionInfo(PermissionCode.members_delete, "Mitglieder löschen", "Kann Mitglieder löschen"),
    PermissionInfo(PermissionCode.members_invite, "Mitglieder einladen", "Kann neue Mitglieder einladen"),
    PermissionInfo(PermissionCode.planning_read, "Jahresplanung ansehen", "Kann Jahresplanung einsehen"),
    PermissionInfo(PermissionCode.planning_edit, "Jahresplanung bearbeiten", "Kann Jahresplanung bearbeiten"),
    PermissionInfo(PermissionCode.planning_admin, "Jahresplanung verwalten", "Kann Lions-Jahre anlegen/löschen"),
    PermissionInfo(PermissionCode.website_read, "Website ansehen", "Kann Website-Einstellungen sehen"),
    PermissionInfo(PermissionCode.website_edit, "Website bearbeiten", "Kann Website-Inhalte bearbeiten"),
    PermissionInfo(PermissionCode.settings_read, "Einstellungen ansehen", "Kann Club-Einstellungen sehen"),
    PermissionInfo(PermissionCode.settings_edit, "Einstellungen bearbeiten", "Kann Club-Einstellungen ändern"),
    PermissionInfo(PermissionCode.admin_users, "Benutzer verwalten", "Kann Benutzer und Rollen verwalten"),
    PermissionInfo(PermissionCode.admin_roles, "Rollen verwalten", "Kann Rollen-Berechtigungen anpassen"),
    PermissionInfo(PermissionCode.admin_tenant, "Club administrieren", "Volle Admin-Rechte"),
]

# Grant grammar: "*" (everything), "<resource>.*" or an exact code
ROLE_GRANTS: Dict[RoleType, List[str]] = {
    RoleType.admin: ["*"],
    RoleType.president: ["events.*", "members.*", "planning.*", "website.*", "settings.*"],
    RoleType.secretary: ["events.*", "members.*", "planning.*", "website.*", "settings.read"],
    RoleType.board: [
        "events.*",
        "members.read",
        "members.read.full",
        "members.invite",
        "planning.read",
        "planning.edit",
        "website.read",
    ],
    RoleType.member: ["events.read.all", "events.register", "members.read", "planning.read"],
    RoleType.guest: ["events.read", "members.read"],
}


def expand_grants(grants: Iterable[str]) -> FrozenSet[PermissionCode]:
    """Resolve a role's grant list against the catalog."""
    codes = set()
    for grant in grants:
        if grant == "*":
            codes.update(PermissionCode)
        elif grant.endswith(".*"):
            resource = grant[: -len(".*")]
            codes.update(c for c in PermissionCode if c.resource == resource)
        else:
            codes.add(PermissionCode(grant))
    return frozenset(codes)


@dataclass(frozen=True)
class PermissionSet:
    codes: FrozenSet[PermissionCode] = frozenset()

    @classmethod
    def from_codes(cls, raw_codes: Iterable[str]) -> "PermissionSet":
        codes = set()
        for raw in raw_codes:
            try:
                codes.add(PermissionCode(raw))
            except ValueError:
                logger.warning(f"Ignoring unknown permission code: {raw}")
        return cls(frozenset(codes))

    def has(self, code: PermissionCode) -> bool:
        return code in self.codes

    def has_any_on(self, resource: str, *, excluding: Iterable[PermissionCode] = ()) -> bool:
        excluded = set(excluding)
        return any(c.resource == resource and c not in excluded for c in self.codes)

    def can_manage_invitations(self) -> bool:
        # Any members.* capability beyond plain reading counts
        return (
            self.has(PermissionCode.members_invite)
            or self.has(PermissionCode.admin_users)
            or self.has_any_on("members", excluding=[PermissionCode.members_read])
        )

    def can_delete_members(self) -> bool:
        return self.has(PermissionCode.admin_users) or self.has(PermissionCode.members_delete)
