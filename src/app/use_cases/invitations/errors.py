from libs.result import Error

FORBIDDEN = Error("FORBIDDEN", "Keine Berechtigung")
INVITE_FORBIDDEN = Error("FORBIDDEN", "Keine Berechtigung zum Einladen")
FOREIGN_INVITATION = Error("FORBIDDEN_TENANT", "Keine Berechtigung für diese Einladung")
INVITATION_NOT_FOUND = Error("INVITATION_NOT_FOUND", "Einladung nicht gefunden")
INVITATION_EXPIRED = Error("INVITATION_EXPIRED", "Diese Einladung ist abgelaufen")
INVITE_ALREADY_EXISTS = Error(
    "INVITE_ALREADY_EXISTS",
    "Es existiert bereits eine ausstehende Einladung für diese E-Mail-Adresse",
)
MEMBER_ALREADY_EXISTS = Error(
    "MEMBER_ALREADY_EXISTS", "Ein Mitglied mit dieser E-Mail-Adresse existiert bereits"
)
