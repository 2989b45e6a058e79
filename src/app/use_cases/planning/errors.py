from libs.result import Error

FORBIDDEN = Error("FORBIDDEN", "Keine Berechtigung")
NAME_REQUIRED = Error("NAME_REQUIRED", "Name ist erforderlich")
INVALID_COLOR = Error("INVALID_COLOR", "Ungültige Farbe. Erwartet wird #RRGGBB")
INVALID_DATES = Error("INVALID_DATES", "Das Ende muss nach dem Beginn liegen")
CATEGORY_NOT_FOUND = Error("CATEGORY_NOT_FOUND", "Terminart nicht gefunden")
CATEGORY_EXISTS = Error("CATEGORY_EXISTS", "Eine Terminart mit diesem Namen existiert bereits")
LIONS_YEAR_NOT_FOUND = Error("LIONS_YEAR_NOT_FOUND", "Lionsjahr nicht gefunden")
LIONS_YEAR_ARCHIVED = Error(
    "LIONS_YEAR_ARCHIVED", "Archivierte Lionsjahre können nicht bearbeitet werden"
)
LIONS_YEAR_NOT_DRAFT = Error(
    "LIONS_YEAR_NOT_DRAFT", "Nur Lionsjahre im Entwurf-Status können gelöscht werden"
)
PLANNED_EVENT_NOT_FOUND = Error("PLANNED_EVENT_NOT_FOUND", "Termin nicht gefunden")
ALREADY_PUBLISHED = Error("ALREADY_PUBLISHED", "Termin wurde bereits veröffentlicht")
TITLE_REQUIRED = Error("TITLE_REQUIRED", "Titel ist erforderlich")
DATE_REQUIRED = Error("DATE_REQUIRED", "Datum ist erforderlich")


def category_in_use(planned_events: int, events: int) -> Error:
    if planned_events:
        reason = f"{planned_events} geplante(r) Termin(e)"
    else:
        reason = f"{events} Veranstaltung(en)"
    return Error(
        "CATEGORY_IN_USE",
        f"Diese Terminart kann nicht gelöscht werden, da {reason} zugeordnet sind",
        details={"plannedEvents": planned_events, "events": events},
    )
