from libs.result import Error

EVENT_NOT_FOUND = Error("EVENT_NOT_FOUND", "Veranstaltung nicht gefunden")
FORBIDDEN = Error("FORBIDDEN", "Keine Berechtigung")
INVALID_DATES = Error("INVALID_DATES", "Das Ende muss nach dem Beginn liegen")
CATEGORY_NOT_FOUND = Error("CATEGORY_NOT_FOUND", "Kategorie nicht gefunden")
