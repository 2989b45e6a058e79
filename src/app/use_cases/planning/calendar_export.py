"""
Calendar Export Use Case

Renders a Lions year as an iCalendar (RFC 5545) document.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Iterable, List, Optional, Tuple
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import PlannedEvent
from src.domain.permissions import PermissionCode

from .access import authorize, load_year

PRODID = "-//Lions Club//Event Management//DE"
DEFAULT_DURATION = timedelta(hours=2)


def format_ics_datetime(value: datetime) -> str:
    """Naive UTC timestamp as YYYYMMDDTHHMMSSZ"""
    return value.strftime("%Y%m%dT%H%M%SZ")


def escape_ics_text(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def build_calendar(
    name: str,
    events: Iterable[Tuple[PlannedEvent, Optional[str]]],
    stamp: datetime,
) -> str:
    """
    VCALENDAR with one VEVENT per (planned event, category name) pair.

    Events without an end last two hours. Lines are joined with CRLF.
    """
    lines: List[str] = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        f"X-WR-CALNAME:{escape_ics_text(name)}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
    ]
    for event, category_name in events:
        end = event.end_date or event.date + DEFAULT_DURATION
        lines += [
            "BEGIN:VEVENT",
            f"UID:{event.id}@lions-club",
            f"DTSTAMP:{format_ics_datetime(stamp)}",
            f"DTSTART:{format_ics_datetime(event.date)}",
            f"DTEND:{format_ics_datetime(end)}",
            f"SUMMARY:{escape_ics_text(event.title)}",
        ]
        if event.description:
            lines.append(f"DESCRIPTION:{escape_ics_text(event.description)}")
        if category_name:
            lines.append(f"CATEGORIES:{escape_ics_text(category_name)}")
        lines.append("END:VEVENT")
    lines.append("END:VCALENDAR")
    return "\r\n".join(lines)


def calendar_filename(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return f"{slug or 'lionsjahr'}.ics"


@dataclass
class CalendarFile:
    filename: str
    content: str


class ExportLionsYearUseCase:
    """Requires planning.read; cancelled planned events are left out"""

    def __init__(self, uow: UnitOfWork, now: Callable = utcnow):
        self.uow = uow
        self.now = now

    async def execute(self, auth_user_id: str, year_id: UUID) -> Result[CalendarFile]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_read)
            if error:
                return Return.err(error)

            year, error = await load_year(self.uow, actor, year_id)
            if error:
                return Return.err(error)

            planned_events = await self.uow.planned_events.get_by_year_id(
                year.id, exclude_cancelled=True
            )
            names = {}
            entries = []
            for event in planned_events:
                if event.category_id not in names:
                    category = await self.uow.categories.get_by_id(event.category_id)
                    names[event.category_id] = category.name if category else None
                entries.append((event, names[event.category_id]))

            content = build_calendar(year.name, entries, self.now())
            return Return.ok(CalendarFile(filename=calendar_filename(year.name), content=content))
