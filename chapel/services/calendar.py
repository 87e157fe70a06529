# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Calendar projection — pure computation, no side effects.
"""

from datetime import date, timedelta
from typing import Optional, Sequence

from chapel.models.domain import CalendarDay, Member

# Monday first, matching date.weekday().
WEEKDAY_NAMES: dict[str, tuple[str, ...]] = {
    "en": (
        "Monday", "Tuesday", "Wednesday", "Thursday",
        "Friday", "Saturday", "Sunday",
    ),
    "pt-BR": (
        "segunda-feira", "terça-feira", "quarta-feira", "quinta-feira",
        "sexta-feira", "sábado", "domingo",
    ),
    "es": (
        "lunes", "martes", "miércoles", "jueves",
        "viernes", "sábado", "domingo",
    ),
}


def weekday_label(day: date, locale: str) -> str:
    names = WEEKDAY_NAMES.get(locale) or WEEKDAY_NAMES["en"]
    return names[day.weekday()]


def starting_index(members: Sequence[Member], current_member_id: Optional[int]) -> int:
    """Position of the current holder in *members*, or 0 if unknown."""
    if current_member_id is None:
        return 0
    for index, member in enumerate(members):
        if member.id == current_member_id:
            return index
    return 0


def project_calendar(
    members: Sequence[Member],
    current_member_id: Optional[int],
    days: int,
    today: date,
    locale: str = "en",
) -> list[CalendarDay]:
    """
    Project the next *days* holders, starting with today's.
    *members* must already be the active list in rotation order; only the
    relative order matters, so gaps in rotation_order are fine.
    Pure function — no I/O, no metrics, no logging.
    """
    if not members or days <= 0:
        return []

    start = starting_index(members, current_member_id)
    count = len(members)
    calendar: list[CalendarDay] = []
    for offset in range(days):
        day = today + timedelta(days=offset)
        calendar.append(
            CalendarDay(
                date=day,
                member=members[(start + offset) % count],
                day_of_week=weekday_label(day, locale),
            )
        )
    return calendar
