"""Event Status — derives an event's lifecycle state from its calendar date."""

from datetime import date

from app.core.domain_types import EventStatus


def derive_event_status(event_date: date, today: date) -> EventStatus:
    """Same day → ongoing, past → completed, future → upcoming."""
    if event_date == today:
        return EventStatus.ONGOING
    if event_date < today:
        return EventStatus.COMPLETED
    return EventStatus.UPCOMING
