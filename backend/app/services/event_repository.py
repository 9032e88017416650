"""Event Repository — CRUD for museum events with date-derived status.

Invariants:
    - status recomputed from event_date on every create and update
    - Update is a full replacement of the writable fields
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EventId
from app.core.errors import ResourceNotFoundError
from app.core.event_status import derive_event_status
from app.models.event import Event

logger = logging.getLogger(__name__)


class EventRepository:

    def __init__(
        self, db: AsyncSession, today: Callable[[], date] = date.today,
    ):
        self.db = db
        self._today = today

    async def list_events(self) -> list[Event]:
        result = await self.db.execute(
            select(Event).order_by(Event.event_date, Event.created_at),
        )
        return list(result.scalars().all())

    async def get_event(self, event_id: EventId) -> Event:
        event = await self.db.get(Event, event_id)
        if event is None:
            raise ResourceNotFoundError("Event", str(event_id))
        return event

    async def create_event(self, fields: dict) -> Event:
        event = Event(status=self._status_for(fields["event_date"]), **fields)
        self.db.add(event)
        await self.db.commit()
        logger.info(f"Event created: {event.name}", extra={"event_id": event.id})
        return event

    async def update_event(self, event_id: EventId, fields: dict) -> Event:
        event = await self.get_event(event_id)
        for key, value in fields.items():
            setattr(event, key, value)
        event.status = self._status_for(event.event_date)
        event.updated_at = datetime.now(timezone.utc)
        await self.db.commit()
        logger.info(f"Event updated: {event.name}", extra={"event_id": event.id})
        return event

    async def delete_event(self, event_id: EventId) -> None:
        event = await self.get_event(event_id)
        await self.db.delete(event)
        await self.db.commit()
        logger.info("Event deleted", extra={"event_id": event_id})

    def _status_for(self, event_date: date) -> str:
        return derive_event_status(event_date, self._today()).value
