"""Event Schemas — request/response models for the event resource.

Invariants:
    - name, date, time, description, location are required and non-blank
    - status is never accepted from the client; it is derived from the date
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from app.core.domain_types import EventStatus
from app.schemas.common import CamelModel, NonBlankStr

DEFAULT_RELATED_EXHIBITION = "Aucune Exposition"
DEFAULT_EVENT_CATEGORY = "Conférence d'Artiste"


class EventWrite(CamelModel):
    """Event create/update payload (update is a full replacement)."""
    name: NonBlankStr
    event_date: date = Field(alias="date")
    time: NonBlankStr
    description: NonBlankStr
    location: NonBlankStr
    banner_image: str = ""
    related_exhibition: str = DEFAULT_RELATED_EXHIBITION
    capacity: str = ""
    price: str = ""
    category: str = DEFAULT_EVENT_CATEGORY

    def document_fields(self) -> dict:
        return {
            "name": self.name,
            "event_date": self.event_date,
            "time": self.time,
            "description": self.description,
            "location": self.location,
            "banner_image": self.banner_image,
            "related_exhibition": self.related_exhibition or DEFAULT_RELATED_EXHIBITION,
            "capacity": self.capacity,
            "price": self.price,
            "category": self.category or DEFAULT_EVENT_CATEGORY,
        }


class EventResponse(CamelModel):
    id: UUID
    name: str
    event_date: date = Field(alias="date")
    time: str
    description: str
    location: str
    banner_image: str
    related_exhibition: str
    capacity: str
    price: str
    category: str
    status: EventStatus
    created_at: datetime
    updated_at: datetime


class EventList(CamelModel):
    events: list[EventResponse]
    count: int
