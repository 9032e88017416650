"""Event Routes — CRUD for museum events.

Invariants:
    - Every route requires a staff identity
    - Client never sets status; the repository derives it from the date
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_event_repository, parse_path_id, require_staff
from app.core.domain_types import EventId
from app.schemas.event import EventList, EventResponse, EventWrite
from app.services.event_repository import EventRepository

router = APIRouter(
    prefix="/api/v1/events", tags=["events"],
    dependencies=[Depends(require_staff)],
)


@router.get("", response_model=EventList)
async def list_events(repo: EventRepository = Depends(get_event_repository)):
    events = await repo.list_events()
    return EventList(
        events=[EventResponse.model_validate(e) for e in events],
        count=len(events),
    )


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    body: EventWrite, repo: EventRepository = Depends(get_event_repository),
):
    event = await repo.create_event(body.document_fields())
    return EventResponse.model_validate(event)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str, repo: EventRepository = Depends(get_event_repository),
):
    event = await repo.get_event(EventId(parse_path_id("Event", event_id)))
    return EventResponse.model_validate(event)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    body: EventWrite,
    repo: EventRepository = Depends(get_event_repository),
):
    event = await repo.update_event(
        EventId(parse_path_id("Event", event_id)), body.document_fields(),
    )
    return EventResponse.model_validate(event)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: str, repo: EventRepository = Depends(get_event_repository),
):
    await repo.delete_event(EventId(parse_path_id("Event", event_id)))
