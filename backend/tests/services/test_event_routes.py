"""Event Routes — verifies CRUD with defaults and date-derived status."""

from datetime import date, timedelta

from app.schemas.event import DEFAULT_EVENT_CATEGORY, DEFAULT_RELATED_EXHIBITION


def _event_payload(event_date: date, **overrides) -> dict:
    payload = {
        "name": "Artist talk",
        "date": event_date.isoformat(),
        "time": "18:00",
        "description": "A conversation with the artist.",
        "location": "Main hall",
    }
    payload.update(overrides)
    return payload


async def test_create_future_event_is_upcoming_with_defaults(client):
    res = await client.post(
        "/api/v1/events", json=_event_payload(date.today() + timedelta(days=30)),
    )
    assert res.status_code == 201
    body = res.json()
    assert body["status"] == "upcoming"
    assert body["relatedExhibition"] == DEFAULT_RELATED_EXHIBITION
    assert body["category"] == DEFAULT_EVENT_CATEGORY


async def test_update_to_past_date_completes_event(client):
    event = (await client.post(
        "/api/v1/events", json=_event_payload(date.today() + timedelta(days=3)),
    )).json()

    res = await client.put(
        f"/api/v1/events/{event['id']}",
        json=_event_payload(date.today() - timedelta(days=3), name="Past talk"),
    )

    assert res.status_code == 200
    assert res.json()["status"] == "completed"
    assert res.json()["name"] == "Past talk"


async def test_client_status_is_ignored(client):
    res = await client.post(
        "/api/v1/events", json=_event_payload(date.today(), status="cancelled"),
    )
    assert res.json()["status"] == "ongoing"


async def test_list_events_ordered_by_date(client):
    later = date.today() + timedelta(days=10)
    sooner = date.today() + timedelta(days=1)
    await client.post("/api/v1/events", json=_event_payload(later, name="Later"))
    await client.post("/api/v1/events", json=_event_payload(sooner, name="Sooner"))

    body = (await client.get("/api/v1/events")).json()

    assert body["count"] == 2
    assert [e["name"] for e in body["events"]] == ["Sooner", "Later"]


async def test_missing_required_field_returns_400(client):
    payload = _event_payload(date.today())
    del payload["time"]
    res = await client.post("/api/v1/events", json=payload)
    assert res.status_code == 400


async def test_delete_event(client):
    event = (await client.post("/api/v1/events", json=_event_payload(date.today()))).json()
    assert (await client.delete(f"/api/v1/events/{event['id']}")).status_code == 204
    assert (await client.get(f"/api/v1/events/{event['id']}")).status_code == 404
