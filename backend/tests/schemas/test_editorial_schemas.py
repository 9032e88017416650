"""Editorial Schemas — verifies event and post payload validation.

Tests:
    - Event "date" alias, default related exhibition and category
    - Post images truncated to three
    - PostUpdate.changed_fields only reports supplied values
"""

from datetime import date

import pytest
from pydantic import ValidationError

from app.schemas.event import (
    DEFAULT_EVENT_CATEGORY, DEFAULT_RELATED_EXHIBITION, EventWrite,
)
from app.schemas.post import MAX_POST_IMAGES, PostCreate, PostUpdate


def _event_payload(**overrides) -> dict:
    payload = {
        "name": "Artist talk",
        "date": "2026-11-02",
        "time": "18:00",
        "description": "A conversation with the artist.",
        "location": "Main hall",
    }
    payload.update(overrides)
    return payload


def test_event_date_read_from_date_key():
    body = EventWrite.model_validate(_event_payload())
    assert body.event_date == date(2026, 11, 2)


def test_event_defaults_applied():
    fields = EventWrite.model_validate(_event_payload()).document_fields()
    assert fields["related_exhibition"] == DEFAULT_RELATED_EXHIBITION
    assert fields["category"] == DEFAULT_EVENT_CATEGORY


def test_event_empty_category_falls_back_to_default():
    fields = EventWrite.model_validate(
        _event_payload(category="", relatedExhibition=""),
    ).document_fields()
    assert fields["category"] == DEFAULT_EVENT_CATEGORY
    assert fields["related_exhibition"] == DEFAULT_RELATED_EXHIBITION


def test_event_missing_location_rejected():
    payload = _event_payload()
    del payload["location"]
    with pytest.raises(ValidationError):
        EventWrite.model_validate(payload)


def test_post_images_truncated():
    body = PostCreate.model_validate({
        "title": "Opening night",
        "author": "Curator",
        "content": "Photos from the opening.",
        "category": "news",
        "images": ["a.jpg", "b.jpg", "c.jpg", "d.jpg"],
    })
    assert body.images == ["a.jpg", "b.jpg", "c.jpg"]
    assert len(body.images) == MAX_POST_IMAGES
    assert body.status == "draft"


def test_post_update_reports_only_supplied_fields():
    body = PostUpdate.model_validate({"status": "published", "title": None})
    assert body.changed_fields() == {"status": "published"}


def test_post_update_truncates_images():
    body = PostUpdate.model_validate({"images": ["1", "2", "3", "4", "5"]})
    assert body.changed_fields() == {"images": ["1", "2", "3"]}
