"""Domain Types — verifies identity wrappers and enum values."""

from uuid import uuid4

from app.core.domain_types import (
    ArtworkId, AudioLanguage, DescriptionBlockKind, EventStatus, ExhibitionId,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert ArtworkId(uid) == uid
    assert ExhibitionId(uid) == uid


def test_description_block_has_two_kinds():
    assert {k.value for k in DescriptionBlockKind} == {"heading", "paragraph"}


def test_audio_languages():
    assert {lang.value for lang in AudioLanguage} == {"en", "fr", "wo"}


def test_event_status_values():
    assert EventStatus("upcoming") is EventStatus.UPCOMING
    assert EventStatus.CANCELLED.value == "cancelled"
