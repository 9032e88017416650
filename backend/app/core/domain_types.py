"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ArtworkId, ExhibitionId, EventId, PostId wrap UUIDs; repository and sync signatures
      take them, bare UUID only where a helper spans collections (slug index)
    - AudioLanguage is the closed set of audio guide languages (audioUrls keys)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ArtworkId = NewType("ArtworkId", UUID)
ExhibitionId = NewType("ExhibitionId", UUID)
EventId = NewType("EventId", UUID)
PostId = NewType("PostId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class DescriptionBlockKind(str, Enum):
    """Tagged variant of an artwork description block."""
    HEADING = "heading"
    PARAGRAPH = "paragraph"


class AudioLanguage(str, Enum):
    """Languages an artwork audio guide can be recorded in."""
    EN = "en"
    FR = "fr"
    WO = "wo"


class EventStatus(str, Enum):
    """Event lifecycle — derived from the event date, CANCELLED is never derived."""
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
