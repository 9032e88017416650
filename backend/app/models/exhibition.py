"""Exhibition ORM — a titled show holding a set of artwork references.

Invariants:
    - slug is unique within the exhibitions table
    - artworks is a JSON array of canonical UUID strings with no duplicates
    - Every artwork whose exhibition equals this id appears in artworks (maintained by RelationshipSync)

Design Decisions:
    - JSON array over an association table: the set is always read and replaced whole
      (diff-and-sync), order carries no meaning
    - Always assign a new list — JSON columns do not track in-place mutation
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Exhibition(Base):
    """Exhibition record — owner side of the Artwork↔Exhibition relationship."""
    __tablename__ = "exhibitions"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    slug: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    subtitle: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str] = mapped_column(Text, nullable=False)
    artworks: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    @property
    def artwork_ids(self) -> list[uuid.UUID]:
        """Stored references as UUIDs; unparseable legacy entries are skipped."""
        ids = []
        for value in self.artworks or []:
            try:
                ids.append(uuid.UUID(str(value)))
            except ValueError:
                continue
        return ids
