"""ORM Models — SQLAlchemy declarative models for all collections.

Invariants:
    - All models inherit from Base (db/base.py)
    - Artwork and Exhibition are linked by id columns only, never by ORM relationship()

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from app.models.artwork import Artwork  # noqa: F401
from app.models.exhibition import Exhibition  # noqa: F401
from app.models.event import Event  # noqa: F401
from app.models.post import Post  # noqa: F401
