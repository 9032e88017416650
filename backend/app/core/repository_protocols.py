"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO;
      the shell orchestrates the async calls around the pure slug logic
"""

from typing import Protocol
from uuid import UUID


class SlugIndex(Protocol):
    """Contract for slug lookups within one collection — implemented by shell."""
    async def slug_taken(
        self, slug: str, exclude_id: UUID | None = None,
    ) -> bool: ...
