"""Cross-Reference Handling — identifier parsing and set diff for the Artwork↔Exhibition link.

Invariants:
    - A reference is valid iff it is a string that parses as a UUID (or a UUID);
      any other JSON value is malformed. Canonical form is str(UUID)
    - Lenient mode drops malformed references; strict mode raises InvalidReferenceError
    - unique_references preserves first-occurrence order
    - diff_references: added = new − old, removed = old − new (no overlap)

Design Decisions:
    - Pure functions, no IO: the synchronizer in services/ applies the diff
    - Strictness passed as an argument, not read from settings (core never imports config)
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from uuid import UUID

from app.core.errors import InvalidReferenceError


def parse_reference(
    value: object, field_name: str = "reference", strict: bool = False,
) -> UUID | None:
    """Parse one reference. None/empty means absent; malformed drops or raises."""
    if value is None or value == "":
        return None
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        try:
            return UUID(value)
        except ValueError:
            pass
    if strict:
        raise InvalidReferenceError(field_name, value)
    return None


def parse_references(
    values: Iterable[object] | None, field_name: str = "references",
    strict: bool = False,
) -> list[UUID]:
    """Parse a reference list, dropping malformed entries and duplicates.

    Inside a list an empty entry is malformed too: strict mode rejects it.
    """
    refs = []
    for value in values or []:
        if strict and (value is None or value == ""):
            raise InvalidReferenceError(field_name, value)
        ref = parse_reference(value, field_name, strict)
        if ref is not None:
            refs.append(ref)
    return unique_references(refs)


def unique_references(refs: Iterable[UUID]) -> list[UUID]:
    return list(dict.fromkeys(refs))


@dataclass(frozen=True)
class ReferenceDiff:
    """Result of comparing an old and a new reference set."""
    added: list[UUID] = field(default_factory=list)
    removed: list[UUID] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


def diff_references(old: Iterable[UUID], new: Iterable[UUID]) -> ReferenceDiff:
    """Set difference in both directions, order taken from each input."""
    old_list = unique_references(old)
    new_list = unique_references(new)
    old_set, new_set = set(old_list), set(new_list)
    return ReferenceDiff(
        added=[ref for ref in new_list if ref not in old_set],
        removed=[ref for ref in old_list if ref not in new_set],
    )
