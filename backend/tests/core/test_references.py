"""Cross-Reference Handling — verifies parsing policy and set diffing.

Tests:
    - None/empty → absent; valid string → UUID
    - Lenient mode drops malformed ids; strict mode raises InvalidReferenceError
    - parse_references de-duplicates, keeping first-occurrence order
    - diff_references computes added/removed in both directions
"""

from uuid import uuid4

import pytest

from app.core.errors import InvalidReferenceError
from app.core.references import (
    diff_references, parse_reference, parse_references, unique_references,
)


def test_absent_values_parse_to_none():
    assert parse_reference(None) is None
    assert parse_reference("") is None


def test_valid_string_parses_to_uuid():
    ref = uuid4()
    assert parse_reference(str(ref)) == ref
    assert parse_reference(ref) == ref


def test_malformed_reference_dropped_in_lenient_mode():
    assert parse_reference("not-an-id") is None


def test_malformed_reference_raises_in_strict_mode():
    with pytest.raises(InvalidReferenceError) as exc_info:
        parse_reference("not-an-id", "exhibition", strict=True)
    assert exc_info.value.field == "exhibition"
    assert exc_info.value.http_status == 400


def test_parse_references_drops_invalid_and_duplicates():
    a, b = uuid4(), uuid4()
    result = parse_references([str(a), "bogus", str(b), str(a), None])
    assert result == [a, b]


def test_parse_references_strict_rejects_first_bad_entry():
    with pytest.raises(InvalidReferenceError):
        parse_references([str(uuid4()), "bogus"], "artworks", strict=True)


def test_parse_references_accepts_none():
    assert parse_references(None) == []


def test_unique_references_preserves_order():
    a, b = uuid4(), uuid4()
    assert unique_references([b, a, b]) == [b, a]


def test_diff_references_both_directions():
    a, b, c = uuid4(), uuid4(), uuid4()
    diff = diff_references([a, b], [b, c])
    assert diff.added == [c]
    assert diff.removed == [a]
    assert not diff.is_empty


def test_diff_of_identical_sets_is_empty():
    a, b = uuid4(), uuid4()
    assert diff_references([a, b], [b, a]).is_empty


def test_non_string_reference_dropped_in_lenient_mode():
    assert parse_reference(12345) is None
    assert parse_reference({"id": "x"}) is None


def test_numeric_reference_rejected_in_strict_mode():
    with pytest.raises(InvalidReferenceError):
        parse_reference(12345, "exhibition", strict=True)


def test_null_list_entry_rejected_in_strict_mode():
    with pytest.raises(InvalidReferenceError):
        parse_references([str(uuid4()), None], "artworks", strict=True)


def test_mixed_type_list_keeps_only_valid_ids():
    a = uuid4()
    assert parse_references([str(a), 42, None, True]) == [a]
