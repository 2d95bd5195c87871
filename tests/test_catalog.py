"""Catalog behaviour, run against every store implementation."""

from datetime import timezone

import pytest

from app.errors import InvalidFilter, StringAlreadyExists, StringNotFound, UnparseableQuery
from app.schemas.strings import FilterCriteria
from app.services.analyzer import analyze


def test_submit_then_lookup_matches_direct_analysis(catalog):
    created = catalog.submit("Was it a car")
    found = catalog.lookup("Was it a car")

    expected = analyze("Was it a car")
    for field in ("id", "value", "length", "is_palindrome", "unique_characters",
                  "word_count", "sha256_hash", "character_frequency_map"):
        assert getattr(found, field) == expected[field]
    assert found.id == created.id
    assert found.created_at == created.created_at
    assert found.created_at.tzinfo == timezone.utc


def test_duplicate_submit_is_rejected_without_write(catalog, store):
    catalog.submit("hello")
    with pytest.raises(StringAlreadyExists) as exc_info:
        catalog.submit("hello")

    assert exc_info.value.string_id == analyze("hello")["id"]
    assert [r.value for r in store.all()] == ["hello"]


def test_lookup_missing_raises(catalog):
    with pytest.raises(StringNotFound):
        catalog.lookup("nope")


def test_remove_twice(catalog):
    catalog.submit("bye")
    assert catalog.remove("bye") is True
    with pytest.raises(StringNotFound):
        catalog.remove("bye")


def test_query_preserves_storage_order(catalog):
    for value in ["zz", "level", "abc", "racecar", "x"]:
        catalog.submit(value)

    records, applied = catalog.query({"min_length": 3, "is_palindrome": True})
    assert [r.value for r in records] == ["level", "racecar"]
    assert applied == {"min_length": 3, "is_palindrome": True}


def test_query_without_criteria_returns_everything(catalog):
    for value in ["b", "a", "c"]:
        catalog.submit(value)

    records, applied = catalog.query()
    assert [r.value for r in records] == ["b", "a", "c"]
    assert applied == {}


def test_query_accepts_criteria_model(catalog):
    catalog.submit("hello world")
    catalog.submit("hi")
    records, _ = catalog.query(FilterCriteria(word_count=2))
    assert [r.value for r in records] == ["hello world"]


def test_query_rejects_malformed_criteria(catalog):
    with pytest.raises(InvalidFilter):
        catalog.query({"contains_character": "xy"})


def test_natural_language_query(catalog):
    for value in ["noon", "kayak", "hello", "a"]:
        catalog.submit(value)

    records, parsed = catalog.query_natural_language("palindromic strings longer than 4")
    assert parsed == {"is_palindrome": True, "min_length": 5}
    assert [r.value for r in records] == ["kayak"]


def test_natural_language_zero_matches_is_not_an_error(catalog):
    catalog.submit("hello")
    records, parsed = catalog.query_natural_language("strings containing the letter z")
    assert records == []
    assert parsed == {"contains_character": "z"}


def test_unparseable_query(catalog):
    with pytest.raises(UnparseableQuery) as exc_info:
        catalog.query_natural_language("show me something")
    assert exc_info.value.query == "show me something"
