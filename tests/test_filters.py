"""Tests for filter criteria evaluation."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.schemas.strings import FilterCriteria, StringRecord
from app.services.analyzer import analyze
from app.services.filters import filter_records, matches


def make_record(value: str) -> StringRecord:
    return StringRecord(**analyze(value), created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))


@pytest.fixture
def records():
    return [make_record(v) for v in ["racecar", "hello world", "a", "noon", "level up", "Abba"]]


def test_no_criteria_keeps_everything_in_order(records):
    assert filter_records(records, FilterCriteria()) == records


def test_palindrome_filter(records):
    result = filter_records(records, FilterCriteria(is_palindrome=True))
    assert [r.value for r in result] == ["racecar", "a", "noon", "Abba"]

    result = filter_records(records, FilterCriteria(is_palindrome=False))
    assert [r.value for r in result] == ["hello world", "level up"]


def test_length_bounds_are_inclusive(records):
    result = filter_records(records, FilterCriteria(min_length=4, max_length=7))
    assert [r.value for r in result] == ["racecar", "noon", "Abba"]


def test_word_count_is_exact(records):
    result = filter_records(records, FilterCriteria(word_count=2))
    assert [r.value for r in result] == ["hello world", "level up"]


def test_contains_character_is_case_sensitive(records):
    assert [r.value for r in filter_records(records, FilterCriteria(contains_character="A"))] == ["Abba"]
    assert "Abba" in [r.value for r in filter_records(records, FilterCriteria(contains_character="a"))]


def test_criteria_combine_with_and(records):
    criteria = FilterCriteria(min_length=3, is_palindrome=True)
    result = filter_records(records, criteria)
    expected = [r for r in records if r.length >= 3 and r.is_palindrome]
    assert result == expected
    assert [r.value for r in result] == ["racecar", "noon", "Abba"]


def test_matches_single_record():
    record = make_record("noon")
    assert matches(record, FilterCriteria(is_palindrome=True, word_count=1, contains_character="n"))
    assert not matches(record, FilterCriteria(contains_character="z"))


def test_applied_echoes_only_set_criteria():
    assert FilterCriteria(min_length=0, is_palindrome=False).applied() == {"min_length": 0, "is_palindrome": False}
    assert FilterCriteria().applied() == {}


@pytest.mark.parametrize(
    "kwargs",
    [{"min_length": -1}, {"word_count": -3}, {"contains_character": "ab"}, {"contains_character": ""}],
)
def test_malformed_criteria_rejected(kwargs):
    with pytest.raises(ValidationError):
        FilterCriteria(**kwargs)
