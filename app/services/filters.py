from typing import Iterable, List

from app.schemas.strings import FilterCriteria, StringRecord


def matches(record: StringRecord, criteria: FilterCriteria) -> bool:
    """True when the record satisfies every criterion that is set."""
    if criteria.is_palindrome is not None and record.is_palindrome != criteria.is_palindrome:
        return False

    if criteria.min_length is not None and record.length < criteria.min_length:
        return False

    if criteria.max_length is not None and record.length > criteria.max_length:
        return False

    if criteria.word_count is not None and record.word_count != criteria.word_count:
        return False

    if criteria.contains_character is not None:
        if record.character_frequency_map.get(criteria.contains_character, 0) <= 0:
            return False

    return True


def filter_records(records: Iterable[StringRecord], criteria: FilterCriteria) -> List[StringRecord]:
    """Keep matching records in their original order."""
    return [record for record in records if matches(record, criteria)]
