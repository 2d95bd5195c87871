from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple, Union
import logging

from pydantic import ValidationError

from app.errors import InvalidFilter, StringAlreadyExists, StringNotFound, UnparseableQuery
from app.schemas.strings import FilterCriteria, StringRecord
from app.services.analyzer import analyze
from app.services.filters import filter_records
from app.services.nl_parser import parse_natural_language_query
from app.storage.base import DuplicateRecordError, StringStore

logger = logging.getLogger(__name__)


class CatalogService:
    """Creates, looks up, removes and queries analyzed strings."""

    def __init__(self, store: StringStore):
        self.store = store

    def submit(self, value: str) -> StringRecord:
        """
        Analyze and store a string.
        Raises StringAlreadyExists if a record with the same id is stored.
        """
        record = StringRecord(**analyze(value), created_at=datetime.now(timezone.utc))

        try:
            self.store.insert(record)
        except DuplicateRecordError:
            logger.warning(f"Rejected duplicate string {record.id}")
            raise StringAlreadyExists(record.id)

        logger.info(f"Stored string {record.id} (length={record.length})")
        return record

    def lookup(self, value: str) -> StringRecord:
        record = self.store.find_by_value(value)
        if record is None:
            raise StringNotFound(value)
        return record

    def remove(self, value: str) -> bool:
        if not self.store.remove_by_value(value):
            raise StringNotFound(value)
        logger.info(f"Deleted string {value!r}")
        return True

    def query(
        self, criteria: Optional[Union[FilterCriteria, Dict]] = None
    ) -> Tuple[List[StringRecord], Dict]:
        """
        Filter every stored record by the given criteria.
        Returns the matches (in storage order) and the criteria actually applied.
        """
        criteria = self._coerce_criteria(criteria)
        matched = filter_records(self.store.all(), criteria)
        return matched, criteria.applied()

    def query_natural_language(self, text: str) -> Tuple[List[StringRecord], Dict]:
        """
        Interpret a free-text query and run it.
        Raises UnparseableQuery when no pattern recognized anything.
        """
        parsed = parse_natural_language_query(text)
        if not parsed:
            logger.warning(f"Could not interpret query {text!r}")
            raise UnparseableQuery(text)

        logger.info(f"Interpreted {text!r} as {parsed}")
        matched, _ = self.query(parsed)
        return matched, parsed

    @staticmethod
    def _coerce_criteria(criteria: Optional[Union[FilterCriteria, Dict]]) -> FilterCriteria:
        if criteria is None:
            return FilterCriteria()
        if isinstance(criteria, FilterCriteria):
            return criteria
        try:
            return FilterCriteria(**criteria)
        except ValidationError as e:
            raise InvalidFilter(str(e))
