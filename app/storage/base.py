from typing import List, Optional, Protocol

from app.schemas.strings import StringRecord


class DuplicateRecordError(Exception):
    """Raised by a store when a record with the same id is already present."""

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(f"Record {record_id} already exists")


class StringStore(Protocol):
    """Persistence collaborator for analyzed strings. Holds no analysis logic."""

    def insert(self, record: StringRecord) -> None:
        """Store the record, or raise DuplicateRecordError if its id exists.

        The existence check and the write happen as one step.
        """
        ...

    def find_by_id(self, record_id: str) -> Optional[StringRecord]:
        ...

    def find_by_value(self, value: str) -> Optional[StringRecord]:
        ...

    def all(self) -> List[StringRecord]:
        """Every record, in insertion order."""
        ...

    def remove_by_value(self, value: str) -> bool:
        ...
