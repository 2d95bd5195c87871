from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.models.string_analysis import StringAnalysis
from app.schemas.strings import StringRecord
from app.storage.base import DuplicateRecordError

logger = logging.getLogger(__name__)


class SqlStringStore:
    """String store backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, record: StringRecord) -> None:
        """Insert a record; the unique index on id rejects duplicates"""
        db_string = StringAnalysis(
            id=record.id,
            value=record.value,
            length=record.length,
            is_palindrome=record.is_palindrome,
            unique_characters=record.unique_characters,
            word_count=record.word_count,
            sha256_hash=record.sha256_hash,
            character_frequency_map=record.character_frequency_map,
            created_at=record.created_at,
        )
        self.db.add(db_string)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateRecordError(record.id)

    def find_by_id(self, record_id: str) -> Optional[StringRecord]:
        """Get string analysis by ID (hash)"""
        row = self.db.query(StringAnalysis).filter(StringAnalysis.id == record_id).first()
        return StringRecord.model_validate(row) if row else None

    def find_by_value(self, value: str) -> Optional[StringRecord]:
        """Get string analysis by value"""
        row = self.db.query(StringAnalysis).filter(StringAnalysis.value == value).first()
        return StringRecord.model_validate(row) if row else None

    def all(self) -> List[StringRecord]:
        rows = self.db.query(StringAnalysis).order_by(StringAnalysis.seq).all()
        return [StringRecord.model_validate(row) for row in rows]

    def remove_by_value(self, value: str) -> bool:
        """Delete string analysis by value"""
        removed = self.db.query(StringAnalysis).filter(StringAnalysis.value == value).delete()
        self.db.commit()
        if removed:
            logger.debug(f"Removed {removed} row(s) for value {value!r}")
        return removed > 0
