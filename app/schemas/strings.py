from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Optional, List
from datetime import datetime, timezone


class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    """A stored, analyzed string. Never mutated after creation."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    value: str
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @property
    def properties(self) -> StringProperties:
        return StringProperties(
            length=self.length,
            is_palindrome=self.is_palindrome,
            unique_characters=self.unique_characters,
            word_count=self.word_count,
            sha256_hash=self.sha256_hash,
            character_frequency_map=self.character_frequency_map,
        )


class FilterCriteria(BaseModel):
    """Optional filter constraints, combined with logical AND."""

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = Field(None, ge=0)
    max_length: Optional[int] = Field(None, ge=0)
    word_count: Optional[int] = Field(None, ge=0)
    contains_character: Optional[str] = Field(None, min_length=1, max_length=1)

    def applied(self) -> Dict:
        """Only the criteria that were actually set."""
        return self.model_dump(exclude_none=True)


class StringResponse(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    @classmethod
    def from_record(cls, record: StringRecord) -> "StringResponse":
        return cls(
            id=record.id,
            value=record.value,
            properties=record.properties,
            created_at=record.created_at,
        )


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery
