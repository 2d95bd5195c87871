from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional
import logging

from app.errors import StringAlreadyExists, StringNotFound, UnparseableQuery
from app.schemas.strings import (
    FilterCriteria,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringResponse,
)
from app.services.catalog import CatalogService
from app.storage import StringStore, get_store

router = APIRouter()
logger = logging.getLogger(__name__)


def get_catalog(store: StringStore = Depends(get_store)) -> CatalogService:
    """Dependency to provide a catalog bound to the request's store."""
    return CatalogService(store)


@router.post("/strings", response_model=StringResponse, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, catalog: CatalogService = Depends(get_catalog)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    try:
        record = catalog.submit(string_data.value)
    except StringAlreadyExists as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return StringResponse.from_record(record)


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None, ge=0),
    max_length: Optional[int] = Query(None, ge=0),
    word_count: Optional[int] = Query(None, ge=0),
    contains_character: Optional[str] = Query(None, min_length=1, max_length=1),
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Get all strings with optional filtering.
    """
    criteria = FilterCriteria(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    records, filters_applied = catalog.query(criteria)

    data = [StringResponse.from_record(r) for r in records]
    return StringListResponse(data=data, count=len(data), filters_applied=filters_applied)


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query"),
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    try:
        records, parsed_filters = catalog.query_natural_language(query)
    except UnparseableQuery as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    data = [StringResponse.from_record(r) for r in records]
    return NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=parsed_filters),
    )


@router.get("/strings/{string_value:path}", response_model=StringResponse)
def get_string(string_value: str, catalog: CatalogService = Depends(get_catalog)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    try:
        record = catalog.lookup(string_value)
    except StringNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return StringResponse.from_record(record)


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, catalog: CatalogService = Depends(get_catalog)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    try:
        catalog.remove(string_value)
    except StringNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return None
