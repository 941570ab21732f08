"""
Time entry router.
Handles CRUD operations for tracked work sessions.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from tracker.application.dto.time_entry_dto import (
    CreateTimeEntryRequestDTO,
    TimeEntryDeletedResponseDTO,
    TimeEntryResponseDTO,
    UpdateTimeEntryRequestDTO,
)
from tracker.application.use_cases.base_use_case import ByIdRequest
from tracker.application.use_cases.time_entry_use_cases import (
    CreateTimeEntryUseCase,
    DeleteTimeEntryUseCase,
    GetTimeEntryUseCase,
    ListTimeEntriesUseCase,
    UpdateTimeEntryUseCase,
)
from tracker.infrastructure.repositories import SQLAlchemyTimeEntryRepository
from tracker.infrastructure.web.dependencies import get_time_entry_repository
from tracker.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()

Repository = Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TimeEntryResponseDTO)
async def create_time_entry(request: CreateTimeEntryRequestDTO, repository: Repository):
    """
    Record a work session.

    - **freelancerId**: Freelancer identifier (required)
    - **clientName**: Client name (required)
    - **startTime** / **endTime**: ISO 8601 timestamps, end after start (required)
    - **billableRate**: Hourly rate, not negative (required)
    - **project**, **description**: Optional
    """
    result = await CreateTimeEntryUseCase(repository).execute(request)
    return unwrap_result(result)


@router.get("", response_model=List[TimeEntryResponseDTO])
async def list_time_entries(repository: Repository):
    """List all time entries, most recently created first."""
    result = await ListTimeEntriesUseCase(repository).execute(None)
    return unwrap_result(result)


@router.get("/{entry_id}", response_model=TimeEntryResponseDTO)
async def get_time_entry(entry_id: str, repository: Repository):
    result = await GetTimeEntryUseCase(repository).execute(entry_id)
    return unwrap_result(result)


@router.put("/{entry_id}", response_model=TimeEntryResponseDTO)
async def update_time_entry(entry_id: str, request: UpdateTimeEntryRequestDTO, repository: Repository):
    """
    Update the supplied fields of a time entry.
    Derived fields are recomputed from the stored result.
    """
    result = await UpdateTimeEntryUseCase(repository).execute(ByIdRequest(entry_id, request))
    return unwrap_result(result)


@router.delete("/{entry_id}", response_model=TimeEntryDeletedResponseDTO)
async def delete_time_entry(entry_id: str, repository: Repository):
    result = await DeleteTimeEntryUseCase(repository).execute(entry_id)
    return unwrap_result(result)
