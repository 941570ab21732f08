"""
Client management router.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from tracker.application.dto.base_dto import MessageResponseDTO
from tracker.application.dto.client_dto import ClientResponseDTO, CreateClientRequestDTO
from tracker.application.use_cases.client_use_cases import (
    CreateClientUseCase,
    DeleteClientUseCase,
    GetClientUseCase,
    ListClientsUseCase,
)
from tracker.infrastructure.repositories import SQLAlchemyClientRepository
from tracker.infrastructure.web.dependencies import get_client_repository
from tracker.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()

Repository = Annotated[SQLAlchemyClientRepository, Depends(get_client_repository)]


@router.get("", response_model=List[ClientResponseDTO])
async def list_clients(repository: Repository):
    return unwrap_result(await ListClientsUseCase(repository).execute(None))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ClientResponseDTO)
async def create_client(request: CreateClientRequestDTO, repository: Repository):
    """
    Create a new client.

    - **name**: Client name (required)
    - **email**, **phone**, **address**: Optional contact details
    """
    return unwrap_result(await CreateClientUseCase(repository).execute(request))


@router.get("/{client_id}", response_model=ClientResponseDTO)
async def get_client(client_id: str, repository: Repository):
    return unwrap_result(await GetClientUseCase(repository).execute(client_id))


@router.delete("/{client_id}", response_model=MessageResponseDTO)
async def delete_client(client_id: str, repository: Repository):
    """Delete a client. Entries and invoices naming it are left as they are."""
    return unwrap_result(await DeleteClientUseCase(repository).execute(client_id))
