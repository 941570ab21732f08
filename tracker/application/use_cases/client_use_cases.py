"""
Client use cases for the application layer.
Plain CRUD; renaming or deleting a client never touches entries or invoices.
"""

import logging
from typing import List

from tracker.application.use_cases.base_use_case import (
    CreateUseCase,
    DeleteUseCase,
    GetByIdUseCase,
    ListUseCase,
)
from tracker.application.dto.base_dto import MessageResponseDTO
from tracker.application.dto.client_dto import ClientResponseDTO, CreateClientRequestDTO
from tracker.domain.models.base import EntityNotFoundError
from tracker.domain.models.client import Client
from tracker.domain.repositories.client_repository import ClientRepository

logger = logging.getLogger(__name__)


class _ClientUseCase:
    def __init__(self, client_repository: ClientRepository):
        super().__init__()
        self.client_repository = client_repository


class CreateClientUseCase(_ClientUseCase, CreateUseCase[CreateClientRequestDTO, ClientResponseDTO]):
    """Use case for creating a new client."""

    async def _execute_command_logic(self, request: CreateClientRequestDTO) -> ClientResponseDTO:
        client = Client(
            name=(request.name or "").strip(),
            email=request.email,
            phone=request.phone,
            address=request.address,
        )
        saved_client = self.client_repository.add(client)
        logger.info(f"Created client {saved_client.id} '{saved_client.name}'")
        return ClientResponseDTO.from_domain(saved_client)


class ListClientsUseCase(_ClientUseCase, ListUseCase[None, List[ClientResponseDTO]]):
    async def _execute_business_logic(self, request: None = None) -> List[ClientResponseDTO]:
        return [ClientResponseDTO.from_domain(client) for client in self.client_repository.list_all()]


class GetClientUseCase(_ClientUseCase, GetByIdUseCase[str, ClientResponseDTO]):
    async def _execute_business_logic(self, client_id: str) -> ClientResponseDTO:
        client = self.client_repository.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return ClientResponseDTO.from_domain(client)


class DeleteClientUseCase(_ClientUseCase, DeleteUseCase[str, MessageResponseDTO]):
    async def _execute_command_logic(self, client_id: str) -> MessageResponseDTO:
        if not self.client_repository.delete(client_id):
            raise EntityNotFoundError("Client", client_id)

        logger.info(f"Deleted client {client_id}")
        return MessageResponseDTO(message="Client deleted successfully")
