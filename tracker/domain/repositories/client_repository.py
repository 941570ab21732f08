"""Client repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tracker.domain.models.client import Client


class ClientRepository(ABC):
    """Repository interface for Client entity."""

    @abstractmethod
    def add(self, client: Client) -> Client:
        """Persist a new client."""

    @abstractmethod
    def get_by_id(self, client_id: str) -> Optional[Client]:
        """Return the client, or None if not found."""

    @abstractmethod
    def list_all(self) -> List[Client]:
        """All clients, newest first."""

    @abstractmethod
    def count(self) -> int:
        """Number of client records."""

    @abstractmethod
    def delete(self, client_id: str) -> bool:
        """Delete a client. Return True if deleted, False if not found."""
