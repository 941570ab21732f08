"""
Client mapper for converting between domain entities and database models.
"""

from tracker.domain.models.base import ensure_utc
from tracker.domain.models.client import Client
from tracker.infrastructure.db.models import ClientModel
from tracker.infrastructure.mappers.utils import to_storage_datetime


class ClientMapper:
    """Maps between Client domain entity and ClientModel database model."""

    def domain_to_model(self, client: Client) -> ClientModel:
        return ClientModel(
            id=client.id,
            name=client.name,
            email=client.email,
            phone=client.phone,
            address=client.address,
            created_at=to_storage_datetime(client.created_at),
        )

    def model_to_domain(self, model: ClientModel) -> Client:
        return Client(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            address=model.address,
            created_at=ensure_utc(model.created_at),
        )
