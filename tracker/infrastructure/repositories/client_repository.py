"""
Client repository implementation using SQLAlchemy.
"""

from typing import Callable, List, Optional
from datetime import datetime

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from tracker.domain.models.base import utcnow
from tracker.domain.models.client import Client
from tracker.domain.repositories.client_repository import ClientRepository as ClientRepositoryInterface
from tracker.infrastructure.db.models import ClientModel, generate_id
from tracker.infrastructure.mappers.client_mapper import ClientMapper


class SQLAlchemyClientRepository(ClientRepositoryInterface):
    """SQLAlchemy implementation of client repository."""

    def __init__(self, session: Session, clock: Callable[[], datetime] = utcnow):
        self.session = session
        self.clock = clock
        self.mapper = ClientMapper()
        self.model = ClientModel

    def add(self, client: Client) -> Client:
        client.validate()
        client.id = client.id or generate_id()
        client.created_at = self.clock()

        model = self.mapper.domain_to_model(client)
        self.session.add(model)
        self.session.commit()
        return self.mapper.model_to_domain(model)

    def get_by_id(self, client_id: str) -> Optional[Client]:
        model = self.session.get(ClientModel, client_id)
        return self.mapper.model_to_domain(model) if model else None

    def list_all(self) -> List[Client]:
        models = self.session.query(ClientModel).order_by(desc(ClientModel.created_at)).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def count(self) -> int:
        return self.session.query(func.count(ClientModel.id)).scalar() or 0

    def delete(self, client_id: str) -> bool:
        model = self.session.get(ClientModel, client_id)
        if model is None:
            return False

        self.session.delete(model)
        self.session.commit()
        return True
