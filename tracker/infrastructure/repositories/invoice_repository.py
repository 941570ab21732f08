"""
Invoice repository implementation using SQLAlchemy.
"""

from typing import Callable, List, Optional
from datetime import datetime

from sqlalchemy import desc
from sqlalchemy.orm import Session

from tracker.domain.models.base import utcnow
from tracker.domain.models.invoice import Invoice
from tracker.domain.repositories.invoice_repository import InvoiceRepository as InvoiceRepositoryInterface
from tracker.infrastructure.db.models import InvoiceModel, generate_id
from tracker.infrastructure.mappers.invoice_mapper import InvoiceMapper


class SQLAlchemyInvoiceRepository(InvoiceRepositoryInterface):
    """SQLAlchemy implementation of invoice repository."""

    def __init__(self, session: Session, clock: Callable[[], datetime] = utcnow):
        self.session = session
        self.clock = clock
        self.mapper = InvoiceMapper()
        self.model = InvoiceModel

    def add(self, invoice: Invoice) -> Invoice:
        invoice.validate()
        now = self.clock()
        invoice.id = invoice.id or generate_id()
        invoice.created_at = now
        invoice.updated_at = now
        if invoice.generated_at is None:
            invoice.generated_at = now

        model = self.mapper.domain_to_model(invoice)
        self.session.add(model)
        self.session.commit()
        return self.mapper.model_to_domain(model)

    def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        model = self.session.get(InvoiceModel, invoice_id)
        if model is None:
            return None
        return self.mapper.model_to_domain(model)

    def list_all(self) -> List[Invoice]:
        models = self.session.query(InvoiceModel).order_by(desc(InvoiceModel.generated_at)).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def delete(self, invoice_id: str) -> bool:
        model = self.session.get(InvoiceModel, invoice_id)
        if model is None:
            return False

        self.session.delete(model)
        self.session.commit()
        return True
