"""
Invoice mapper for converting between domain entities and database models.
"""

from tracker.domain.models.base import ensure_utc
from tracker.domain.models.invoice import Invoice, InvoiceStatus
from tracker.infrastructure.db.models import InvoiceModel
from tracker.infrastructure.mappers.utils import to_storage_datetime


class InvoiceMapper:
    """Maps between Invoice domain entity and InvoiceModel database model."""

    def domain_to_model(self, invoice: Invoice) -> InvoiceModel:
        return InvoiceModel(
            id=invoice.id,
            freelancer_id=invoice.freelancer_id,
            freelancer_name=invoice.freelancer_name,
            client_name=invoice.client_name,
            project=invoice.project,
            total_hours=invoice.total_hours,
            total_amount=invoice.total_amount,
            rate_per_hour=invoice.rate_per_hour,
            status=InvoiceStatus.parse(invoice.status).value,
            generated_at=to_storage_datetime(invoice.generated_at),
            time_entry_ids=list(invoice.time_entry_ids or []),
            created_at=to_storage_datetime(invoice.created_at),
            updated_at=to_storage_datetime(invoice.updated_at),
        )

    def model_to_domain(self, model: InvoiceModel) -> Invoice:
        return Invoice(
            id=model.id,
            freelancer_id=model.freelancer_id,
            freelancer_name=model.freelancer_name,
            client_name=model.client_name,
            project=model.project,
            total_hours=model.total_hours,
            total_amount=model.total_amount,
            rate_per_hour=model.rate_per_hour,
            status=InvoiceStatus.parse(model.status),
            generated_at=ensure_utc(model.generated_at),
            time_entry_ids=list(model.time_entry_ids or []),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )
