"""
Invoice DTOs for the application layer.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from tracker.domain.models.invoice import Invoice, InvoiceStatus
from tracker.domain.services.aggregation_service import ClientTotals
from .base_dto import BaseDTO, RequestDTO, ResponseDTO
from .time_entry_dto import TimeEntryResponseDTO


class CreateInvoiceRequestDTO(RequestDTO):
    """DTO for invoice creation from submitted totals."""

    freelancer_id: Optional[str] = Field(default=None, description="Freelancer identifier")
    freelancer_name: Optional[str] = Field(default=None, description="Freelancer display name")
    client_name: Optional[str] = Field(default=None, description="Client name")
    project: Optional[str] = Field(default=None, description="Project name")
    total_hours: Optional[float] = Field(default=None, description="Hours billed")
    total_amount: Optional[float] = Field(default=None, description="Amount billed")
    rate_per_hour: Optional[float] = Field(default=None, description="Hourly rate")
    status: Optional[str] = Field(default=None, description="Invoice status (default pending)")
    time_entry_ids: Optional[List[str]] = Field(default=None, description="Referenced time entries")


class CreateInvoiceFromEntriesRequestDTO(RequestDTO):
    """DTO for building an invoice out of tracked time entries."""

    freelancer_id: Optional[str] = None
    freelancer_name: Optional[str] = None
    client_name: Optional[str] = None
    project: Optional[str] = None
    status: Optional[str] = None
    time_entry_ids: List[str] = Field(default_factory=list, description="Entries to bill")


class InvoiceResponseDTO(ResponseDTO):
    """Invoice with the fields the dashboard expects."""

    freelancer_id: str
    freelancer_name: Optional[str] = None
    client_name: Optional[str] = None
    project: Optional[str] = None
    total_hours: float
    total_amount: float
    rate_per_hour: Optional[float] = None
    generated_at: Optional[datetime] = None
    time_entry_ids: List[str] = Field(default_factory=list)
    time_entries: List[TimeEntryResponseDTO] = Field(default_factory=list)

    # Derived
    client: str
    amount: float
    date: str
    status: str

    @classmethod
    def from_domain(
        cls,
        invoice: Invoice,
        today: str,
        time_entries: Optional[List[TimeEntryResponseDTO]] = None,
    ) -> "InvoiceResponseDTO":
        """``today`` is the fallback date for invoices missing generated_at."""
        return cls(
            id=invoice.id,
            freelancer_id=invoice.freelancer_id,
            freelancer_name=invoice.freelancer_name,
            client_name=invoice.client_name,
            project=invoice.project,
            total_hours=invoice.total_hours,
            total_amount=invoice.total_amount,
            rate_per_hour=invoice.rate_per_hour,
            generated_at=invoice.generated_at,
            time_entry_ids=list(invoice.time_entry_ids),
            time_entries=time_entries or [],
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
            client=invoice.client_label,
            amount=invoice.total_amount or 0,
            date=invoice.generated_at.date().isoformat() if invoice.generated_at else today,
            status=InvoiceStatus.parse(invoice.status).value,
        )


class TopClientResponseDTO(BaseDTO):
    name: str
    total_invoices: int
    total_amount: float

    @classmethod
    def from_domain(cls, totals: ClientTotals) -> "TopClientResponseDTO":
        return cls(
            name=totals.name,
            total_invoices=totals.total_invoices,
            total_amount=totals.total_amount,
        )
