"""
Invoice use cases for the application layer.
Implements creation, lookup, deletion and the top-clients aggregation.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from tracker.application.use_cases.base_use_case import (
    CreateUseCase,
    DeleteUseCase,
    GetByIdUseCase,
    ListUseCase,
    QueryUseCase,
)
from tracker.application.use_cases.time_entry_use_cases import present_time_entry
from tracker.application.dto.base_dto import MessageResponseDTO
from tracker.application.dto.invoice_dto import (
    CreateInvoiceFromEntriesRequestDTO,
    CreateInvoiceRequestDTO,
    InvoiceResponseDTO,
    TopClientResponseDTO,
)
from tracker.domain.models.base import EntityNotFoundError, ValidationError
from tracker.domain.models.invoice import Invoice, InvoiceStatus
from tracker.domain.repositories.invoice_repository import InvoiceRepository
from tracker.domain.repositories.time_entry_repository import TimeEntryRepository
from tracker.domain.services.aggregation_service import AggregationService, DEFAULT_TOP_CLIENTS
from tracker.domain.services.billing_service import BillingService, round_currency

logger = logging.getLogger(__name__)

ENTITY_NAME = "Invoice"


class _InvoiceUseCase:
    """Shared wiring and the read-side transform for invoices."""

    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        time_entry_repository: Optional[TimeEntryRepository] = None,
        billing_service: Optional[BillingService] = None,
        today: Callable[[], date] = date.today,
    ):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.time_entry_repository = time_entry_repository
        self.billing_service = billing_service or BillingService()
        self.today = today

    def _present(self, invoice: Invoice, resolve_entries: bool = False) -> InvoiceResponseDTO:
        time_entries = []
        if resolve_entries and self.time_entry_repository and invoice.time_entry_ids:
            time_entries = [
                present_time_entry(entry, self.billing_service)
                for entry in self.time_entry_repository.get_many(invoice.time_entry_ids)
            ]
        return InvoiceResponseDTO.from_domain(invoice, self.today().isoformat(), time_entries)

    def _save_new(self, invoice: Invoice) -> InvoiceResponseDTO:
        saved = self.invoice_repository.add(invoice)
        logger.info(
            f"Created invoice {saved.id} for client '{saved.client_name}' "
            f"({saved.total_hours}h, {saved.total_amount})"
        )
        return self._present(saved, resolve_entries=True)


class CreateInvoiceUseCase(_InvoiceUseCase, CreateUseCase[CreateInvoiceRequestDTO, InvoiceResponseDTO]):
    """Use case for creating an invoice from submitted totals."""

    async def _execute_command_logic(self, request: CreateInvoiceRequestDTO) -> InvoiceResponseDTO:
        if not request.freelancer_id:
            raise ValidationError("freelancerId is required", "freelancer_id")
        if not request.client_name:
            raise ValidationError("clientName is required", "client_name")
        if not request.total_hours or not request.total_amount:
            raise ValidationError("totalHours and totalAmount are required", "total_hours")

        invoice = Invoice(
            freelancer_id=request.freelancer_id,
            freelancer_name=request.freelancer_name,
            client_name=request.client_name,
            project=request.project,
            total_hours=round_currency(request.total_hours),
            total_amount=round_currency(request.total_amount),
            rate_per_hour=request.rate_per_hour,
            status=InvoiceStatus.parse(request.status),
            time_entry_ids=list(request.time_entry_ids or []),
        )
        return self._save_new(invoice)


class CreateInvoiceFromEntriesUseCase(
    _InvoiceUseCase,
    CreateUseCase[CreateInvoiceFromEntriesRequestDTO, InvoiceResponseDTO],
):
    """Use case for invoicing a set of tracked time entries."""

    async def _execute_command_logic(self, request: CreateInvoiceFromEntriesRequestDTO) -> InvoiceResponseDTO:
        if not request.freelancer_id:
            raise ValidationError("freelancerId is required", "freelancer_id")
        if not request.client_name:
            raise ValidationError("clientName is required", "client_name")

        entry_ids = list(dict.fromkeys(request.time_entry_ids))
        if not entry_ids:
            raise ValidationError("timeEntryIds is required", "time_entry_ids")

        entries = self.time_entry_repository.get_many(entry_ids)
        found = {entry.id for entry in entries}
        missing = [entry_id for entry_id in entry_ids if entry_id not in found]
        if missing:
            raise ValidationError(f"Time entry {missing[0]} does not exist", "time_entry_ids")

        totals = self.billing_service.summarize_entries(entries)
        invoice = Invoice(
            freelancer_id=request.freelancer_id,
            freelancer_name=request.freelancer_name,
            client_name=request.client_name,
            project=request.project,
            total_hours=totals["total_hours"],
            total_amount=totals["total_amount"],
            rate_per_hour=totals["rate_per_hour"],
            status=InvoiceStatus.parse(request.status),
            time_entry_ids=entry_ids,
        )
        return self._save_new(invoice)


class ListInvoicesUseCase(_InvoiceUseCase, ListUseCase[None, List[InvoiceResponseDTO]]):
    """Use case for listing invoices, newest generated first."""

    async def _execute_business_logic(self, request: None = None) -> List[InvoiceResponseDTO]:
        return [
            self._present(invoice, resolve_entries=True)
            for invoice in self.invoice_repository.list_all()
        ]


class GetInvoiceUseCase(_InvoiceUseCase, GetByIdUseCase[str, InvoiceResponseDTO]):
    """Use case for fetching one invoice."""

    async def _execute_business_logic(self, invoice_id: str) -> InvoiceResponseDTO:
        invoice = self.invoice_repository.get_by_id(invoice_id)
        if invoice is None:
            raise EntityNotFoundError(ENTITY_NAME, invoice_id)
        return self._present(invoice, resolve_entries=True)


class DeleteInvoiceUseCase(_InvoiceUseCase, DeleteUseCase[str, MessageResponseDTO]):
    """Use case for deleting an invoice."""

    async def _execute_command_logic(self, invoice_id: str) -> MessageResponseDTO:
        if not self.invoice_repository.delete(invoice_id):
            raise EntityNotFoundError(ENTITY_NAME, invoice_id)

        logger.info(f"Deleted invoice {invoice_id}")
        return MessageResponseDTO(message="Invoice deleted successfully")


class TopClientsUseCase(QueryUseCase[int, List[TopClientResponseDTO]]):
    """Use case ranking clients by number of invoices."""

    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        aggregation_service: Optional[AggregationService] = None,
    ):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.aggregation_service = aggregation_service or AggregationService()

    async def _execute_business_logic(self, limit: Optional[int] = None) -> List[TopClientResponseDTO]:
        ranked = self.aggregation_service.top_clients(
            self.invoice_repository.list_all(),
            limit=DEFAULT_TOP_CLIENTS if limit is None else limit,
        )
        return [TopClientResponseDTO.from_domain(totals) for totals in ranked]
