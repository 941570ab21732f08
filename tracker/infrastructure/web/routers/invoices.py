"""
Invoice router.
Handles invoice creation, lookup, deletion and client rankings.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, status

from tracker.application.dto.base_dto import MessageResponseDTO
from tracker.application.dto.invoice_dto import (
    CreateInvoiceFromEntriesRequestDTO,
    CreateInvoiceRequestDTO,
    InvoiceResponseDTO,
    TopClientResponseDTO,
)
from tracker.application.use_cases.invoice_use_cases import (
    CreateInvoiceFromEntriesUseCase,
    CreateInvoiceUseCase,
    DeleteInvoiceUseCase,
    GetInvoiceUseCase,
    ListInvoicesUseCase,
    TopClientsUseCase,
)
from tracker.config import settings
from tracker.infrastructure.repositories import (
    SQLAlchemyInvoiceRepository,
    SQLAlchemyTimeEntryRepository,
)
from tracker.infrastructure.web.dependencies import (
    get_invoice_repository,
    get_time_entry_repository,
    local_today,
)
from tracker.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()

InvoiceRepository = Annotated[SQLAlchemyInvoiceRepository, Depends(get_invoice_repository)]
TimeEntryRepository = Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InvoiceResponseDTO)
async def create_invoice(
    request: CreateInvoiceRequestDTO,
    invoices: InvoiceRepository,
    time_entries: TimeEntryRepository,
):
    """
    Create an invoice from submitted totals.

    - **freelancerId**: Freelancer identifier (required)
    - **clientName**: Client name (required)
    - **totalHours**, **totalAmount**: Billed totals, both non-zero (required)
    - **status**: One of draft, pending, sent, paid, overdue, cancelled (default pending)
    - **timeEntryIds**: Optional list of referenced time entries
    """
    use_case = CreateInvoiceUseCase(invoices, time_entries, today=local_today)
    return unwrap_result(await use_case.execute(request))


@router.post("/from-time-entries", status_code=status.HTTP_201_CREATED, response_model=InvoiceResponseDTO)
async def create_invoice_from_time_entries(
    request: CreateInvoiceFromEntriesRequestDTO,
    invoices: InvoiceRepository,
    time_entries: TimeEntryRepository,
):
    """
    Create an invoice whose totals are computed from existing time entries.

    - **timeEntryIds**: Entries to bill (required, all must exist)
    """
    use_case = CreateInvoiceFromEntriesUseCase(invoices, time_entries, today=local_today)
    return unwrap_result(await use_case.execute(request))


@router.get("", response_model=List[InvoiceResponseDTO])
async def list_invoices(invoices: InvoiceRepository, time_entries: TimeEntryRepository):
    """List all invoices, most recently generated first."""
    use_case = ListInvoicesUseCase(invoices, time_entries, today=local_today)
    return unwrap_result(await use_case.execute(None))


# Registered before "/{invoice_id}" so the literal path wins.
@router.get("/top-clients", response_model=List[TopClientResponseDTO])
async def get_top_clients(
    invoices: InvoiceRepository,
    limit: Optional[int] = Query(default=None, ge=0, description="Maximum number of clients to return"),
):
    """Clients ranked by invoice count."""
    use_case = TopClientsUseCase(invoices)
    return unwrap_result(await use_case.execute(settings.top_clients_limit if limit is None else limit))


@router.get("/{invoice_id}", response_model=InvoiceResponseDTO)
async def get_invoice(invoice_id: str, invoices: InvoiceRepository, time_entries: TimeEntryRepository):
    use_case = GetInvoiceUseCase(invoices, time_entries, today=local_today)
    return unwrap_result(await use_case.execute(invoice_id))


@router.delete("/{invoice_id}", response_model=MessageResponseDTO)
async def delete_invoice(invoice_id: str, invoices: InvoiceRepository):
    use_case = DeleteInvoiceUseCase(invoices)
    return unwrap_result(await use_case.execute(invoice_id))
