"""
Dashboard router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from tracker.application.dto.dashboard_dto import DashboardResponseDTO
from tracker.application.use_cases.dashboard_use_cases import GetDashboardUseCase
from tracker.config import settings
from tracker.infrastructure.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyInvoiceRepository,
    SQLAlchemyTimeEntryRepository,
)
from tracker.infrastructure.web.dependencies import (
    get_client_repository,
    get_invoice_repository,
    get_time_entry_repository,
    local_today,
)
from tracker.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()


@router.get("", response_model=DashboardResponseDTO)
async def get_dashboard(
    time_entries: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    invoices: Annotated[SQLAlchemyInvoiceRepository, Depends(get_invoice_repository)],
    clients: Annotated[SQLAlchemyClientRepository, Depends(get_client_repository)],
):
    """
    Summary for the front page.

    - **todayHours** / **weekHours**: Hours tracked today and since Monday
    - **pendingInvoices**: Sum of pending invoice amounts
    - **activeClients**: Number of client records
    - **recentActivity**: Latest entries and invoices, newest first
    - **topClients**: Clients ranked by invoice count
    """
    use_case = GetDashboardUseCase(
        time_entries,
        invoices,
        clients,
        today=local_today,
        currency=settings.default_currency,
        top_clients_limit=settings.top_clients_limit,
        activity_limit=settings.recent_activity_limit,
    )
    return unwrap_result(await use_case.execute(None))
