"""
Dashboard use case.
Reads every collection fresh and summarizes it for the front page.
"""

from datetime import date
from typing import Callable, Optional

from tracker.application.use_cases.base_use_case import QueryUseCase
from tracker.application.dto.dashboard_dto import DashboardResponseDTO
from tracker.application.dto.invoice_dto import TopClientResponseDTO
from tracker.domain.repositories.client_repository import ClientRepository
from tracker.domain.repositories.invoice_repository import InvoiceRepository
from tracker.domain.repositories.time_entry_repository import TimeEntryRepository
from tracker.domain.services.aggregation_service import AggregationService, DEFAULT_TOP_CLIENTS
from tracker.domain.services.dashboard_service import DashboardService, DEFAULT_RECENT_ACTIVITY


class GetDashboardUseCase(QueryUseCase[None, DashboardResponseDTO]):
    """Use case computing the dashboard summary."""

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        invoice_repository: InvoiceRepository,
        client_repository: ClientRepository,
        today: Callable[[], date] = date.today,
        currency: str = "USD",
        top_clients_limit: int = DEFAULT_TOP_CLIENTS,
        activity_limit: int = DEFAULT_RECENT_ACTIVITY,
        dashboard_service: Optional[DashboardService] = None,
        aggregation_service: Optional[AggregationService] = None,
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.invoice_repository = invoice_repository
        self.client_repository = client_repository
        self.today = today
        self.currency = currency
        self.top_clients_limit = top_clients_limit
        self.activity_limit = activity_limit
        self.dashboard_service = dashboard_service or DashboardService()
        self.aggregation_service = aggregation_service or AggregationService()

    async def _execute_business_logic(self, request: None = None) -> DashboardResponseDTO:
        invoices = self.invoice_repository.list_all()
        summary = self.dashboard_service.summarize(
            entries=self.time_entry_repository.list_all(),
            invoices=invoices,
            client_count=self.client_repository.count(),
            today=self.today(),
            currency=self.currency,
            activity_limit=self.activity_limit,
        )
        top_clients = [
            TopClientResponseDTO.from_domain(totals)
            for totals in self.aggregation_service.top_clients(invoices, limit=self.top_clients_limit)
        ]
        return DashboardResponseDTO.from_domain(summary, top_clients)
