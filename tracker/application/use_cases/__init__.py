"""
Use cases for the application layer.
"""

from .base_use_case import UseCaseResult, ByIdRequest
from .client_use_cases import (
    CreateClientUseCase,
    DeleteClientUseCase,
    GetClientUseCase,
    ListClientsUseCase,
)
from .dashboard_use_cases import GetDashboardUseCase
from .invoice_use_cases import (
    CreateInvoiceFromEntriesUseCase,
    CreateInvoiceUseCase,
    DeleteInvoiceUseCase,
    GetInvoiceUseCase,
    ListInvoicesUseCase,
    TopClientsUseCase,
)
from .time_entry_use_cases import (
    CreateTimeEntryUseCase,
    DeleteTimeEntryUseCase,
    GetTimeEntryUseCase,
    ListTimeEntriesUseCase,
    UpdateTimeEntryUseCase,
)

__all__ = [
    "UseCaseResult",
    "ByIdRequest",
    "CreateClientUseCase",
    "DeleteClientUseCase",
    "GetClientUseCase",
    "ListClientsUseCase",
    "GetDashboardUseCase",
    "CreateInvoiceFromEntriesUseCase",
    "CreateInvoiceUseCase",
    "DeleteInvoiceUseCase",
    "GetInvoiceUseCase",
    "ListInvoicesUseCase",
    "TopClientsUseCase",
    "CreateTimeEntryUseCase",
    "DeleteTimeEntryUseCase",
    "GetTimeEntryUseCase",
    "ListTimeEntriesUseCase",
    "UpdateTimeEntryUseCase",
]
