"""
Data Transfer Objects for the application layer.
"""

from .base_dto import BaseDTO, RequestDTO, ResponseDTO, MessageResponseDTO
from .client_dto import CreateClientRequestDTO, ClientResponseDTO
from .dashboard_dto import ActivityItemDTO, DashboardResponseDTO
from .invoice_dto import (
    CreateInvoiceRequestDTO,
    CreateInvoiceFromEntriesRequestDTO,
    InvoiceResponseDTO,
    TopClientResponseDTO,
)
from .time_entry_dto import (
    CreateTimeEntryRequestDTO,
    UpdateTimeEntryRequestDTO,
    TimeEntryResponseDTO,
    TimeEntryDeletedResponseDTO,
)

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "MessageResponseDTO",
    "CreateClientRequestDTO",
    "ClientResponseDTO",
    "ActivityItemDTO",
    "DashboardResponseDTO",
    "CreateInvoiceRequestDTO",
    "CreateInvoiceFromEntriesRequestDTO",
    "InvoiceResponseDTO",
    "TopClientResponseDTO",
    "CreateTimeEntryRequestDTO",
    "UpdateTimeEntryRequestDTO",
    "TimeEntryResponseDTO",
    "TimeEntryDeletedResponseDTO",
]
