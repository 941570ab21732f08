"""Invoice repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tracker.domain.models.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice entity.
    Invoices are never updated in place, so there is no update method.
    """

    @abstractmethod
    def add(self, invoice: Invoice) -> Invoice:
        """Persist a new invoice and return it with storage-assigned fields."""

    @abstractmethod
    def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        """Return the invoice, or None if not found."""

    @abstractmethod
    def list_all(self) -> List[Invoice]:
        """All invoices, newest generated first."""

    @abstractmethod
    def delete(self, invoice_id: str) -> bool:
        """Delete an invoice. Return True if deleted, False if not found."""
