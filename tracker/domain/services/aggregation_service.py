"""Aggregations over invoices."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from tracker.domain.models.invoice import Invoice
from tracker.domain.services.billing_service import round_currency


UNNAMED_CLIENT_LABEL = "Unnamed Client"
DEFAULT_TOP_CLIENTS = 5


@dataclass
class ClientTotals:
    """Invoice count and billed amount for one client name."""

    name: str
    total_invoices: int = 0
    total_amount: float = 0.0


class AggregationService:
    """
    Groups invoices by client name.
    Missing and empty names share a single bucket labelled 'Unnamed Client'.
    """

    def top_clients(self, invoices: Iterable[Invoice], limit: int = DEFAULT_TOP_CLIENTS) -> List[ClientTotals]:
        groups: Dict[Optional[str], ClientTotals] = {}
        for invoice in invoices:
            key = invoice.client_name or None
            totals = groups.get(key)
            if totals is None:
                totals = groups[key] = ClientTotals(name=key or UNNAMED_CLIENT_LABEL)
            totals.total_invoices += 1
            totals.total_amount += invoice.total_amount or 0

        for totals in groups.values():
            totals.total_amount = round_currency(totals.total_amount)

        # Ties on count go to the larger billed amount, then alphabetical name.
        ranked = sorted(
            groups.values(),
            key=lambda t: (-t.total_invoices, -t.total_amount, t.name),
        )
        return ranked[:max(limit, 0)]
