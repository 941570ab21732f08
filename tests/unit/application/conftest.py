"""
In-memory repository doubles for use case tests.
"""

import copy
import itertools
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

import pytest

from tracker.domain.models.base import EntityNotFoundError
from tracker.domain.models.client import Client
from tracker.domain.models.invoice import Invoice
from tracker.domain.models.time_entry import TimeEntry
from tracker.domain.repositories import (
    ClientRepository,
    InvoiceRepository,
    TimeEntryRepository,
)


class _Store:
    def __init__(self, prefix: str):
        self.items = {}
        self._ids = (f"{prefix}{n}" for n in itertools.count(1))
        self._ticks = itertools.count()

    def now(self) -> datetime:
        return datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=next(self._ticks))

    def next_id(self) -> str:
        return next(self._ids)

    def newest_first(self, key) -> list:
        return [copy.deepcopy(item) for item in sorted(self.items.values(), key=key, reverse=True)]


class InMemoryTimeEntryRepository(TimeEntryRepository):

    def __init__(self):
        self.store = _Store("te")

    def save(self, time_entry: TimeEntry) -> TimeEntry:
        time_entry.validate()
        now = self.store.now()
        if time_entry.is_new:
            time_entry.id = self.store.next_id()
            time_entry.created_at = now
        elif time_entry.id not in self.store.items:
            raise EntityNotFoundError("Time entry", time_entry.id)
        time_entry.updated_at = now
        self.store.items[time_entry.id] = copy.deepcopy(time_entry)
        return copy.deepcopy(time_entry)

    def get_by_id(self, entry_id: str) -> Optional[TimeEntry]:
        return copy.deepcopy(self.store.items.get(entry_id))

    def get_many(self, entry_ids: Iterable[str]) -> List[TimeEntry]:
        return [copy.deepcopy(self.store.items[i]) for i in entry_ids if i in self.store.items]

    def list_all(self) -> List[TimeEntry]:
        return self.store.newest_first(lambda e: e.created_at)

    def delete(self, entry_id: str) -> Optional[TimeEntry]:
        return self.store.items.pop(entry_id, None)


class InMemoryInvoiceRepository(InvoiceRepository):

    def __init__(self):
        self.store = _Store("inv")

    def add(self, invoice: Invoice) -> Invoice:
        invoice.validate()
        now = self.store.now()
        invoice.id = self.store.next_id()
        invoice.created_at = invoice.updated_at = now
        invoice.generated_at = invoice.generated_at or now
        self.store.items[invoice.id] = copy.deepcopy(invoice)
        return copy.deepcopy(invoice)

    def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        return copy.deepcopy(self.store.items.get(invoice_id))

    def list_all(self) -> List[Invoice]:
        return self.store.newest_first(lambda i: i.generated_at)

    def delete(self, invoice_id: str) -> bool:
        return self.store.items.pop(invoice_id, None) is not None


class InMemoryClientRepository(ClientRepository):

    def __init__(self):
        self.store = _Store("cl")

    def add(self, client: Client) -> Client:
        client.validate()
        client.id = self.store.next_id()
        client.created_at = self.store.now()
        self.store.items[client.id] = copy.deepcopy(client)
        return copy.deepcopy(client)

    def get_by_id(self, client_id: str) -> Optional[Client]:
        return copy.deepcopy(self.store.items.get(client_id))

    def list_all(self) -> List[Client]:
        return self.store.newest_first(lambda c: c.created_at)

    def count(self) -> int:
        return len(self.store.items)

    def delete(self, client_id: str) -> bool:
        return self.store.items.pop(client_id, None) is not None


@pytest.fixture
def time_entry_repository():
    return InMemoryTimeEntryRepository()


@pytest.fixture
def invoice_repository():
    return InMemoryInvoiceRepository()


@pytest.fixture
def client_repository():
    return InMemoryClientRepository()
