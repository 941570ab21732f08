"""
Time Entry use cases for the application layer.
Every response is rebuilt from the stored record, so derived fields never drift.
"""

import logging
from typing import List, Optional

from tracker.application.use_cases.base_use_case import (
    ByIdRequest,
    CreateUseCase,
    DeleteUseCase,
    GetByIdUseCase,
    ListUseCase,
    UpdateUseCase,
)
from tracker.application.dto.time_entry_dto import (
    CreateTimeEntryRequestDTO,
    TimeEntryDeletedResponseDTO,
    TimeEntryResponseDTO,
    UpdateTimeEntryRequestDTO,
)
from tracker.domain.models.base import EntityNotFoundError
from tracker.domain.models.time_entry import TimeEntry
from tracker.domain.repositories.time_entry_repository import TimeEntryRepository
from tracker.domain.services.billing_service import BillingService
from tracker.domain.services.entry_validator import EntryValidator

logger = logging.getLogger(__name__)

ENTITY_NAME = "Time entry"


def present_time_entry(entry: TimeEntry, billing_service: BillingService) -> TimeEntryResponseDTO:
    """Attach derived fields to a stored entry."""
    return TimeEntryResponseDTO.from_domain(entry, billing_service.figures_for(entry))


class _TimeEntryUseCase:
    """Shared wiring for the time entry use cases."""

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        billing_service: Optional[BillingService] = None,
        validator: Optional[EntryValidator] = None,
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.billing_service = billing_service or BillingService()
        self.validator = validator or EntryValidator()

    def _present(self, entry: TimeEntry) -> TimeEntryResponseDTO:
        return present_time_entry(entry, self.billing_service)


class CreateTimeEntryUseCase(_TimeEntryUseCase, CreateUseCase[CreateTimeEntryRequestDTO, TimeEntryResponseDTO]):
    """Use case for creating a time entry."""

    async def _execute_command_logic(self, request: CreateTimeEntryRequestDTO) -> TimeEntryResponseDTO:
        payload = request.model_dump()
        self.validator.validate_create(payload)

        time_entry = TimeEntry(
            freelancer_id=payload["freelancer_id"],
            project=payload["project"],
            client_name=payload["client_name"],
            start_time=payload["start_time"],
            end_time=payload["end_time"],
            description=payload["description"],
            billable_rate=float(payload["billable_rate"]),
        )
        saved_entry = self.time_entry_repository.save(time_entry)
        logger.info(f"Created time entry {saved_entry.id} for client '{saved_entry.client_name}'")

        return self._present(saved_entry)


class ListTimeEntriesUseCase(_TimeEntryUseCase, ListUseCase[None, List[TimeEntryResponseDTO]]):
    """Use case for listing every time entry, newest first."""

    async def _execute_business_logic(self, request: None = None) -> List[TimeEntryResponseDTO]:
        return [self._present(entry) for entry in self.time_entry_repository.list_all()]


class GetTimeEntryUseCase(_TimeEntryUseCase, GetByIdUseCase[str, TimeEntryResponseDTO]):
    """Use case for fetching one time entry."""

    async def _execute_business_logic(self, entry_id: str) -> TimeEntryResponseDTO:
        time_entry = self.time_entry_repository.get_by_id(entry_id)
        if time_entry is None:
            raise EntityNotFoundError(ENTITY_NAME, entry_id)
        return self._present(time_entry)


class UpdateTimeEntryUseCase(
    _TimeEntryUseCase,
    UpdateUseCase[ByIdRequest[UpdateTimeEntryRequestDTO], TimeEntryResponseDTO],
):
    """
    Use case for partially updating a time entry.
    Read, merge, write: concurrent updates to one entry resolve last writer wins.
    """

    async def _execute_command_logic(
        self, request: ByIdRequest[UpdateTimeEntryRequestDTO]
    ) -> TimeEntryResponseDTO:
        changes = request.payload.changes() if request.payload else {}

        time_entry = self.time_entry_repository.get_by_id(request.id)
        if time_entry is None:
            raise EntityNotFoundError(ENTITY_NAME, request.id)

        self.validator.validate_update(changes, time_entry.start_time, time_entry.end_time)
        if "billable_rate" in changes:
            changes["billable_rate"] = float(changes["billable_rate"])

        time_entry.apply_changes(changes)
        saved_entry = self.time_entry_repository.save(time_entry)
        logger.info(f"Updated time entry {saved_entry.id}: {sorted(changes)}")

        return self._present(saved_entry)


class DeleteTimeEntryUseCase(_TimeEntryUseCase, DeleteUseCase[str, TimeEntryDeletedResponseDTO]):
    """Use case for deleting a time entry."""

    async def _execute_command_logic(self, entry_id: str) -> TimeEntryDeletedResponseDTO:
        deleted = self.time_entry_repository.delete(entry_id)
        if deleted is None:
            raise EntityNotFoundError(ENTITY_NAME, entry_id)

        logger.info(f"Deleted time entry {entry_id}")
        return TimeEntryDeletedResponseDTO(
            message="Time entry deleted successfully",
            deleted_entry=self._present(deleted),
        )
