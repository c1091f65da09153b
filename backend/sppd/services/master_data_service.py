"""
Master data service: travelers, budget lines and rate table entries.

Deleting any of them is refused while an assignment still refers to it.
"""
import logging
from typing import Iterable, List
from sppd.core.exceptions import ReferentialIntegrityError
from sppd.schemas.assignment import Assignment
from sppd.schemas.traveler import Traveler, TravelerUpdate
from sppd.services.budget_reconciliation_service import can_delete, referencing_assignments
from sppd.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def _ids(assignments: Iterable[Assignment]) -> List[int]:
    return [a.id for a in assignments]


def can_delete_rate_entry(destination: str, assignments: Iterable[Assignment]) -> bool:
    """False while any assignment travels to the destination."""
    return not any(a.destination == destination for a in assignments)


def can_delete_traveler(traveler_id: int, assignments: Iterable[Assignment]) -> bool:
    """False while the traveler is on any assignment."""
    return not any(traveler_id in a.traveler_ids for a in assignments)


def delete_budget_line(code: str, store: RecordStore) -> None:
    """Delete a budget line no assignment is charged to."""
    store.get_budget_line(code)
    assignments = store.list_assignments()
    if not can_delete(code, assignments):
        blocking = _ids(referencing_assignments(code, assignments))
        logger.warning(f"Refused to delete budget line {code}: used by assignments {blocking}")
        raise ReferentialIntegrityError("BudgetLine", code, blocking)
    store.delete_budget_line(code)


def delete_rate_entry(destination: str, store: RecordStore) -> None:
    """Delete a rate table entry no assignment travels to."""
    store.get_rate_entry(destination)
    assignments = store.list_assignments()
    if not can_delete_rate_entry(destination, assignments):
        blocking = _ids(a for a in assignments if a.destination == destination)
        logger.warning(f"Refused to delete rate table entry {destination}: used by assignments {blocking}")
        raise ReferentialIntegrityError("RateTableEntry", destination, blocking)
    store.delete_rate_entry(destination)


def delete_traveler(traveler_id: int, store: RecordStore) -> None:
    """Delete a traveler who is on no assignment."""
    store.get_traveler(traveler_id)
    assignments = store.list_assignments()
    if not can_delete_traveler(traveler_id, assignments):
        blocking = _ids(a for a in assignments if traveler_id in a.traveler_ids)
        logger.warning(f"Refused to delete traveler {traveler_id}: used by assignments {blocking}")
        raise ReferentialIntegrityError("Traveler", traveler_id, blocking)
    store.delete_traveler(traveler_id)


def update_traveler(traveler_id: int, changes: TravelerUpdate, store: RecordStore) -> Traveler:
    """Apply a partial update to a traveler."""
    traveler = store.get_traveler(traveler_id)
    updated = Traveler.model_validate(
        {**traveler.model_dump(), **changes.model_dump(exclude_unset=True, exclude_none=True)}
    )
    return store.upsert_traveler(updated)
