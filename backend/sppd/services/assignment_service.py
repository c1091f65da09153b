"""
Assignment service: validation and persistence of edited assignments.
"""
import logging
from sppd.core.exceptions import NotFoundError, ValidationError
from sppd.core.utils import calculate_days
from sppd.data.regions import is_valid_destination
from sppd.schemas.assignment import Assignment, AssignmentDraft
from sppd.services.cost_derivation_service import CostDerivationEngine
from sppd.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def build_engine(store: RecordStore) -> CostDerivationEngine:
    """Engine over the current rate table and traveler roster."""
    return CostDerivationEngine(store.list_rate_entries(), store.list_travelers())


def validate_for_save(draft: AssignmentDraft, engine: CostDerivationEngine, store: RecordStore) -> None:
    """
    Reject a draft that cannot be saved. Budget deficits are never a
    reason to reject; they only show up in the reconciliation report.
    """
    if not draft.budget_line_code:
        raise ValidationError("Choose a budget line")
    store.get_budget_line(draft.budget_line_code)

    if not draft.traveler_ids:
        raise ValidationError("Choose at least one traveler")
    for traveler_id in draft.traveler_ids:
        if traveler_id not in engine.travelers:
            raise NotFoundError("Traveler", traveler_id)

    if not draft.destination:
        raise ValidationError("Choose a destination")
    if not is_valid_destination(draft.travel_type, draft.destination):
        raise ValidationError(
            f"{draft.destination!r} is not a valid destination for {draft.travel_type.value} travel"
        )

    if draft.start_date is None or draft.end_date is None:
        raise ValidationError("Both start and end date are required")
    calculate_days(draft.start_date, draft.end_date)


def save_assignment(draft: AssignmentDraft, store: RecordStore) -> Assignment:
    """Validate a draft and insert or replace it in the store."""
    engine = build_engine(store)
    try:
        validate_for_save(draft, engine, store)
    except (ValidationError, NotFoundError) as e:
        logger.warning(f"Rejected assignment save: {e.message}")
        raise

    # Day counts always follow the dates, whatever the client sent
    engine.recompute_on_date_change(draft)
    assignment = Assignment(**draft.model_dump(exclude={"last_auto_destination"}))
    return store.upsert_assignment(assignment)
