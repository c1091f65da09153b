"""
Travel assignment routes.

Editing happens on a draft the client carries between calls: each draft
endpoint takes the current draft and returns it with costs re-derived.
"""
import logging
from fastapi import APIRouter, Depends, status
from typing import List
from sppd.api.dependencies import get_store, http_error
from sppd.core.exceptions import SppdError
from sppd.data.regions import destinations_for
from sppd.models.assignment import TravelType
from sppd.schemas.assignment import (
    Assignment, AssignmentCostSummary, AssignmentDraft, AssignmentResponse,
    CostLineOverride, DateChange, DestinationChange, TravelTypeChange
)
from sppd.services.assignment_service import build_engine, save_assignment
from sppd.services.cost_aggregation_service import assignment_total, summarize_costs
from sppd.services.cost_derivation_service import edit_draft, start_draft
from sppd.services.record_store import SqlAlchemyRecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assignments", tags=["assignments"])


def _with_total(assignment: Assignment) -> AssignmentResponse:
    return AssignmentResponse(**assignment.model_dump(), total=assignment_total(assignment))


@router.get("/destinations", response_model=List[str])
async def list_destinations(travel_type: TravelType = TravelType.WITHIN_REGION):
    """Destinations a travel type may go to."""
    return destinations_for(travel_type)


@router.post("/draft", response_model=AssignmentDraft)
async def new_draft(travel_type: TravelType = TravelType.WITHIN_REGION):
    """Start a draft for a new assignment."""
    return start_draft(travel_type)


@router.post("/draft/dates", response_model=AssignmentDraft)
async def change_dates(change: DateChange, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Set travel dates; day counts of every cost line follow."""
    engine = build_engine(store)
    try:
        return engine.set_dates(change.draft, change.start_date, change.end_date)
    except SppdError as e:
        raise http_error(e)


@router.post("/draft/destination", response_model=AssignmentDraft)
async def change_destination(change: DestinationChange, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Set the destination; its rates are applied the first time it is chosen."""
    engine = build_engine(store)
    return engine.set_destination(change.draft, change.destination)


@router.post("/draft/travel-type", response_model=AssignmentDraft)
async def change_travel_type(change: TravelTypeChange, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Switch travel type; clears the destination and re-rates representation."""
    engine = build_engine(store)
    return engine.set_travel_type(change.draft, change.travel_type)


@router.post("/draft/travelers/{traveler_id}", response_model=AssignmentDraft)
async def toggle_traveler(
    traveler_id: int,
    draft: AssignmentDraft,
    store: SqlAlchemyRecordStore = Depends(get_store)
):
    """Select or deselect a traveler."""
    engine = build_engine(store)
    try:
        return engine.toggle_traveler(draft, traveler_id)
    except SppdError as e:
        raise http_error(e)


@router.post("/draft/costs/{traveler_id}", response_model=AssignmentDraft)
async def override_cost_line(
    traveler_id: int,
    override: CostLineOverride,
    store: SqlAlchemyRecordStore = Depends(get_store)
):
    """Manually edit amounts on one traveler's cost line."""
    engine = build_engine(store)
    try:
        engine.update_cost_line(
            override.draft, traveler_id, **override.changes.model_dump(exclude_none=True)
        )
    except SppdError as e:
        raise http_error(e)
    return override.draft


@router.get("", response_model=List[AssignmentResponse])
async def list_assignments(store: SqlAlchemyRecordStore = Depends(get_store)):
    """List all assignments, latest departure first."""
    return [_with_total(a) for a in store.list_assignments()]


@router.post("", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
async def create_assignment(draft: AssignmentDraft, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Save a new assignment."""
    draft.id = None
    try:
        return _with_total(save_assignment(draft, store))
    except SppdError as e:
        raise http_error(e)


@router.get("/{assignment_id}", response_model=AssignmentResponse)
async def get_assignment(assignment_id: int, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Get an assignment with its total."""
    try:
        return _with_total(store.get_assignment(assignment_id))
    except SppdError as e:
        raise http_error(e)


@router.get("/{assignment_id}/draft", response_model=AssignmentDraft)
async def get_edit_draft(assignment_id: int, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Start editing a saved assignment."""
    try:
        return edit_draft(store.get_assignment(assignment_id))
    except SppdError as e:
        raise http_error(e)


@router.get("/{assignment_id}/costs", response_model=AssignmentCostSummary)
async def get_cost_summary(assignment_id: int, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Per-traveler cost breakdown and total, for printed documents."""
    try:
        assignment = store.get_assignment(assignment_id)
    except SppdError as e:
        raise http_error(e)

    travelers = {t.id: t for t in store.list_travelers()}
    return summarize_costs(assignment, travelers)


@router.put("/{assignment_id}", response_model=AssignmentResponse)
async def update_assignment(
    assignment_id: int,
    draft: AssignmentDraft,
    store: SqlAlchemyRecordStore = Depends(get_store)
):
    """Replace a saved assignment with an edited draft."""
    draft.id = assignment_id
    try:
        store.get_assignment(assignment_id)
        return _with_total(save_assignment(draft, store))
    except SppdError as e:
        raise http_error(e)


@router.delete("/{assignment_id}")
async def delete_assignment(assignment_id: int, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Delete an assignment."""
    try:
        store.delete_assignment(assignment_id)
    except SppdError as e:
        raise http_error(e)

    logger.info(f"Assignment {assignment_id} deleted via API")
    return {"message": "Assignment deleted successfully"}
