"""
Cost derivation: prices the cost lines of an assignment being edited.

Rates come from the rate table entry of the current destination, day
counts from the travel dates, and the representation rate from each
traveler's profile for the current travel type. Manual edits to a cost
line survive every step except the ones documented to overwrite them:

- a date change overwrites the day counts of every line;
- the first look-up of a destination that has a rate table entry
  overwrites the six rate fields and day counts of every line;
- a travel type change overwrites the representation rate of every line.

The "first look-up" is tracked on the draft itself
(``AssignmentDraft.last_auto_destination``), so re-selecting the same
destination keeps whatever the user typed in since.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional
from pydantic import ValidationError as SchemaValidationError
from sppd.core.config import settings
from sppd.core.exceptions import NotFoundError, ValidationError
from sppd.core.utils import calculate_days
from sppd.models.assignment import TravelType
from sppd.schemas.assignment import (
    EDITABLE_FIELDS, RATE_FIELDS, Assignment, AssignmentDraft, CostLine
)
from sppd.schemas.rate_table import RateTableEntry
from sppd.schemas.traveler import Traveler

logger = logging.getLogger(__name__)


def lodging_nights(days: int) -> int:
    """Nights spent away for a trip of ``days`` inclusive days."""
    return max(0, days - 1)


def start_draft(travel_type: TravelType = TravelType.WITHIN_REGION) -> AssignmentDraft:
    """Empty draft for a new assignment."""
    return AssignmentDraft(origin=settings.DEFAULT_ORIGIN, travel_type=travel_type)


def edit_draft(assignment: Assignment) -> AssignmentDraft:
    """
    Start editing a saved assignment. Its destination counts as already
    looked up, so opening the form never replaces the stored rates.
    """
    return AssignmentDraft(
        **assignment.model_dump(),
        last_auto_destination=assignment.destination or None,
    )


class CostDerivationEngine:
    """Derives and recomputes cost lines from reference data."""

    def __init__(self, rate_entries: Iterable[RateTableEntry], travelers: Iterable[Traveler]):
        self.rates: Dict[str, RateTableEntry] = {entry.destination: entry for entry in rate_entries}
        self.travelers: Dict[int, Traveler] = {traveler.id: traveler for traveler in travelers}

    def rate_for(self, destination: Optional[str]) -> Optional[RateTableEntry]:
        """Rate table entry for an exact, case-sensitive destination."""
        if not destination:
            return None
        return self.rates.get(destination)

    def _traveler(self, traveler_id: int) -> Traveler:
        traveler = self.travelers.get(traveler_id)
        if traveler is None:
            raise NotFoundError("Traveler", traveler_id)
        return traveler

    def derive_on_traveler_added(self, draft: AssignmentDraft, traveler_id: int) -> CostLine:
        """
        Add a traveler and a freshly priced cost line for them.
        Rates are zero when the current destination has no rate table entry.
        """
        if traveler_id in draft.traveler_ids:
            raise ValidationError(f"Traveler {traveler_id} is already on this assignment")
        traveler = self._traveler(traveler_id)
        entry = self.rate_for(draft.destination)
        days = draft.duration_days

        rates = {field: getattr(entry, field) if entry else Decimal(0) for field in RATE_FIELDS}
        line = CostLine(
            traveler_id=traveler_id,
            daily_days=days,
            lodging_days=lodging_nights(days),
            representation=traveler.representation_rate(draft.travel_type),
            representation_days=days,
            **rates,
        )
        draft.traveler_ids.append(traveler_id)
        draft.cost_lines.append(line)
        return line

    def remove_traveler(self, draft: AssignmentDraft, traveler_id: int) -> None:
        """Drop a traveler and their cost line."""
        draft.traveler_ids = [tid for tid in draft.traveler_ids if tid != traveler_id]
        draft.cost_lines = [line for line in draft.cost_lines if line.traveler_id != traveler_id]

    def toggle_traveler(self, draft: AssignmentDraft, traveler_id: int) -> AssignmentDraft:
        """Select an unselected traveler, or deselect a selected one."""
        if traveler_id in draft.traveler_ids:
            self.remove_traveler(draft, traveler_id)
        else:
            self.derive_on_traveler_added(draft, traveler_id)
        return draft

    def recompute_on_date_change(self, draft: AssignmentDraft) -> AssignmentDraft:
        """
        Recompute the duration and overwrite the day counts of every cost line.
        Rate fields are left untouched. Nothing happens until both dates are set.
        """
        if draft.start_date is None or draft.end_date is None:
            return draft
        days = calculate_days(draft.start_date, draft.end_date)
        draft.duration_days = days
        for line in draft.cost_lines:
            line.daily_days = days
            line.lodging_days = lodging_nights(days)
            line.representation_days = days
        return draft

    def set_dates(
        self,
        draft: AssignmentDraft,
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> AssignmentDraft:
        """Change the travel dates; an inverted range is rejected and the draft kept as is."""
        if start_date is not None and end_date is not None:
            calculate_days(start_date, end_date)
        draft.start_date = start_date
        draft.end_date = end_date
        return self.recompute_on_date_change(draft)

    def recompute_on_destination_change(self, draft: AssignmentDraft) -> bool:
        """
        Copy the destination's rates onto every cost line, once per newly
        chosen destination. Returns True when rates were applied.

        A destination without a rate table entry leaves the lines alone so
        the user can enter rates by hand.
        """
        destination = draft.destination
        if not destination or destination == draft.last_auto_destination:
            return False
        entry = self.rate_for(destination)
        if entry is None:
            logger.debug(f"No rate table entry for {destination!r}, keeping manual rates")
            return False

        days = draft.duration_days
        for line in draft.cost_lines:
            for field in RATE_FIELDS:
                setattr(line, field, getattr(entry, field))
            line.daily_days = days
            line.lodging_days = lodging_nights(days)
            line.representation_days = days
        draft.last_auto_destination = destination
        logger.debug(f"Applied rates for {destination!r} to {len(draft.cost_lines)} cost line(s)")
        return True

    def set_destination(self, draft: AssignmentDraft, destination: str) -> AssignmentDraft:
        """Change the destination and run the automatic rate look-up."""
        draft.destination = destination
        self.recompute_on_destination_change(draft)
        return draft

    def recompute_on_travel_type_change(
        self,
        draft: AssignmentDraft,
        travel_type: TravelType,
    ) -> AssignmentDraft:
        """
        Switch travel type. The destination is cleared because each type has
        its own destination list; each line's representation rate follows the
        traveler's rate for the new type. Other cost fields are untouched.
        """
        draft.travel_type = travel_type
        draft.destination = ""
        for line in draft.cost_lines:
            traveler = self.travelers.get(line.traveler_id)
            if traveler is not None:
                line.representation = traveler.representation_rate(travel_type)
        return draft

    def set_travel_type(self, draft: AssignmentDraft, travel_type: TravelType) -> AssignmentDraft:
        """Change the travel type; a no-op when it is unchanged."""
        if travel_type == draft.travel_type:
            return draft
        return self.recompute_on_travel_type_change(draft, travel_type)

    def update_cost_line(
        self,
        draft: AssignmentDraft,
        traveler_id: int,
        **changes: Any,
    ) -> CostLine:
        """Manually override fields of one traveler's cost line."""
        line = draft.cost_line_for(traveler_id)
        if line is None:
            raise ValidationError(f"Traveler {traveler_id} is not on this assignment")
        unknown = [name for name in changes if name not in EDITABLE_FIELDS]
        if unknown:
            raise ValidationError(f"Cost line field(s) not editable: {', '.join(unknown)}")

        values = {name: value for name, value in changes.items() if value is not None}
        try:
            updated = CostLine(**{**line.model_dump(), **values})
        except SchemaValidationError as e:
            raise ValidationError(f"Invalid cost line values: {e.errors()}") from e

        draft.cost_lines = [updated if c.traveler_id == traveler_id else c for c in draft.cost_lines]
        return updated
