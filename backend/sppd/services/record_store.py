"""
Record store: the persistence boundary of the cost and budget services.

The services only see the typed records from ``sppd.schemas``; this module
maps them to and from SQLAlchemy rows. Every read returns a complete
collection, every write touches a single record.
"""
import logging
from typing import List, Protocol
from sqlalchemy.orm import Session
from sppd import models
from sppd.core.exceptions import NotFoundError
from sppd.schemas.assignment import RATE_FIELDS, Assignment, CostLine
from sppd.schemas.budget_line import BudgetLine
from sppd.schemas.rate_table import RateTableEntry
from sppd.schemas.traveler import Traveler

logger = logging.getLogger(__name__)

_TRAVELER_FIELDS = ("name", "nip", "rank", "position", "representation_within", "representation_outside")
_BUDGET_LINE_FIELDS = (
    "name", "budget_ceiling", "disbursement_ceiling",
    "quarter_1", "quarter_2", "quarter_3", "quarter_4",
)
_ASSIGNMENT_FIELDS = (
    "budget_line_code", "assignment_number", "purpose", "origin", "transportation",
    "travel_type", "destination", "start_date", "end_date", "duration_days",
)
_COST_LINE_FIELDS = RATE_FIELDS + (
    "daily_days", "lodging_days", "representation", "representation_days",
)


class RecordStore(Protocol):
    """Operations the services need from persistence."""

    def list_travelers(self) -> List[Traveler]: ...
    def get_traveler(self, traveler_id: int) -> Traveler: ...
    def upsert_traveler(self, traveler: Traveler) -> Traveler: ...
    def delete_traveler(self, traveler_id: int) -> None: ...

    def list_budget_lines(self) -> List[BudgetLine]: ...
    def get_budget_line(self, code: str) -> BudgetLine: ...
    def upsert_budget_line(self, budget_line: BudgetLine) -> BudgetLine: ...
    def delete_budget_line(self, code: str) -> None: ...

    def list_rate_entries(self) -> List[RateTableEntry]: ...
    def get_rate_entry(self, destination: str) -> RateTableEntry: ...
    def upsert_rate_entry(self, entry: RateTableEntry) -> RateTableEntry: ...
    def delete_rate_entry(self, destination: str) -> None: ...

    def list_assignments(self) -> List[Assignment]: ...
    def get_assignment(self, assignment_id: int) -> Assignment: ...
    def upsert_assignment(self, assignment: Assignment) -> Assignment: ...
    def delete_assignment(self, assignment_id: int) -> None: ...


def to_traveler(row: models.Traveler) -> Traveler:
    return Traveler.model_validate(row)


def to_budget_line(row: models.BudgetLine) -> BudgetLine:
    return BudgetLine.model_validate(row)


def to_rate_entry(row: models.RateTableEntry) -> RateTableEntry:
    return RateTableEntry.model_validate(row)


def to_assignment(row: models.Assignment) -> Assignment:
    """Rebuild an assignment; its traveler list is the order of its cost lines."""
    return Assignment(
        id=row.id,
        traveler_ids=[line.traveler_id for line in row.cost_lines],
        cost_lines=[CostLine.model_validate(line) for line in row.cost_lines],
        **{field: getattr(row, field) for field in _ASSIGNMENT_FIELDS},
    )


class SqlAlchemyRecordStore:
    """RecordStore backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    # Travelers

    def _traveler_row(self, traveler_id: int) -> models.Traveler:
        row = self.db.query(models.Traveler).filter(models.Traveler.id == traveler_id).first()
        if not row:
            raise NotFoundError("Traveler", traveler_id)
        return row

    def list_travelers(self) -> List[Traveler]:
        rows = self.db.query(models.Traveler).order_by(models.Traveler.name).all()
        return [to_traveler(row) for row in rows]

    def get_traveler(self, traveler_id: int) -> Traveler:
        return to_traveler(self._traveler_row(traveler_id))

    def upsert_traveler(self, traveler: Traveler) -> Traveler:
        if traveler.id is None:
            row = models.Traveler()
            self.db.add(row)
        else:
            row = self._traveler_row(traveler.id)
        for field in _TRAVELER_FIELDS:
            setattr(row, field, getattr(traveler, field))
        self.db.commit()
        self.db.refresh(row)
        logger.info(f"Saved traveler {row.id}")
        return to_traveler(row)

    def delete_traveler(self, traveler_id: int) -> None:
        self.db.delete(self._traveler_row(traveler_id))
        self.db.commit()
        logger.info(f"Deleted traveler {traveler_id}")

    # Budget lines

    def _budget_line_row(self, code: str) -> models.BudgetLine:
        row = self.db.query(models.BudgetLine).filter(models.BudgetLine.code == code).first()
        if not row:
            raise NotFoundError("BudgetLine", code)
        return row

    def list_budget_lines(self) -> List[BudgetLine]:
        rows = self.db.query(models.BudgetLine).order_by(models.BudgetLine.code).all()
        return [to_budget_line(row) for row in rows]

    def get_budget_line(self, code: str) -> BudgetLine:
        return to_budget_line(self._budget_line_row(code))

    def upsert_budget_line(self, budget_line: BudgetLine) -> BudgetLine:
        row = self.db.query(models.BudgetLine).filter(models.BudgetLine.code == budget_line.code).first()
        if not row:
            row = models.BudgetLine(code=budget_line.code)
            self.db.add(row)
        for field in _BUDGET_LINE_FIELDS:
            setattr(row, field, getattr(budget_line, field))
        self.db.commit()
        self.db.refresh(row)
        logger.info(f"Saved budget line {row.code}")
        return to_budget_line(row)

    def delete_budget_line(self, code: str) -> None:
        self.db.delete(self._budget_line_row(code))
        self.db.commit()
        logger.info(f"Deleted budget line {code}")

    # Rate table

    def _rate_entry_row(self, destination: str) -> models.RateTableEntry:
        row = self.db.query(models.RateTableEntry).filter(
            models.RateTableEntry.destination == destination
        ).first()
        if not row:
            raise NotFoundError("RateTableEntry", destination)
        return row

    def list_rate_entries(self) -> List[RateTableEntry]:
        rows = self.db.query(models.RateTableEntry).order_by(models.RateTableEntry.destination).all()
        return [to_rate_entry(row) for row in rows]

    def get_rate_entry(self, destination: str) -> RateTableEntry:
        return to_rate_entry(self._rate_entry_row(destination))

    def upsert_rate_entry(self, entry: RateTableEntry) -> RateTableEntry:
        """Insert or replace the whole entry for a destination."""
        row = self.db.query(models.RateTableEntry).filter(
            models.RateTableEntry.destination == entry.destination
        ).first()
        if not row:
            row = models.RateTableEntry(destination=entry.destination)
            self.db.add(row)
        for field in RATE_FIELDS:
            setattr(row, field, getattr(entry, field))
        self.db.commit()
        self.db.refresh(row)
        logger.info(f"Saved rate table entry for {row.destination}")
        return to_rate_entry(row)

    def delete_rate_entry(self, destination: str) -> None:
        self.db.delete(self._rate_entry_row(destination))
        self.db.commit()
        logger.info(f"Deleted rate table entry for {destination}")

    # Assignments

    def _assignment_row(self, assignment_id: int) -> models.Assignment:
        row = self.db.query(models.Assignment).filter(models.Assignment.id == assignment_id).first()
        if not row:
            raise NotFoundError("Assignment", assignment_id)
        return row

    def list_assignments(self) -> List[Assignment]:
        rows = self.db.query(models.Assignment).order_by(
            models.Assignment.start_date.desc(), models.Assignment.id.desc()
        ).all()
        return [to_assignment(row) for row in rows]

    def get_assignment(self, assignment_id: int) -> Assignment:
        return to_assignment(self._assignment_row(assignment_id))

    def upsert_assignment(self, assignment: Assignment) -> Assignment:
        """Insert or replace an assignment together with all its cost lines."""
        if assignment.id is None:
            row = models.Assignment()
            self.db.add(row)
        else:
            row = self._assignment_row(assignment.id)
        for field in _ASSIGNMENT_FIELDS:
            setattr(row, field, getattr(assignment, field))

        # Old lines must be gone before new ones hit the (assignment, traveler) constraint
        row.cost_lines.clear()
        self.db.flush()
        for position, line in enumerate(assignment.cost_lines):
            row.cost_lines.append(models.CostLine(
                traveler_id=line.traveler_id,
                position=position,
                **{field: getattr(line, field) for field in _COST_LINE_FIELDS},
            ))

        self.db.commit()
        self.db.refresh(row)
        logger.info(f"Saved assignment {row.id} with {len(row.cost_lines)} cost line(s)")
        return to_assignment(row)

    def delete_assignment(self, assignment_id: int) -> None:
        self.db.delete(self._assignment_row(assignment_id))
        self.db.commit()
        logger.info(f"Deleted assignment {assignment_id}")
