"""
Typed errors raised by the cost derivation and reconciliation services.

All of them are recoverable at the call site: the caller reports the error
and keeps the state it had before the call.

    SppdError (base)
    |
    +-- ValidationError
    |   +-- InvalidRangeError
    |
    +-- NotFoundError
    |
    +-- ReferentialIntegrityError
"""
from datetime import date
from typing import Any, List, Optional


class SppdError(Exception):
    """Base class for all domain errors."""
    code: str = "SPPD_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{self.code}: {message}")


class ValidationError(SppdError):
    """A value was rejected before it was accepted into an assignment."""
    code = "VALIDATION_ERROR"


class InvalidRangeError(ValidationError):
    """End date lies before start date."""
    code = "INVALID_RANGE"

    def __init__(self, start_date: date, end_date: date):
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(
            f"End date {end_date.isoformat()} is before start date {start_date.isoformat()}"
        )


class NotFoundError(SppdError):
    """Referenced record does not exist."""
    code = "NOT_FOUND"

    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key!r} not found")


class ReferentialIntegrityError(SppdError):
    """Record is still referenced by one or more assignments."""
    code = "REFERENTIAL_INTEGRITY"

    def __init__(self, entity: str, key: Any, assignment_ids: Optional[List[int]] = None):
        self.entity = entity
        self.key = key
        self.assignment_ids = assignment_ids or []
        super().__init__(
            f"{entity} {key!r} is used by {len(self.assignment_ids)} assignment(s) and cannot be deleted"
        )
