"""
Shared route dependencies and error translation.
"""
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session
from sppd.core.exceptions import (
    NotFoundError, ReferentialIntegrityError, SppdError, ValidationError
)
from sppd.core.utils import format_error
from sppd.db.session import get_db
from sppd.services.record_store import SqlAlchemyRecordStore


def get_store(db: Session = Depends(get_db)) -> SqlAlchemyRecordStore:
    """Dependency for getting the record store of the request's session."""
    return SqlAlchemyRecordStore(db)


def http_error(e: SppdError) -> HTTPException:
    """Map a domain error to the HTTP error shown to the user."""
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    if isinstance(e, ReferentialIntegrityError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=format_error(e.message, {"assignment_ids": e.assignment_ids}),
        )
    if isinstance(e, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)
