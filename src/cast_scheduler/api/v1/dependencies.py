"""Shared API dependencies and error translation."""

from typing import Annotated, Any, cast

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from cast_scheduler.db.session import get_db
from cast_scheduler.services.errors import (
    ConflictError,
    NotFoundError,
    SchedulerError,
    ValidationError,
)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]

_STATUS_BY_ERROR: dict[type[SchedulerError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_for_error(exc: SchedulerError) -> int:
    """Return the HTTP status code that represents a domain error."""
    for error_type, code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def scheduler_error_handler(request: Request, exc: SchedulerError) -> JSONResponse:
    """Render domain errors as ``{"detail": message}`` responses."""
    return JSONResponse(status_code=status_for_error(exc), content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handler to ``app``."""
    app.add_exception_handler(SchedulerError, cast(Any, scheduler_error_handler))
