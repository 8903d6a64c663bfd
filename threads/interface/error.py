"""Interface layer error mapping."""

import logfire
from fastapi import HTTPException, status

from threads.domain.error import (
    DomainError,
    NotFoundError,
    PersistenceError,
    StructuralIntegrityError,
    ValidationError,
)


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Translate an error raised by a use case into an HTTP error.

    Args:
        error: The raised error
        action: What the route was doing, e.g. "create thread"

    Returns:
        HTTPException to raise
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, StructuralIntegrityError):
        logfire.error(f"Failed to {action}: broken reply tree", error=str(error))
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, PersistenceError):
        logfire.error(
            f"Failed to {action}: store error",
            operation=error.operation,
            error=str(error),
        )
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error)
        )
    if isinstance(error, (ValidationError, DomainError, ValueError)):
        # Includes pydantic validation of domain models
        logfire.warn(f"Failed to {action}: invalid input", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error(f"Unexpected error while trying to {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
