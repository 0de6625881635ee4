"""Translation of console errors into HTTP responses."""

from fastapi import HTTPException, status

from hr_admin.domain.exceptions import (
    AuthenticationError,
    ConfirmationRequiredError,
    ConsoleError,
    EntityNotFoundError,
    ModalStateError,
    UnknownResourceError,
    ValidationError,
)

_STATUS_BY_ERROR: tuple[tuple[type[ConsoleError], int], ...] = (
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ConfirmationRequiredError, status.HTTP_409_CONFLICT),
    (ModalStateError, status.HTTP_409_CONFLICT),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (UnknownResourceError, status.HTTP_404_NOT_FOUND),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
)


def http_error(exc: ConsoleError) -> HTTPException:
    """Map a console error to an HTTPException carrying its user-visible message.

    Backend failures (fetch, mutation, unexpected response) become 502.
    """
    code = next(
        (code for error_type, code in _STATUS_BY_ERROR if isinstance(exc, error_type)),
        status.HTTP_502_BAD_GATEWAY,
    )
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=code, detail={"message": exc.message, "errors": exc.errors})
    return HTTPException(status_code=code, detail=exc.message)
