"""Domain-specific exceptions — framework-independent.

Every exception carries a human-readable ``message`` that the console can
show to the operator as-is.
"""


class ConsoleError(Exception):
    """Base class for every error the console surfaces to the operator."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ConsoleError):
    """Raised client-side before any network call when form input is invalid.

    ``errors`` maps a field name to the reason it was rejected.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        self.errors = errors or {}
        super().__init__(message)


class FetchError(ConsoleError):
    """Raised when reading from the backend fails (network or non-2xx)."""

    def __init__(self, status_code: int | None, message: str):
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class MutationError(ConsoleError):
    """Raised when a create/update/delete request is rejected or fails."""

    def __init__(self, status_code: int | None, message: str):
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class NotFoundError(MutationError):
    """Raised when the backend does not recognise the entity being updated."""


class UnexpectedResponseError(ConsoleError):
    """Raised when the backend answers with something other than the expected JSON."""

    def __init__(self, status_code: int | None, message: str = "Unexpected response. Please try again."):
        self.status_code = status_code
        super().__init__(message)


class AuthenticationError(ConsoleError):
    """Raised when login or registration is refused by the backend."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ConfirmationRequiredError(ConsoleError):
    """Raised when a destructive action is attempted without explicit confirmation."""


class EntityNotFoundError(ConsoleError):
    """Raised when an id is not present in a screen's in-memory list."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ModalStateError(ConsoleError):
    """Raised on an illegal form/view modal transition (e.g. submitting in View mode)."""


class UnknownResourceError(ConsoleError):
    """Raised when a screen name is not in the resource catalog."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"Unknown resource '{resource}'")
