"""Domain layer errors."""

from collections.abc import Iterator
from contextlib import contextmanager


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StructuralIntegrityError(DomainError):
    """Raised when stored references violate the reply tree shape.

    A thread reachable twice from the same root means the parent links
    contain a cycle.
    """

    def __init__(self, root_id: str, repeated_id: str):
        self.root_id = root_id
        self.repeated_id = repeated_id
        super().__init__(
            f"Thread {repeated_id} reached twice while walking replies of {root_id}"
        )


class PersistenceError(DomainError):
    """Raised when an underlying store operation fails."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"failed {operation}: {message}")


@contextmanager
def storage_operation(operation: str) -> Iterator[None]:
    """Re-signal store failures raised in the block as PersistenceError.

    Domain errors pass through untouched.

    Args:
        operation: Name used in the error message, e.g. "creating thread"
    """
    try:
        yield
    except DomainError:
        raise
    except Exception as e:
        raise PersistenceError(operation, str(e)) from e
