"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class RevalidationError(AdapterError):
    """Revalidation request to the presentation layer failed."""

    pass
