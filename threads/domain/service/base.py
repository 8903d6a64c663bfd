"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold logic that spans several entities, such as the
    reply tree and its back-references.
    """

    pass
