"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the discussion rules that span several replies or
    a post and its replies. They never perform I/O.
    """

    pass
