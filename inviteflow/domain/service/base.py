"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the invitation rules that span a repository, settings
    and outbound adapters. They are built per request by the container.
    """
