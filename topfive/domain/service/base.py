"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span entities, such as keeping resource
    counters in step with vote records.
    """

    pass
