"""Marker base for domain services."""


class Service:
    """Domain service: logic spanning several aggregates (for example a
    like, its target's counter and the owner's notification).
    """

    pass
