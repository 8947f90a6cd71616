"""Session admission exceptions."""


class SessionCapacityError(Exception):
    """Raised when the session registry has no free slot.

    Attributes:
        active: Sessions registered when the slot request timed out.
        limit: Configured maximum number of concurrent sessions.
    """

    def __init__(self, *, active: int, limit: int) -> None:
        super().__init__(f"session registry at capacity ({active}/{limit})")
        self.active = active
        self.limit = limit


__all__ = ["SessionCapacityError"]
