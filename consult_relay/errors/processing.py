"""Internal processing failure surfaced to callers as a generic fallback."""

from ..config.branding import CONSULTATION_ERROR_MESSAGE, CONSULTATION_FALLBACK


class InternalProcessingError(Exception):
    """Raised when result production fails unexpectedly.

    The original exception is chained as ``__cause__`` and logged where it
    is caught; only ``public_message`` and ``fallback`` reach the client.

    Attributes:
        public_message: Safe, user-facing error text.
        fallback: Recommendation shown alongside the error.
    """

    def __init__(
        self,
        public_message: str = CONSULTATION_ERROR_MESSAGE,
        fallback: str | None = CONSULTATION_FALLBACK,
    ) -> None:
        super().__init__(public_message)
        self.public_message = public_message
        self.fallback = fallback


__all__ = ["InternalProcessingError"]
