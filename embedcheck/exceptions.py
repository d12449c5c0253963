from typing import Any, Optional


class EmbedCheckError(Exception):
    """Base error for embedcheck"""


class SimilarityRequestError(EmbedCheckError):
    """
    Similarity call failed in transport or returned a non-2xx status.
    `payload` holds the remote error body when the service sent one.
    """

    def __init__(self, message: str, payload: Any = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.payload = payload
        self.status_code = status_code

    @property
    def detail(self) -> Any:
        return self.payload if self.payload is not None else str(self)


class SimilarityResponseError(EmbedCheckError):
    """Similarity response did not match the request shape"""

    def __init__(self, message: str, expected: int, received: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.received = received


class BackendProbeError(EmbedCheckError):
    """Supabase returned an error result or no rows for a probe step"""
