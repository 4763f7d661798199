"""
Custom exceptions for AI connectors.

Every failure surfaced by the library is an AIConnectifyError carrying the
provider name and a message. Subclasses let callers branch on the kind of
failure without parsing messages.
"""

from typing import Optional


class AIConnectifyError(Exception):
    """Base exception for all connector errors."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class ValidationError(AIConnectifyError):
    """
    Caller input was rejected before any request was sent.

    Raised by the validation helpers with the exact message of the failed check.
    """

    pass


class UnknownConnectorError(AIConnectifyError):
    """Requested connector name is not registered."""

    pass


class AuthenticationError(AIConnectifyError):
    """
    Authentication/API key error.

    Used for 401 responses that indicate invalid credentials.
    """

    pass


class PermissionDeniedError(AIConnectifyError):
    """
    Access to the resource is forbidden (403).

    Vendors also use this status for exhausted quotas and disabled features.
    """

    pass


class NotFoundError(AIConnectifyError):
    """Referenced model, job, dataset or file does not exist (404)."""

    pass


class RateLimitError(AIConnectifyError):
    """
    Rate limit exceeded error.

    Includes optional retry_after information from the vendor. The library
    never retries on its own.
    """

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        status_code: Optional[int] = 429,
        retry_after: Optional[int] = None,
    ):
        super().__init__(message, provider=provider, status_code=status_code)
        self.retry_after = retry_after


class TransientError(AIConnectifyError):
    """
    Temporary error.

    Used for network failures, timeouts and server errors (5xx).
    """

    pass


class MalformedResponseError(AIConnectifyError):
    """
    Response format is invalid or unexpected.

    Used when the vendor reply cannot be parsed or lacks the field an
    operation unwraps.
    """

    pass
