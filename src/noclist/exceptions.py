"""noclist custom exceptions.

Exception Design Principles:
1. Split on whether retrying can help:
   - Transient faults the retry engine absorbs (TransportError, ServerError)
   - Faults where another attempt cannot help (ClientError, MalformedResponseError)
   - Persistent failure after the retry bound is reached (TooManyRetriesError)
2. Carry the HTTP status and body where one exists, so the CLI can report it
3. The core never handles these; they propagate to the caller of fetch()
"""


class NocListError(Exception):
    """Base exception for all noclist errors.

    Provides rich context and actionable suggestions beyond standard exceptions.
    """

    def __init__(
        self,
        message: str,  # the error message
        *,
        errors: list[str] | None = None,  # detailed list of errors (if available)
        suggestions: list[str] | None = None,  # remedial actions
        context: dict | None = None,  # additional detailed context
    ):
        """Initialize NocListError.

        Args:
            message: Primary error message for users
            errors: List of specific error details
            suggestions: List of actionable suggestions for resolution
            context: Additional context information as key-value pairs
        """
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        self.context = context or {}


class ConfigError(NocListError):
    """Application configuration errors - recoverable by user reconfiguration."""

    pass


class TransportError(NocListError):
    """Connection-level failure (refused, reset, timeout, truncated body).

    Retryable. The underlying httpx exception is chained as ``__cause__``.
    """

    pass


class HTTPStatusError(NocListError):
    """A response arrived with a status outside [200, 300)."""

    def __init__(self, message: str, *, status_code: int, body: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.body = body


class ServerError(HTTPStatusError):
    """5xx or otherwise unrecognised non-2xx status - retryable."""

    pass


class ClientError(HTTPStatusError):
    """4xx status - fatal, never retried.

    Usually a protocol mismatch such as a bad request checksum.
    """

    pass


class TooManyRetriesError(NocListError):
    """The retry bound was exhausted without a success or a client error.

    Signals that the service is persistently failing, as opposed to the
    request itself being wrong.
    """

    def __init__(self, message: str, *, attempts: int, **kwargs):
        super().__init__(message, **kwargs)
        self.attempts = attempts


class MalformedResponseError(NocListError):
    """A successful response lacked something the protocol requires."""

    pass
