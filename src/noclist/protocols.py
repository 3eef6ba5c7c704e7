"""Protocol definitions for dependency injection and interface contracts."""

from typing import Protocol

import httpx


class HttpTransport(Protocol):
    """Anything that can send a prepared request.

    ``httpx.AsyncClient`` satisfies this; tests substitute a fake.
    """

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request and return its response.

        Raises:
            httpx.TransportError: For network errors, timeouts, DNS failures.
        """
        ...


class TokenProvider(Protocol):
    """Protocol for authentication token providers."""

    async def get_valid_token(self) -> str:
        """Get a valid authentication token.

        Returns:
            Opaque token string.

        Raises:
            ClientError: If the auth endpoint rejects the request.
            TooManyRetriesError: If the auth endpoint keeps failing.
            MalformedResponseError: If the token header is missing.
        """
        ...
