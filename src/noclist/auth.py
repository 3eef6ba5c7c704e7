"""Authentication token acquisition."""

import asyncio
import logging

from .config import Config
from .consts import TOKEN_HEADER
from .exceptions import MalformedResponseError
from .http import build_request
from .protocols import HttpTransport
from .retry import RetryPolicy, send_with_retry

logger = logging.getLogger("noclist.auth")


class AuthManager:
    """Authentication token manager.

    Responsibilities:
    - Acquire the BADSEC token once per process and memoize it
    - Serialize acquisition so concurrent callers share one auth round-trip
    """

    def __init__(
        self,
        config: Config,
        transport: HttpTransport,
        retry_policy: RetryPolicy | None = None,
    ):
        """Initialize AuthManager.

        Args:
            config: Config instance with the auth URL.
            transport: HTTP transport (for token requests only)
            retry_policy: Retry policy for the auth request. If None, built from config.
        """
        self.config = config
        self.transport = transport
        self.retry_policy = retry_policy or config.retry_policy()
        self._token = ""
        self._lock = asyncio.Lock()

    @property
    def token(self) -> str:
        """Current token, or an empty string before acquisition."""
        return self._token

    async def get_valid_token(self) -> str:
        """Get the authentication token, acquiring it on first use.

        Returns:
            Opaque token string.

        Raises:
            ClientError: If the auth endpoint rejects the request.
            TooManyRetriesError: If the auth endpoint keeps failing.
            MalformedResponseError: If the token header is missing.
        """
        await self.ensure_token()
        return self._token

    async def ensure_token(self) -> None:
        """Acquire the token unless one is already held.

        The check and the acquisition happen under one lock, so the token is
        written at most once.
        """
        async with self._lock:
            if self._token:
                return
            self._token = await self._request_token()

    async def _request_token(self) -> str:
        logger.debug("Requesting authentication token")
        request = build_request(self.config, self.config.auth_url)
        response = await send_with_retry(self.transport, request, self.retry_policy)

        token = response.headers.get(TOKEN_HEADER, "")
        if not token:
            raise MalformedResponseError(
                f"Auth response carried no {TOKEN_HEADER} header",
                errors=[f"Missing required header: {TOKEN_HEADER}"],
                suggestions=["Check that base_url points at a BADSEC server"],
                context={
                    "auth_url": self.config.auth_url,
                    "status_code": response.status_code,
                },
            )

        logger.info("Authentication token acquired")
        return token
