"""NOC list client - authenticates and fetches the VIP list."""

import asyncio
import logging

import httpx

from .auth import AuthManager
from .checksum import request_checksum
from .config import Config, get_config
from .consts import CHECKSUM_HEADER, USER_AGENT, USERS_URL_PATH
from .http import build_request
from .protocols import HttpTransport, TokenProvider
from .retry import RetryPolicy, send_with_retry

logger = logging.getLogger("noclist.client")


def parse_vips(body: str) -> list[str]:
    """Split a newline-delimited body into VIP identifiers.

    Each line becomes one element, in wire order, with its ``\\n`` or ``\\r\\n``
    terminator removed. Interior whitespace and empty interior lines are kept;
    a trailing terminator does not produce an extra empty element.
    """
    if not body:
        return []
    lines = body.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class NocListClient:
    """BADSEC NOC list client.

    Responsibilities:
    - Make sure a token is held before touching the protected resource
    - Sign the list request with the token checksum
    - Parse the list response
    """

    def __init__(
        self,
        config: Config | None = None,
        transport: HttpTransport | None = None,
        token_provider: TokenProvider | None = None,
        retry_policy: RetryPolicy | None = None,
    ):
        """Initialize NocListClient.

        Args:
            config: Config instance. If None, uses get_config().
            transport: HTTP transport. If None, creates an httpx.AsyncClient
                which this client then owns and closes.
            token_provider: Authentication token provider. If None, creates AuthManager.
            retry_policy: Retry policy for both requests. If None, built from config.
        """
        self.config = config or get_config()
        self.retry_policy = retry_policy or self.config.retry_policy()

        self._owns_transport = transport is None
        self.transport = transport or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=self.config.timeout_seconds,
        )

        self.token_provider = token_provider or AuthManager(
            self.config, self.transport, self.retry_policy
        )

        logger.debug(f"NOC list client created for {self.config.base_url}")

    async def __aenter__(self) -> "NocListClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self.transport, httpx.AsyncClient):
            await self.transport.aclose()

    async def fetch(self, timeout: float | None = None) -> list[str]:
        """Authenticate if needed, then fetch the VIP list.

        Args:
            timeout: Overall deadline in seconds. If None, uses
                config.deadline_seconds (which may itself be None: no deadline).

        Returns:
            VIP identifiers in the order the server sent them.

        Raises:
            ClientError: If either request is rejected with a 4xx.
            TooManyRetriesError: If either endpoint keeps failing.
            MalformedResponseError: If the auth response has no token.
            TimeoutError: If the deadline passes first.
        """
        deadline = timeout if timeout is not None else self.config.deadline_seconds
        async with asyncio.timeout(deadline):
            token = await self.token_provider.get_valid_token()
            return await self.list_users(token)

    async def list_users(self, token: str) -> list[str]:
        """Fetch the VIP list with a request signed by ``token``.

        Args:
            token: Authentication token; the checksum is computed over it even
                when empty.

        Returns:
            Parsed VIP identifiers.
        """
        request = build_request(
            self.config,
            self.config.users_url,
            headers={CHECKSUM_HEADER: request_checksum(token, USERS_URL_PATH)},
        )
        response = await send_with_retry(self.transport, request, self.retry_policy)
        vips = parse_vips(response.text)
        logger.info(f"Fetched {len(vips)} VIPs")
        return vips

