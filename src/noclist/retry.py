"""Bounded retry engine shared by the auth and list requests."""

import asyncio
import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Annotated

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .consts import DEFAULT_MAX_ATTEMPTS, MAX_ERROR_BODY_CHARS
from .exceptions import (
    ClientError,
    NocListError,
    ServerError,
    TooManyRetriesError,
    TransportError,
)
from .protocols import HttpTransport

logger = logging.getLogger("noclist.retry")


class Outcome(StrEnum):
    """What the retry engine should do with a response."""

    SUCCESS = "success"
    RETRY = "retry"
    FATAL = "fatal"


def classify_status(status_code: int) -> Outcome:
    """Classify an HTTP status: 2xx succeeds, 4xx is fatal, anything else retries."""
    if 200 <= status_code < 300:
        return Outcome.SUCCESS
    if 400 <= status_code < 500:
        return Outcome.FATAL
    return Outcome.RETRY


class RetryPolicy(BaseModel):
    """Configuration for retry behavior.

    Delay before retry ``n`` (1-indexed) is
    ``delay_seconds * backoff_factor ** (n - 1)``, capped at ``max_delay_seconds``.
    The default policy retries immediately.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_attempts: Annotated[int, Field(ge=1, le=10)] = DEFAULT_MAX_ATTEMPTS
    delay_seconds: Annotated[float, Field(ge=0.0, le=60.0)] = 0.0
    backoff_factor: Annotated[float, Field(ge=1.0, le=5.0)] = 1.0
    max_delay_seconds: Annotated[float, Field(ge=0.0, le=300.0)] = 30.0
    classify: Callable[[int], Outcome] = classify_status

    def get_delay_seconds(self, retry: int) -> float:
        """Calculate the delay before a retry.

        Args:
            retry: Retry number, 1 for the first retry.

        Returns:
            Delay in seconds (0.0 means retry immediately).
        """
        if self.delay_seconds == 0:
            return 0.0
        delay = self.delay_seconds * (self.backoff_factor ** (retry - 1))
        return min(delay, self.max_delay_seconds)


def _body_excerpt(response: httpx.Response) -> str:
    text = response.text
    if len(text) > MAX_ERROR_BODY_CHARS:
        return text[:MAX_ERROR_BODY_CHARS] + "..."
    return text


async def send_with_retry(
    transport: HttpTransport,
    request: httpx.Request,
    policy: RetryPolicy | None = None,
) -> httpx.Response:
    """Send a request, retrying transient failures up to the policy bound.

    Args:
        transport: Anything with an async ``send(request)``.
        request: Prepared request, re-sent unchanged on each attempt.
        policy: Retry policy. If None, uses RetryPolicy().

    Returns:
        The first response whose status classifies as a success.

    Raises:
        ClientError: Immediately, when a status classifies as fatal.
        TooManyRetriesError: When every attempt failed transiently. The last
            ServerError or TransportError is chained as ``__cause__``.
    """
    policy = policy or RetryPolicy()
    url = str(request.url)
    last_error: NocListError | None = None

    for attempt in range(1, policy.max_attempts + 1):
        if attempt > 1:
            delay = policy.get_delay_seconds(attempt - 1)
            logger.debug(
                f"Retrying {request.method} {url} "
                f"(attempt {attempt}/{policy.max_attempts}, delay {delay:.2f}s)"
            )
            if delay > 0:
                await asyncio.sleep(delay)

        try:
            response = await transport.send(request)
        except httpx.TransportError as e:
            logger.debug(f"{request.method} {url} transport error: {e!r}")
            last_error = TransportError(
                f"Transport error for {request.method} {url}: {e}",
                errors=[repr(e)],
                context={"url": url, "attempt": attempt},
            )
            last_error.__cause__ = e
            continue

        status = response.status_code
        outcome = policy.classify(status)
        logger.debug(f"{request.method} {url} -> {status} ({outcome})")

        if outcome is Outcome.SUCCESS:
            return response

        body = _body_excerpt(response)
        context = {"url": url, "attempt": attempt, "status_code": status}
        if outcome is Outcome.FATAL:
            raise ClientError(
                f"HTTP Status {status}: {body}",
                status_code=status,
                body=body,
                suggestions=["The request was rejected; retrying will not help"],
                context=context,
            )

        last_error = ServerError(
            f"HTTP Status {status}: {body}",
            status_code=status,
            body=body,
            context=context,
        )

    logger.info(
        f"Giving up on {request.method} {url} after {policy.max_attempts} attempts"
    )
    raise TooManyRetriesError(
        f"{request.method} {url} failed after {policy.max_attempts} attempts",
        attempts=policy.max_attempts,
        errors=[last_error.message] if last_error else [],
        suggestions=["The service appears to be persistently failing; try later"],
        context={"url": url},
    ) from last_error
