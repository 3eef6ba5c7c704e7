"""Request construction shared by the auth and list calls."""

import httpx

from .config import Config
from .consts import USER_AGENT


def build_request(
    config: Config, url: str, headers: dict[str, str] | None = None
) -> httpx.Request:
    """Build a GET request carrying the user agent and the configured timeout.

    Requests go through ``transport.send`` directly, which does not merge
    client defaults, so both are set on the request itself.
    """
    return httpx.Request(
        "GET",
        url,
        headers={"User-Agent": USER_AGENT, **(headers or {})},
        extensions={"timeout": httpx.Timeout(config.timeout_seconds).as_dict()},
    )
