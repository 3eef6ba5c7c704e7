"""Pytest configuration and shared fixtures"""

import os
from collections import Counter

import httpx
import pytest

from noclist.config import Config
from noclist.consts import AUTH_URL_PATH, CHECKSUM_HEADER, TOKEN_HEADER, USERS_URL_PATH


TEST_BASE_URL = "http://badsec.test"
TEST_TOKEN = "12345"
TEST_CHECKSUM = "c20acb14a3d3339b9e92daebb173e41379f9f2fad4aa6a6326a696bd90c67419"
TEST_USERS_BODY = "4\n5\n6"


def make_response(status_code: int, text: str = "", headers: dict | None = None):
    """Build an httpx.Response the way the transport would return it"""
    return httpx.Response(status_code, text=text, headers=headers or {})


class FakeBadsecServer:
    """In-memory BADSEC server implementing the HttpTransport protocol.

    Scripted responses (or exceptions) are served first, in order; once a
    script runs out the endpoint behaves like a healthy server. /users
    answers 403 when the checksum header is wrong.
    """

    def __init__(
        self,
        auth_responses: list | None = None,
        users_responses: list | None = None,
        token: str = TEST_TOKEN,
        users_body: str = TEST_USERS_BODY,
    ):
        self.auth_responses = list(auth_responses or [])
        self.users_responses = list(users_responses or [])
        self.token = token
        self.users_body = users_body
        self.calls = Counter()
        self.requests: list[httpx.Request] = []

    async def send(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls[path] += 1
        self.requests.append(request)

        if path == AUTH_URL_PATH:
            if self.auth_responses:
                return self._next(self.auth_responses)
            return make_response(200, "not used", {TOKEN_HEADER: self.token})

        if path == USERS_URL_PATH:
            if self.users_responses:
                return self._next(self.users_responses)
            actual = request.headers.get(CHECKSUM_HEADER)
            if actual != TEST_CHECKSUM:
                return make_response(403, f"Bad checksum (got {actual})")
            return make_response(200, self.users_body)

        return make_response(404, "Not found")

    @staticmethod
    def _next(script: list) -> httpx.Response:
        item = script.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def clean_env():
    """Fixture that temporarily clears NOCLIST_* environment variables.

    This ensures Config tests see the true defaults without interference
    from environment variables that might be set in the user's shell.
    """
    noclist_vars = {
        key: value for key, value in os.environ.items() if key.startswith("NOCLIST_")
    }

    for key in noclist_vars:
        os.environ.pop(key, None)

    try:
        yield
    finally:
        for key, value in noclist_vars.items():
            os.environ[key] = value


@pytest.fixture
def config(clean_env):
    """Config pointed at the fake server"""
    return Config(base_url=TEST_BASE_URL, log_level="DEBUG")


@pytest.fixture
def server():
    """Healthy fake BADSEC server"""
    return FakeBadsecServer()
