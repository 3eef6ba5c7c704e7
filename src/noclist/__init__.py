"""noclist

Client for the BADSEC NOC list service: acquires an authentication token,
signs the list request with a checksum and retries transient failures.
"""

from .auth import AuthManager
from .checksum import request_checksum
from .client import NocListClient, parse_vips
from .config import Config, get_config
from .consts import PACKAGE_VERSION
from .exceptions import (
    ClientError,
    ConfigError,
    MalformedResponseError,
    NocListError,
    ServerError,
    TooManyRetriesError,
    TransportError,
)
from .retry import Outcome, RetryPolicy, classify_status, send_with_retry

__version__ = PACKAGE_VERSION

__all__ = [
    "__version__",
    "get_config",
    "request_checksum",
    "parse_vips",
    "classify_status",
    "send_with_retry",
    "Config",
    "AuthManager",
    "NocListClient",
    "Outcome",
    "RetryPolicy",
    "NocListError",
    "ConfigError",
    "TransportError",
    "ServerError",
    "ClientError",
    "TooManyRetriesError",
    "MalformedResponseError",
]
