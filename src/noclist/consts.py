"""High-value constants for the noclist package."""

# Package metadata
PACKAGE_VERSION = "1.0.0"
CLIENT_NAME = "noclist"
USER_AGENT = f"{CLIENT_NAME}/{PACKAGE_VERSION}"

# External API contract consts
DEFAULT_BASE_URL = "http://localhost:8888"
AUTH_URL_PATH = "/auth"
USERS_URL_PATH = "/users"
TOKEN_HEADER = "Badsec-Authentication-Token"
CHECKSUM_HEADER = "X-Request-Checksum"

# Business logic consts
DEFAULT_MAX_ATTEMPTS = 3
MAX_ERROR_BODY_CHARS = 500  # truncate server bodies quoted in errors
