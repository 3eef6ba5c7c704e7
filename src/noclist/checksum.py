"""Request checksum derivation."""

import hashlib


def request_checksum(token: str, path: str) -> str:
    """Return the hex SHA-256 digest of ``token + path``.

    An empty token is hashed as-is; callers must have acquired a token first.
    """
    return hashlib.sha256(f"{token}{path}".encode()).hexdigest()
