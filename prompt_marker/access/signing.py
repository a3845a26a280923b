"""
Session token signing.

A token is ``<payload>.<signature>``: the payload is URL-safe base64 of
compact JSON (padding stripped so the value is cookie-safe) and the
signature is the hex HMAC-SHA256 of the payload under the secret.
"""

import base64
import binascii
import hashlib
import hmac
import json
from typing import Any


class TokenError(Exception):
    """Raised when a token is malformed or its signature does not verify."""


class TokenSigner:
    """Signs and verifies JSON payloads with HMAC-SHA256."""

    SEPARATOR = "."

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("Signing secret must not be empty")
        self._key = secret.encode("utf-8")

    def sign(self, payload: dict[str, Any]) -> str:
        """Serialize and sign a payload."""
        raw = json.dumps(payload, separators=(",", ":"), sort_keys=True).encode("utf-8")
        body = base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")
        return f"{body}{self.SEPARATOR}{self._signature(body)}"

    def unsign(self, token: str) -> dict[str, Any]:
        """
        Verify a token and return its payload.

        Raises:
            TokenError: If the token is malformed, tampered with, or not a JSON object.
        """
        if not isinstance(token, str) or self.SEPARATOR not in token:
            raise TokenError("Malformed token")

        body, _, signature = token.rpartition(self.SEPARATOR)
        expected = self._signature(body).encode("ascii")
        if not body or not hmac.compare_digest(signature.encode("utf-8"), expected):
            raise TokenError("Bad signature")

        try:
            padded = body + "=" * (-len(body) % 4)
            payload = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
        except (binascii.Error, UnicodeError, ValueError) as e:
            raise TokenError("Undecodable payload") from e

        if not isinstance(payload, dict):
            raise TokenError("Payload is not an object")
        return payload

    def _signature(self, body: str) -> str:
        return hmac.new(self._key, body.encode("utf-8"), hashlib.sha256).hexdigest()
