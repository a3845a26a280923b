"""
Access gate - converts the shared access code into session tokens.

There are only two states. A caller without a valid token is
Unauthenticated; ``unlock`` with the right code moves it to
Authenticated by issuing a token. Expiry is not an event: every
request re-evaluates ``validate`` against the current time.
"""

import hmac
import logging
import time
from typing import Callable

from pydantic import ValidationError

from prompt_marker.access.signing import TokenError, TokenSigner
from prompt_marker.config import Settings
from prompt_marker.marking.text import clamp_text
from prompt_marker.models import SessionPayload

logger = logging.getLogger(__name__)


class AccessError(Exception):
    """Base class for authorization failures; always recoverable by unlocking again."""


class AccessDeniedError(AccessError):
    """Raised when a submitted access code is rejected."""

    def __init__(self) -> None:
        super().__init__("invalid_code")


class ReauthorizeRequired(AccessError):
    """Raised when a protected action is attempted without a live session."""

    def __init__(self) -> None:
        super().__init__("unauthorized")


class AccessGate:
    """
    Checks access codes and issues and validates session tokens.

    Tokens carry their own expiry and are integrity-protected,
    so the gate keeps no server-side session store.
    """

    def __init__(self, settings: Settings, clock: Callable[[], float] = time.time):
        """
        Initialize the gate.

        Args:
            settings: Configuration settings; supplies the code, secret and TTL.
            clock: Source of the current epoch time in seconds.
        """
        self._access_code = settings.access_code
        self._max_code_chars = settings.max_code_chars
        self._ttl_seconds = settings.session_minutes * 60
        self._signer = TokenSigner(settings.cookie_secret)
        self._clock = clock

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def now(self) -> int:
        return int(self._clock())

    def check_code(self, submitted: object) -> bool:
        """
        Compare a submitted code with the configured one.

        The code is truncated and trimmed first. Empty, non-text and
        wrong codes are all simply False.
        """
        if not isinstance(submitted, str):
            return False
        code = clamp_text(submitted, self._max_code_chars).strip()
        if not code:
            return False
        return hmac.compare_digest(code.encode("utf-8"), self._access_code.encode("utf-8"))

    def issue_session(self, now: int | None = None) -> str:
        """Issue a token expiring ``session_minutes`` after ``now``."""
        issued_at = self.now() if now is None else now
        payload = SessionPayload(exp=issued_at + self._ttl_seconds)
        return self._signer.sign(payload.model_dump())

    def unlock(self, submitted: object, now: int | None = None) -> str:
        """
        Exchange an access code for a session token.

        Raises:
            AccessDeniedError: If the code does not match.
        """
        if not self.check_code(submitted):
            logger.warning("Unlock rejected")
            raise AccessDeniedError()
        token = self.issue_session(now)
        logger.info("Unlock accepted; session valid for %d minutes", self._ttl_seconds // 60)
        return token

    def validate(self, token: str | None, now: int | None = None) -> bool:
        """Return True only for a well-formed, genuine, unexpired token."""
        if not token:
            return False

        try:
            payload = SessionPayload.model_validate(self._signer.unsign(token))
        except (TokenError, ValidationError) as e:
            logger.debug("Session token rejected: %s", e)
            return False

        current = self.now() if now is None else now
        if not payload.is_live(current):
            logger.debug("Session token expired at %d (now %d)", payload.exp, current)
            return False
        return True

    def require(self, token: str | None, now: int | None = None) -> None:
        """
        Guard a protected action.

        Raises:
            ReauthorizeRequired: If the token is missing, invalid or expired.
        """
        if not self.validate(token, now):
            raise ReauthorizeRequired()
