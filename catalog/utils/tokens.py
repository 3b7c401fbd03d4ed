# catalog/utils/tokens.py
import base64
import hashlib
import hmac
import json
import time
from enum import Enum
from typing import Callable, Optional


class TokenStatus(str, Enum):
    VALID = "VALID"
    EXPIRED = "EXPIRED"
    MISSING = "MISSING"
    INVALID = "INVALID"


REASONS = {
    TokenStatus.EXPIRED: "Session Expired",
    TokenStatus.MISSING: "The session has not been logged in or the token has not been entered.",
    TokenStatus.INVALID: "Invalid token",
}


def now_ms() -> int:
    return int(time.time() * 1000)


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def _b64decode(text: str) -> bytes:
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


class TokenIssuer:
    """Issues and checks HMAC-SHA256 signed bearer tokens.

    A token is ``<payload>.<signature>``, both base64url encoded. The payload
    carries ``sub``, the presented ``password`` and ``exp`` as epoch
    milliseconds.
    """

    subject = "Token"

    def __init__(self, secret: str, ttl_ms: int, clock: Callable[[], int] = now_ms):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._key = secret.encode()
        self.ttl_ms = ttl_ms
        self.clock = clock

    def _sign(self, message: str) -> str:
        return _b64encode(hmac.new(self._key, message.encode(), hashlib.sha256).digest())

    def issue(self, secret: str) -> str:
        payload = {
            "sub": self.subject,
            "password": secret,
            "exp": self.clock() + self.ttl_ms,
        }
        message = _b64encode(json.dumps(payload, separators=(",", ":")).encode())
        return f"{message}.{self._sign(message)}"

    def decode(self, token: str) -> Optional[dict]:
        """Payload of a correctly signed token, ``None`` otherwise."""
        try:
            message, signature = token.split(".", 1)
        except ValueError:
            return None

        if not hmac.compare_digest(signature.encode(), self._sign(message).encode()):
            return None

        try:
            payload = json.loads(_b64decode(message))
        except (ValueError, UnicodeDecodeError):
            return None
        if not isinstance(payload, dict) or not isinstance(payload.get("exp"), int):
            return None
        return payload

    def validate(self, header: Optional[str]) -> TokenStatus:
        """Check an ``Authorization`` header value such as ``Bearer <token>``."""
        if header is None:
            return TokenStatus.MISSING

        parts = header.split(" ", 1)
        if len(parts) != 2 or not parts[1].strip():
            return TokenStatus.INVALID

        payload = self.decode(parts[1].strip())
        if payload is None:
            return TokenStatus.INVALID

        if self.clock() > payload["exp"]:
            return TokenStatus.EXPIRED
        return TokenStatus.VALID
