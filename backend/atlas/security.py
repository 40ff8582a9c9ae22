"""Admin authentication: credential check and signed session cookie.

The moderation endpoints only ever ask one question: is there a valid admin
session on this request? admin_authenticated() answers it.
"""
import base64
import hashlib
import hmac
import logging
import secrets
import time
from typing import Any, Optional

from fastapi import Cookie

from atlas.config import settings

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "admin_session"


def verify_credentials(username: str, password: str) -> bool:
    """Constant-time check against the configured admin credentials."""
    if not settings.ADMIN_USERNAME or not settings.ADMIN_PASSWORD:
        logger.error("Admin credentials not configured")
        return False

    username_match = hmac.compare_digest(username.encode("utf-8"), settings.ADMIN_USERNAME.encode("utf-8"))
    password_match = hmac.compare_digest(password.encode("utf-8"), settings.ADMIN_PASSWORD.encode("utf-8"))
    return username_match and password_match


def _sign(payload: str) -> str:
    return hmac.new(
        settings.ADMIN_SESSION_SECRET.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def create_session_token(now: Optional[float] = None) -> str:
    """Issue a token of the form base64url(issued_at:nonce:signature)."""
    issued_at = int(time.time() if now is None else now)
    payload = f"{issued_at}:{secrets.token_hex(8)}"
    raw = f"{payload}:{_sign(payload)}"
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")


def verify_session_token(token: str, now: Optional[float] = None) -> bool:
    """Check signature and age of a session token."""
    try:
        decoded = base64.urlsafe_b64decode(token.encode("ascii")).decode("utf-8")
    except (ValueError, UnicodeError):
        return False

    parts = decoded.split(":")
    if len(parts) != 3:
        return False
    issued_raw, nonce, signature = parts

    if not hmac.compare_digest(signature, _sign(f"{issued_raw}:{nonce}")):
        return False

    try:
        issued_at = int(issued_raw)
    except ValueError:
        return False

    age = (time.time() if now is None else now) - issued_at
    return 0 <= age <= settings.ADMIN_SESSION_TTL_SECONDS


def session_cookie_options() -> dict[str, Any]:
    return {
        "key": SESSION_COOKIE_NAME,
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "strict",
        "max_age": settings.ADMIN_SESSION_TTL_SECONDS,
        "path": "/",
    }


def admin_authenticated(admin_session: Optional[str] = Cookie(default=None)) -> bool:
    """Dependency. True when the request carries a valid admin session cookie."""
    if not admin_session:
        return False
    return verify_session_token(admin_session)
