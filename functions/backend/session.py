"""
Admin session gate: cookie parsing, login and logout.
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, unquote

from starlette.responses import Response

from backend.errors import Unauthorized
from backend.tokens import ADMIN_PAYLOAD, sign_token, verify_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionConfig:
    """Immutable session parameters built once at startup."""

    secret: bytes
    admin_password: Optional[str] = None
    cookie_name: str = "admin_session"
    cookie_secure: bool = False


def parse_cookie_header(header: Optional[str]) -> dict[str, str]:
    cookies: dict[str, str] = {}
    if not header:
        return cookies
    for segment in header.split(";"):
        segment = segment.strip()
        if "=" not in segment:
            continue
        name, value = segment.split("=", 1)
        cookies[name.strip()] = unquote(value.strip())
    return cookies


def authenticate(cookie_header: Optional[str], config: SessionConfig) -> bool:
    token = parse_cookie_header(cookie_header).get(config.cookie_name)
    if not token:
        return False
    return verify_token(token, config.secret)


def login(supplied_password: Optional[str], config: SessionConfig) -> str:
    """
    Check the shared admin password and return a freshly signed token.

    Raises:
        Unauthorized: if the password does not match, or none is configured.
    """
    configured = config.admin_password
    if not configured or not supplied_password:
        logger.warning("Rejected admin login attempt")
        raise Unauthorized("Invalid password")
    if not hmac.compare_digest(
        supplied_password.encode("utf-8"), configured.encode("utf-8")
    ):
        logger.warning("Rejected admin login attempt")
        raise Unauthorized("Invalid password")
    logger.info("Admin logged in")
    return sign_token(ADMIN_PAYLOAD, config.secret)


def set_session_cookie(response: Response, token: str, config: SessionConfig) -> None:
    # No max_age: the cookie lives for the browser session. The value is
    # percent-encoded so base64 padding survives cookie quoting rules.
    response.set_cookie(
        key=config.cookie_name,
        value=quote(token, safe=""),
        httponly=True,
        samesite="lax",
        path="/",
        secure=config.cookie_secure,
    )


def clear_session_cookie(response: Response, config: SessionConfig) -> None:
    """Expire the admin cookie on the client. Idempotent."""
    response.set_cookie(
        key=config.cookie_name,
        value="",
        max_age=0,
        httponly=True,
        samesite="lax",
        path="/",
        secure=config.cookie_secure,
    )
