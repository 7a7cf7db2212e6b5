"""
Signed admin credential tokens.

A token is ``base64(payload) + "." + hex(hmac_sha256(secret, payload))``.
Nothing is stored server side; a token is valid as long as the secret that
signed it is still the process secret.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac

ADMIN_PAYLOAD = "admin"
SEPARATOR = "."


def _signature(payload: str, secret: bytes) -> str:
    return hmac.new(secret, payload.encode("utf-8"), hashlib.sha256).hexdigest()


def sign_token(payload: str, secret: bytes) -> str:
    encoded = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return f"{encoded}{SEPARATOR}{_signature(payload, secret)}"


def verify_token(token: str, secret: bytes) -> bool:
    """
    Return True only for a well-formed admin token signed with ``secret``.

    Never raises: malformed input of any kind is simply not a valid token.
    """
    if not token or not isinstance(token, str):
        return False
    parts = token.split(SEPARATOR)
    if len(parts) != 2:
        return False
    encoded, signature = parts
    try:
        payload = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return False

    expected = _signature(payload, secret)
    if not hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8")):
        return False
    return payload == ADMIN_PAYLOAD
