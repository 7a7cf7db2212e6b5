"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import secrets
import threading

from fastapi import Depends, Request

from backend.airtable import AirtableClient, RecordClient
from backend.config import Settings, get_settings
from backend.errors import Forbidden
from backend.session import SessionConfig, authenticate
from backend.store import JsonPostStore, PostStore

_post_store: PostStore | None = None
_record_client: RecordClient | None = None
_session_config: SessionConfig | None = None
# First requests can arrive together on threadpool workers.
_init_lock = threading.Lock()


def get_session_config() -> SessionConfig:
    """
    Return the process-wide session config. The secret is generated once
    when SESSION_SECRET is unset.
    """
    global _session_config
    if _session_config:
        return _session_config

    with _init_lock:
        if _session_config is None:
            settings = get_settings()
            secret = settings.session_secret or secrets.token_hex(32)
            _session_config = SessionConfig(
                secret=secret.encode("utf-8"),
                admin_password=settings.admin_password,
                cookie_name=settings.admin_cookie_name,
                cookie_secure=settings.cookie_secure,
            )
    return _session_config


def get_post_store() -> PostStore:
    global _post_store
    if _post_store:
        return _post_store

    with _init_lock:
        if _post_store is None:
            settings = get_settings()
            _post_store = JsonPostStore(settings.posts_file)
    return _post_store


def get_record_client() -> RecordClient:
    global _record_client
    if _record_client:
        return _record_client

    with _init_lock:
        if _record_client is None:
            settings = get_settings()
            _record_client = AirtableClient(
                token=settings.airtable_token,
                base_id=settings.airtable_base_id,
                api_url=settings.airtable_api_url,
            )
    return _record_client


def is_admin(
    request: Request, config: SessionConfig = Depends(get_session_config)
) -> bool:
    return authenticate(request.headers.get("cookie"), config)


def require_post_author(
    admin: bool = Depends(is_admin), settings: Settings = Depends(get_settings)
) -> None:
    """Gate post creation according to REQUIRE_ADMIN_FOR_POSTS."""
    if settings.require_admin_for_posts and not admin:
        raise Forbidden("Admin access required")
