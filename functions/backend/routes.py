"""
HTTP routes for the ENFOCO backend API.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response

from backend.airtable import RecordClient
from backend.config import Settings, get_settings
from backend.dependencies import (
    get_post_store,
    get_record_client,
    get_session_config,
    is_admin,
    require_post_author,
)
from backend.errors import InvalidInput, UpstreamError
from backend.schemas import (
    AdminStatusResponse,
    CommentResponse,
    CreateCommentRequest,
    CreatePostRequest,
    HealthResponse,
    LikeResponse,
    LoginRequest,
    MessageResponse,
    OkResponse,
    PartnershipRequest,
    PostResponse,
    SuggestionRequest,
    WaitlistRequest,
)
from backend.session import (
    SessionConfig,
    clear_session_cookie,
    login,
    set_session_cookie,
)
from backend.store import PostStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _missing(*values: str | None) -> bool:
    return any(not value or not value.strip() for value in values)


def _submit(client: RecordClient, table: str, fields: dict, failure: str) -> None:
    try:
        client.create_record(table, fields)
    except UpstreamError as exc:
        raise UpstreamError(failure, details=exc.details) from exc


# Admin session


@router.post("/admin/login", response_model=OkResponse)
def admin_login(
    response: Response,
    payload: Optional[LoginRequest] = None,
    config: SessionConfig = Depends(get_session_config),
):
    token = login(payload.password if payload else None, config)
    set_session_cookie(response, token, config)
    return OkResponse()


@router.post("/admin/logout", response_model=OkResponse)
def admin_logout(
    response: Response, config: SessionConfig = Depends(get_session_config)
):
    clear_session_cookie(response, config)
    return OkResponse()


@router.get("/admin/me", response_model=AdminStatusResponse)
def admin_me(admin: bool = Depends(is_admin)):
    return AdminStatusResponse(isAdmin=admin)


# Feed


@router.get("/posts", response_model=list[PostResponse])
def list_posts(store: PostStore = Depends(get_post_store)):
    return [post.as_dict() for post in store.load_all()]


@router.get("/posts/{post_id}", response_model=PostResponse)
def get_post(post_id: str, store: PostStore = Depends(get_post_store)):
    return store.get_post(post_id).as_dict()


@router.post(
    "/posts",
    response_model=PostResponse,
    status_code=201,
    dependencies=[Depends(require_post_author)],
)
def create_post(
    payload: CreatePostRequest, store: PostStore = Depends(get_post_store)
):
    if _missing(payload.imageUrl, payload.description):
        raise InvalidInput("imageUrl and description are required")
    post = store.create_post(payload.imageUrl, payload.description, payload.author)
    return post.as_dict()


@router.post("/posts/{post_id}/like", response_model=LikeResponse)
def like_post(post_id: str, store: PostStore = Depends(get_post_store)):
    return LikeResponse(likes=store.like_post(post_id))


@router.post(
    "/posts/{post_id}/comments", response_model=CommentResponse, status_code=201
)
def add_comment(
    post_id: str,
    payload: CreateCommentRequest,
    store: PostStore = Depends(get_post_store),
):
    comment = store.add_comment(post_id, payload.text, payload.author)
    return comment.as_dict()


# Forms forwarded to the record API


@router.post("/waitlist", response_model=MessageResponse)
def join_waitlist(
    payload: WaitlistRequest,
    client: RecordClient = Depends(get_record_client),
    settings: Settings = Depends(get_settings),
):
    if _missing(
        payload.fullName,
        payload.email,
        payload.industry,
        payload.region,
        payload.budget,
    ):
        raise InvalidInput(
            "Please fill in all required fields to join the waitlist"
        )
    fields = {
        "Full Name": payload.fullName,
        "Email Address": payload.email,
        "Industry/Role": payload.industry,
        "Primary Region of Interest": payload.region,
        "Monthly Budget Range": payload.budget,
        "Status": "New",
    }
    _submit(
        client, settings.airtable_waitlist_table, fields, "Failed to join waitlist"
    )
    return MessageResponse(message="Successfully joined waitlist!")


@router.post("/suggestions", response_model=MessageResponse)
def submit_suggestion(
    payload: SuggestionRequest,
    client: RecordClient = Depends(get_record_client),
    settings: Settings = Depends(get_settings),
):
    if _missing(payload.email, payload.suggestion):
        raise InvalidInput("Please fill in all required fields")
    fields = {
        "Email": payload.email,
        "Detailed Suggestion": payload.suggestion,
        "Suggestion Type": "Feature Request",
        "Priority Level": "Medium",
        "Status": "New",
    }
    _submit(
        client,
        settings.airtable_suggestions_table,
        fields,
        "Failed to send suggestion",
    )
    return MessageResponse(message="Suggestion received!")


@router.post("/partnerships", response_model=MessageResponse)
def request_partnership(
    payload: PartnershipRequest,
    client: RecordClient = Depends(get_record_client),
    settings: Settings = Depends(get_settings),
):
    if _missing(payload.email, payload.details):
        raise InvalidInput("Please fill in all required fields")
    fields = {
        "Email": payload.email,
        "Additional Details": payload.details,
        "Contact Status": "New",
    }
    _submit(
        client,
        settings.airtable_partnerships_table,
        fields,
        "Failed to send partnership request",
    )
    return MessageResponse(message="Partnership request received!")


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="Backend is running!")
