"""
Pydantic schemas for the ENFOCO backend.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    password: Optional[str] = None


class OkResponse(BaseModel):
    ok: bool = True


class AdminStatusResponse(BaseModel):
    isAdmin: bool


class CommentResponse(BaseModel):
    id: str
    author: str
    text: str
    createdAt: str


class PostResponse(BaseModel):
    id: str
    imageUrl: str
    description: str
    author: str
    createdAt: str
    likes: int
    comments: list[CommentResponse] = Field(default_factory=list)


class CreatePostRequest(BaseModel):
    imageUrl: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None


class LikeResponse(BaseModel):
    likes: int


class CreateCommentRequest(BaseModel):
    author: Optional[str] = None
    text: Optional[str] = None


class WaitlistRequest(BaseModel):
    fullName: Optional[str] = None
    email: Optional[str] = None
    industry: Optional[str] = None
    region: Optional[str] = None
    budget: Optional[str] = None


class SuggestionRequest(BaseModel):
    email: Optional[str] = None
    suggestion: Optional[str] = None


class PartnershipRequest(BaseModel):
    email: Optional[str] = None
    details: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
