"""
Feed records persisted in the JSON content document.
"""

from __future__ import annotations

import secrets
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

DEFAULT_AUTHOR = "Anonymous"


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2025-01-02T03:04:05.678Z."""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def _base36(value: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    out = ""
    while True:
        value, rem = divmod(value, 36)
        out = digits[rem] + out
        if not value:
            return out


def generate_id(suffix_bytes: int = 4) -> str:
    """Millisecond clock in base36 plus a random hex suffix. Not collision checked."""
    return _base36(int(time.time() * 1000)) + secrets.token_hex(suffix_bytes)


def _text(value) -> str:
    # Stored nulls read back as empty strings.
    return "" if value is None else str(value)


def normalize_author(author: Optional[str]) -> str:
    author = (author or "").strip()
    return author or DEFAULT_AUTHOR


@dataclass
class Comment:
    id: str
    author: str
    text: str
    createdAt: str
    extra: dict = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {
            **self.extra,
            "id": self.id,
            "author": self.author,
            "text": self.text,
            "createdAt": self.createdAt,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Comment":
        known = {"id", "author", "text", "createdAt"}
        return cls(
            id=_text(data["id"]),
            author=_text(data.get("author")) or DEFAULT_AUTHOR,
            text=_text(data.get("text")),
            createdAt=_text(data.get("createdAt")),
            extra={k: v for k, v in data.items() if k not in known},
        )


@dataclass
class Post:
    id: str
    imageUrl: str
    description: str
    author: str
    createdAt: str
    likes: int = 0
    comments: list[Comment] = field(default_factory=list)
    extra: dict = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {
            **self.extra,
            "id": self.id,
            "imageUrl": self.imageUrl,
            "description": self.description,
            "author": self.author,
            "createdAt": self.createdAt,
            "likes": self.likes,
            "comments": [comment.as_dict() for comment in self.comments],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Post":
        known = {
            "id",
            "imageUrl",
            "description",
            "author",
            "createdAt",
            "likes",
            "comments",
        }
        return cls(
            id=_text(data["id"]),
            imageUrl=_text(data.get("imageUrl")),
            description=_text(data.get("description")),
            author=_text(data.get("author")) or DEFAULT_AUTHOR,
            createdAt=_text(data.get("createdAt")),
            likes=int(data.get("likes") or 0),
            comments=[Comment.from_dict(c) for c in data.get("comments") or []],
            extra={k: v for k, v in data.items() if k not in known},
        )
