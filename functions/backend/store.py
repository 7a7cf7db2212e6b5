"""
JSON-file-backed content store for the photo feed.

Every operation reads the whole document; every mutation writes the whole
document back. Mutations are serialised behind a process-local lock so two
concurrent likes cannot overwrite each other.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from datetime import datetime, timezone
from typing import Callable, Optional, Protocol

from backend.errors import InvalidInput, NotFound, StorageError
from backend.records import (
    Comment,
    Post,
    generate_id,
    normalize_author,
    utc_timestamp,
)

logger = logging.getLogger(__name__)


class PostStore(Protocol):
    """Operations the routes need from the feed store."""

    def load_all(self) -> list[Post]:
        ...

    def get_post(self, post_id: str) -> Post:
        ...

    def create_post(
        self, image_url: str, description: str, author: Optional[str] = None
    ) -> Post:
        ...

    def like_post(self, post_id: str) -> int:
        ...

    def add_comment(
        self, post_id: str, text: str, author: Optional[str] = None
    ) -> Comment:
        ...


def newest_first(posts: list[Post]) -> list[Post]:
    # Reversed first so posts with equal timestamps come out last-appended first.
    return sorted(reversed(posts), key=lambda post: post.createdAt, reverse=True)


def _is_blank(value: Optional[str]) -> bool:
    return not value or not str(value).strip()


class JsonPostStore:
    def __init__(
        self,
        path: str,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.path = path
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._lock = threading.Lock()
        self._ensure_document()

    def _ensure_document(self) -> None:
        if os.path.exists(self.path):
            return
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        self._write([])
        logger.info("Initialised empty post document at %s", self.path)

    def _read(self) -> list[Post]:
        with open(self.path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, list):
            raise ValueError(f"{self.path} does not contain a JSON array")
        return [Post.from_dict(item) for item in raw]

    def _load_for_update(self) -> list[Post]:
        try:
            return self._read()
        except FileNotFoundError:
            return []
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.exception("Failed to read post document %s", self.path)
            raise StorageError("Failed to read posts", details=str(exc)) from exc

    def _write(self, posts: list[Post]) -> None:
        payload = json.dumps(
            [post.as_dict() for post in posts], indent=2, ensure_ascii=False
        )
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(
            prefix=".posts-", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def _save(self, posts: list[Post]) -> None:
        try:
            self._write(posts)
        except OSError as exc:
            logger.exception("Failed to write post document %s", self.path)
            raise StorageError("Failed to save posts", details=str(exc)) from exc

    def load_all(self) -> list[Post]:
        """Return every post, newest first. Read failures yield an empty feed."""
        try:
            posts = self._read()
        except (OSError, ValueError, KeyError, TypeError):
            logger.exception("Failed to load posts from %s", self.path)
            return []
        return newest_first(posts)

    def get_post(self, post_id: str) -> Post:
        for post in self.load_all():
            if post.id == post_id:
                return post
        raise NotFound("Post not found")

    def create_post(
        self, image_url: str, description: str, author: Optional[str] = None
    ) -> Post:
        if _is_blank(image_url) or _is_blank(description):
            raise InvalidInput("imageUrl and description are required")
        post = Post(
            id=generate_id(4),
            imageUrl=image_url,
            description=description,
            author=normalize_author(author),
            createdAt=utc_timestamp(self._clock()),
        )
        with self._lock:
            posts = self._load_for_update()
            posts.append(post)
            self._save(posts)
        logger.info("Created post %s", post.id)
        return post

    def like_post(self, post_id: str) -> int:
        with self._lock:
            posts = self._load_for_update()
            post = _find(posts, post_id)
            post.likes += 1
            self._save(posts)
            return post.likes

    def add_comment(
        self, post_id: str, text: str, author: Optional[str] = None
    ) -> Comment:
        if _is_blank(text):
            raise InvalidInput("Comment text is required")
        comment = Comment(
            id=generate_id(3),
            author=normalize_author(author),
            text=text,
            createdAt=utc_timestamp(self._clock()),
        )
        with self._lock:
            posts = self._load_for_update()
            post = _find(posts, post_id)
            post.comments.append(comment)
            self._save(posts)
        return comment


def _find(posts: list[Post], post_id: str) -> Post:
    for post in posts:
        if post.id == post_id:
            return post
    raise NotFound("Post not found")
