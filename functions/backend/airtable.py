"""
Outbound record API client (Airtable) and an in-memory test double.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol
from urllib.parse import quote

import requests

from backend.errors import UpstreamError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30  # seconds


class RecordClient(Protocol):
    """Creates a single record in a named table."""

    def create_record(self, table: str, fields: dict) -> dict:
        ...


@dataclass
class InMemoryRecordClient:
    """Test double for the record API."""

    records: list[tuple[str, dict]] = field(default_factory=list)
    fail_with: Optional[str] = None

    def create_record(self, table: str, fields: dict) -> dict:
        if self.fail_with:
            raise UpstreamError("Record API request failed", details=self.fail_with)
        self.records.append((table, dict(fields)))
        return {"records": [{"id": f"rec{len(self.records)}", "fields": fields}]}


def _upstream_detail(exc: requests.RequestException):
    response = getattr(exc, "response", None)
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error") is not None:
            return body["error"]
    return str(exc)


@dataclass
class AirtableClient:
    """
    Airtable REST client.

    Posts ``{"records": [{"fields": ...}]}`` to ``{api_url}/{base_id}/{table}``.
    """

    token: Optional[str]
    base_id: Optional[str]
    api_url: str = "https://api.airtable.com/v0"
    timeout: float = REQUEST_TIMEOUT

    def create_record(self, table: str, fields: dict) -> dict:
        if not self.token or not self.base_id:
            logger.error("Airtable credentials are not configured")
            raise UpstreamError("Record API is not configured")

        url = f"{self.api_url.rstrip('/')}/{self.base_id}/{quote(table, safe='')}"
        try:
            response = requests.post(
                url,
                json={"records": [{"fields": fields}]},
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            detail = _upstream_detail(exc)
            logger.error("Airtable error for table %s: %s", table, detail)
            raise UpstreamError("Record API request failed", details=detail) from exc
        return response.json()
