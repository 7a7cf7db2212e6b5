import json
import unittest
from unittest.mock import MagicMock, patch

import requests

from backend.airtable import REQUEST_TIMEOUT, AirtableClient
from backend.errors import UpstreamError


def _response(status_code=200, payload=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = b"" if payload is None else json.dumps(payload).encode()
    response.headers["Content-Type"] = "application/json"
    return response


class AirtableClientTests(unittest.TestCase):
    def setUp(self):
        self.client = AirtableClient(token="tok", base_id="app123")

    @patch("backend.airtable.requests.post")
    def test_create_record_posts_fields(self, mock_post):
        mock_post.return_value = _response(200, {"records": [{"id": "rec1"}]})
        result = self.client.create_record("ENFOCO Waitlist", {"Email": "a@b.c"})

        self.assertEqual(result, {"records": [{"id": "rec1"}]})
        args, kwargs = mock_post.call_args
        self.assertEqual(
            args[0], "https://api.airtable.com/v0/app123/ENFOCO%20Waitlist"
        )
        self.assertEqual(kwargs["json"], {"records": [{"fields": {"Email": "a@b.c"}}]})
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer tok")
        self.assertEqual(kwargs["timeout"], REQUEST_TIMEOUT)

    @patch("backend.airtable.requests.post")
    def test_http_error_passes_upstream_detail(self, mock_post):
        error = {"type": "INVALID_PERMISSIONS", "message": "nope"}
        mock_post.return_value = _response(403, {"error": error})
        with self.assertLogs("backend.airtable", level="ERROR"):
            with self.assertRaises(UpstreamError) as ctx:
                self.client.create_record("T", {})
        self.assertEqual(ctx.exception.details, error)
        self.assertEqual(ctx.exception.status_code, 500)

    @patch("backend.airtable.requests.post")
    def test_network_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("connection refused")
        with self.assertLogs("backend.airtable", level="ERROR"):
            with self.assertRaises(UpstreamError) as ctx:
                self.client.create_record("T", {})
        self.assertEqual(ctx.exception.details, "connection refused")

    def test_missing_credentials(self):
        client = AirtableClient(token=None, base_id="app123")
        with patch("backend.airtable.requests.post", MagicMock()) as mock_post:
            with self.assertLogs("backend.airtable", level="ERROR"):
                with self.assertRaises(UpstreamError):
                    client.create_record("T", {})
            mock_post.assert_not_called()


if __name__ == "__main__":
    unittest.main()
