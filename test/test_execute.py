"""Tests for SolrQuery.execute with stubbed transports."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import requests

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SolrBuilder.client import SolrHttpClient
from SolrBuilder.config import SolrConfig
from SolrBuilder.core.builder import SolrQuery
from SolrBuilder.core.fields import SolrField

BASE_URL = "http://solr.local/select"


class _StubResponse:
    def __init__(self, payload: Any = None, *, json_error: Exception | None = None) -> None:
        self._payload = payload
        self._json_error = json_error

    def json(self) -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class _StubHttpClient:
    def __init__(self, response: _StubResponse | None = None, *, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str, Any]] = []

    def get(self, url: str) -> _StubResponse:
        self.calls.append(("GET", url, None))
        if self.error is not None:
            raise self.error
        return self.response

    def post(self, url: str, body: Any) -> _StubResponse:
        self.calls.append(("POST", url, body))
        if self.error is not None:
            raise self.error
        return self.response


def _payload(*docs: dict) -> dict:
    return {"response": {"numFound": len(docs), "docs": list(docs)}}


class TestExecute(unittest.TestCase):
    def test_get_request_and_mapping(self) -> None:
        client = _StubHttpClient(_StubResponse(_payload({"topicstitle": ["Tech Talk"], "id": "1"})))

        docs = (
            SolrQuery(BASE_URL, http_client=client)
            .query(f"{SolrField.AUTH_TEMPLATE}:news")
            .add_field_mapping(SolrField.TOPICS_TITLE, "topics")
            .restrict_by_roles()
            .execute()
        )

        self.assertEqual(client.calls, [("GET", BASE_URL + "?q=authtemplate:news&targetingRoles=true", None)])
        self.assertEqual(docs, [{"topicstitle": ["Tech Talk"], "id": "1", "topics": ["Tech Talk"]}])

    def test_post_request(self) -> None:
        client = _StubHttpClient(_StubResponse(_payload({"id": "1"})))

        docs = (
            SolrQuery(BASE_URL, http_client=client)
            .switch_to_post()
            .query("a:1")
            .limit(5)
            .restrict_by_roles()
            .execute()
        )

        self.assertEqual(
            client.calls,
            [("POST", BASE_URL + "?targetingRoles=true", {"query": ["a:1"], "filter": [], "limit": 5})],
        )
        self.assertEqual(docs, [{"id": "1"}])

    def test_transport_failure_returns_empty(self) -> None:
        client = _StubHttpClient(error=requests.ConnectionError("boom"))
        with self.assertLogs("SolrBuilder", level="ERROR"):
            docs = SolrQuery(BASE_URL, http_client=client).query("a:1").execute()
        self.assertEqual(docs, [])

    def test_non_json_response_returns_empty(self) -> None:
        client = _StubHttpClient(_StubResponse(json_error=ValueError("Expecting value")))
        self.assertEqual(SolrQuery(BASE_URL, http_client=client).query("a:1").execute(), [])

    def test_shape_mismatch_returns_empty(self) -> None:
        client = _StubHttpClient(_StubResponse({"error": {"msg": "undefined field"}}))
        self.assertEqual(SolrQuery(BASE_URL, http_client=client).query("a:1").execute(), [])

    def test_http_error_status_returns_empty(self) -> None:
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        client = _StubHttpClient(response)
        self.assertEqual(SolrQuery(BASE_URL, http_client=client).query("a:1").execute(), [])
        response.json.assert_not_called()

    def test_default_client_is_created_and_closed(self) -> None:
        config = SolrConfig(timeout=5.0)
        response = MagicMock()
        response.json.return_value = _payload({"id": "1"})

        with patch("SolrBuilder.core.builder.SolrHttpClient") as client_cls:
            client_cls.return_value.get.return_value = response
            docs = SolrQuery(BASE_URL, config=config).query("a:1").execute()

        client_cls.assert_called_once_with(config)
        client_cls.return_value.get.assert_called_once_with(BASE_URL + "?q=a:1")
        client_cls.return_value.close.assert_called_once_with()
        self.assertEqual(docs, [{"id": "1"}])

    def test_injected_client_is_not_closed(self) -> None:
        client = MagicMock()
        client.get.return_value.json.return_value = _payload()
        SolrQuery(BASE_URL, http_client=client).execute()
        client.close.assert_not_called()


class TestSolrHttpClient(unittest.TestCase):
    def test_get_uses_session_with_timeout_and_headers(self) -> None:
        config = SolrConfig(timeout=12.0, user_agent="tests/1.0")
        with patch("SolrBuilder.client.requests.Session") as session_cls:
            session = session_cls.return_value
            with SolrHttpClient(config) as client:
                client.get(BASE_URL + "?q=a:1")

        session.get.assert_called_once_with(
            BASE_URL + "?q=a:1",
            headers={"User-Agent": "tests/1.0", "Accept": "application/json"},
            timeout=12.0,
        )
        session.close.assert_called_once_with()

    def test_post_sends_json_body(self) -> None:
        with patch("SolrBuilder.client.requests.Session") as session_cls:
            client = SolrHttpClient()
            client.post(BASE_URL, {"query": ["a:1"], "filter": []})

        _, kwargs = session_cls.return_value.post.call_args
        self.assertEqual(kwargs["json"], {"query": ["a:1"], "filter": []})
        self.assertEqual(kwargs["timeout"], 30.0)


if __name__ == "__main__":
    unittest.main()
