"""
Shared pytest fixtures.

Connectors are exercised against httpx.MockTransport so requests go through
the real HttpClient without touching the network.
"""

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

VALID_API_KEY = "sk-test-0123456789abcdef"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that replays queued responses and records every request."""

    def __init__(self, responses: List[httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._responses = list(responses)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def api_key() -> str:
    return VALID_API_KEY


@pytest.fixture
def transport_factory() -> Callable[..., RecordingTransport]:
    """Build a RecordingTransport returning the given JSON body, bytes or response."""

    def _make(
        body: Any = None,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
        responses: Optional[List[httpx.Response]] = None,
    ) -> RecordingTransport:
        if responses is None:
            if isinstance(body, bytes):
                response = httpx.Response(status_code, content=body, headers=headers)
            elif body is None:
                response = httpx.Response(status_code, headers=headers)
            else:
                response = httpx.Response(status_code, json=body, headers=headers)
            responses = [response]
        return RecordingTransport(responses)

    return _make


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from a temporary working directory with an ``output`` folder."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "output").mkdir()
    return tmp_path


@pytest.fixture
def image_file(workdir):
    path = workdir / "input.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake-image")
    return "input.png"
