import pytest
import requests


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


@pytest.fixture
def fake_get(monkeypatch):
    """Route requests.get to canned payloads keyed by URL suffix; records calls."""
    routes = {}
    calls = []

    def get(url, params=None, **kwargs):
        calls.append((url, params))
        for suffix, payload in routes.items():
            if url.endswith(suffix):
                if isinstance(payload, Exception):
                    raise payload
                return FakeResponse(payload)
        return FakeResponse({}, status=404)

    monkeypatch.setattr(requests, "get", get)
    get.routes = routes
    get.calls = calls
    return get
