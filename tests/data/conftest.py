import httpx
import pytest

from forecaster.data import base


@pytest.fixture
def offline(monkeypatch):
    """Route every outbound request to a handler that answers 503."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(503)

    monkeypatch.setattr(
        base, "_client", lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )
    return requests
