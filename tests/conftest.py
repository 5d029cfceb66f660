"""Pytest fixtures shared across publisher tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from src.nerdgraph import config as config_module
from src.nerdgraph.client import NerdGraphClient
from src.nerdgraph.config import NerdGraphSettings
from src.publisher import publisher as publisher_module

ACCOUNT_ID = 12345
API_KEY = "NRAK-TESTKEY"
DASHBOARD_NAME = "NRDOT v2 - Process Optimization Dashboard"

ENV_VARS = (
    "NEW_RELIC_API_KEY",
    "NEW_RELIC_ACCOUNT_ID",
    "NEW_RELIC_REGION",
    "NEW_RELIC_DASHBOARD_PERMISSIONS",
)


def success_payload(guid: str = "abc123", account_id: int = ACCOUNT_ID) -> dict[str, Any]:
    return {
        "data": {
            "dashboardCreate": {
                "entityResult": {
                    "guid": guid,
                    "name": DASHBOARD_NAME,
                    "accountId": account_id,
                    "permissions": "PUBLIC_READ_WRITE",
                    "createdAt": "2026-10-19T12:00:00Z",
                    "updatedAt": "2026-10-19T12:00:00Z",
                    "dashboardParentGuid": None,
                },
                "errors": [],
            }
        }
    }


class RecordingNerdGraph:
    """Mock NerdGraph endpoint that records every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=success_payload())
        )

    def reply_json(self, payload: Any, status_code: int = 200) -> None:
        self.respond = lambda request: httpx.Response(status_code, json=payload)

    def reply_text(self, text: str, status_code: int = 200) -> None:
        self.respond = lambda request: httpx.Response(status_code, text=text)

    def raise_error(self, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self.respond = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Strip New Relic variables and disable .env loading."""

    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch


@pytest.fixture
def configured_env(clean_env: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    clean_env.setenv("NEW_RELIC_API_KEY", API_KEY)
    clean_env.setenv("NEW_RELIC_ACCOUNT_ID", str(ACCOUNT_ID))
    return clean_env


@pytest.fixture
def settings() -> NerdGraphSettings:
    return NerdGraphSettings(api_key=API_KEY, account_id=ACCOUNT_ID)


@pytest.fixture
def nerdgraph() -> RecordingNerdGraph:
    return RecordingNerdGraph()


@pytest.fixture
def client(settings: NerdGraphSettings, nerdgraph: RecordingNerdGraph):
    with NerdGraphClient(settings, transport=nerdgraph.transport) as c:
        yield c


@pytest.fixture
def output_path(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Redirect the default summary file into a temporary directory."""

    path = tmp_path / "dashboards" / "created-dashboard.json"
    monkeypatch.setattr(publisher_module, "DEFAULT_OUTPUT_PATH", path)
    return path


@pytest.fixture
def patched_client(monkeypatch: pytest.MonkeyPatch, nerdgraph: RecordingNerdGraph) -> RecordingNerdGraph:
    """Route clients opened by ``publish()`` to the mock endpoint."""

    monkeypatch.setattr(
        publisher_module,
        "NerdGraphClient",
        lambda settings: NerdGraphClient(settings, transport=nerdgraph.transport),
    )
    return nerdgraph
