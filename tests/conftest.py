from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
import requests

from clientlookup.config import Settings
from clientlookup.models import Client


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLIENT_JSON_PATH", raising=False)
    monkeypatch.delenv("CLIENT_LOOKUP_TIMEOUT_SEC", raising=False)
    # Keep a developer's .env file out of the tests
    monkeypatch.setattr("clientlookup.config.load_dotenv", lambda **_kwargs: False)


@pytest.fixture
def client_rows() -> list[dict[str, Any]]:
    return [
        {"id": 1, "full_name": "Client One", "email": "one@x.com"},
        {"id": 2, "full_name": "Client Two", "email": "two@x.com"},
    ]


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[Any], Path]:
    def _write(payload: Any, name: str = "clients.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_client() -> Callable[..., Client]:
    def _make(id: Any = 1, full_name: str = "John Doe", email: str = "john@example.com") -> Client:
        return Client(id=id, full_name=full_name, email=email)

    return _make


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    def _make(status: int = 200, body: str = "", reason: str = "OK", url: str = "https://api.example.com/clients.json") -> requests.Response:
        response = requests.Response()
        response.status_code = status
        response.reason = reason
        response.url = url
        response._content = body.encode("utf-8")
        response.encoding = "utf-8"
        response.headers["Content-Type"] = "application/json"
        return response

    return _make


@pytest.fixture
def remote_settings() -> Settings:
    return Settings(client_json_path="https://api.example.com/clients.json")
