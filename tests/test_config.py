from __future__ import annotations

import pytest

from clientlookup.config import DEFAULT_CLIENT_JSON_PATH, _clean, load_settings


def test_default_source() -> None:
    settings = load_settings()
    assert settings.client_json_path == DEFAULT_CLIENT_JSON_PATH
    assert settings.timeout_sec is None


def test_env_overrides_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIENT_JSON_PATH", "https://env.example.com/clients.json")
    assert load_settings().client_json_path == "https://env.example.com/clients.json"


def test_option_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIENT_JSON_PATH", "https://env.example.com/clients.json")
    assert load_settings("local.json").client_json_path == "local.json"


def test_blank_env_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIENT_JSON_PATH", "  ")
    assert load_settings().client_json_path == DEFAULT_CLIENT_JSON_PATH


def test_timeout_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIENT_LOOKUP_TIMEOUT_SEC", "2.5")
    assert load_settings().timeout_sec == 2.5


@pytest.mark.parametrize("value", ["soon", "0", "-3"])
def test_invalid_timeout(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("CLIENT_LOOKUP_TIMEOUT_SEC", value)
    with pytest.raises(RuntimeError, match="CLIENT_LOOKUP_TIMEOUT_SEC"):
        load_settings()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("  data.json  ", "data.json"), ('"quoted"', "quoted"), ("'quoted'", "quoted"), ("", None), (None, None), ('"', '"')],
)
def test_clean(raw, expected) -> None:
    assert _clean(raw) == expected


def test_option_keeps_quotes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIENT_JSON_PATH", "env.json")
    assert load_settings('  "quoted".json ').client_json_path == '"quoted".json'


def test_empty_option_still_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIENT_JSON_PATH", "env.json")
    assert load_settings("").client_json_path == ""
