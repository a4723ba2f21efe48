import json

import pytest

from graphrest.config.loader import camel_to_snake, load_settings
from graphrest.config.schema import Settings


def test_settings_defaults() -> None:
    cfg = Settings()
    assert cfg.rest_server == "api.facebook.com"
    assert cfg.read_only_rest_server == "api-read.facebook.com"
    assert cfg.use_ssl is True
    assert cfg.timeout_seconds == 20.0


def test_settings_read_env(monkeypatch) -> None:
    monkeypatch.setenv("GRAPHREST_ACCESS_TOKEN", "env-token")
    assert Settings().access_token == "env-token"


def test_load_settings_missing_file_uses_defaults(tmp_path) -> None:
    cfg = load_settings(tmp_path / "missing.json")
    assert cfg.rest_server == "api.facebook.com"


def test_load_settings_accepts_camel_case(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"accessToken": "abc", "timeoutSeconds": 5, "restServer": "api.example.com"}))
    cfg = load_settings(path)
    assert cfg.access_token == "abc"
    assert cfg.timeout_seconds == 5.0
    assert cfg.rest_server == "api.example.com"


def test_load_settings_rejects_bad_file(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="Failed to load config"):
        load_settings(path)


def test_load_settings_rejects_invalid_values(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"timeoutSeconds": -1}))
    with pytest.raises(ValueError):
        load_settings(path)


def test_camel_to_snake() -> None:
    assert camel_to_snake("readOnlyRestServer") == "read_only_rest_server"
    assert camel_to_snake("use_ssl") == "use_ssl"
