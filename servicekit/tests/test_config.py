from __future__ import annotations

import pytest

from servicekit.shared.config import KitConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_SERIALIZE", "LOG_REQUEST_HEADERS", "REQUEST_ID_HEADER"):
        monkeypatch.delenv(name, raising=False)
    config = KitConfig(_env_file=None)  # type: ignore[call-arg]

    assert config.log_level == "INFO"
    assert config.log_serialize is True
    assert config.log_request_headers is False
    assert config.request_id_header == "X-Request-Id"
    assert not config.is_production()


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_SERIALIZE", "no")
    monkeypatch.setenv("LOG_REQUEST_HEADERS", "yes")
    monkeypatch.setenv("SERVICE_NAME", "claims-api")

    config = KitConfig(_env_file=None)  # type: ignore[call-arg]

    assert config.is_production()
    assert config.log_level == "DEBUG"
    assert config.log_serialize is False
    assert config.log_request_headers is True
    assert config.service_name == "claims-api"
