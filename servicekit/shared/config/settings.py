# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class KitConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    service_name: str = Field("servicekit", alias="SERVICE_NAME")
    service_version: str = Field("0.1.0", alias="SERVICE_VERSION")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    # JSON lines on stdout; plain colored text when disabled
    log_serialize: bool = Field(True, alias="LOG_SERIALIZE")
    log_file: Path | None = Field(None, alias="LOG_FILE")
    log_request_headers: bool = Field(False, alias="LOG_REQUEST_HEADERS")

    request_id_header: str = Field("X-Request-Id", alias="REQUEST_ID_HEADER")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("log_serialize", "log_request_headers", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> KitConfig:
    return KitConfig()  # type: ignore[call-arg]


__all__ = ["KitConfig", "load_config"]
