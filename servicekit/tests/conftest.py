from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from flask import Flask
from loguru import logger as loguru_logger

from servicekit.app import create_app
from servicekit.shared.config import KitConfig


class LogCapture:
    def __init__(self) -> None:
        self.messages: list[Any] = []

    def __call__(self, message: Any) -> None:
        self.messages.append(message)

    @property
    def records(self) -> list[dict[str, Any]]:
        return [message.record for message in self.messages]

    def request_records(self) -> list[dict[str, Any]]:
        return [record for record in self.records if "response" in record["extra"]]


@pytest.fixture()
def log_capture() -> Iterator[LogCapture]:
    capture = LogCapture()
    handler_id = loguru_logger.add(capture, level="DEBUG", format="{message}")
    yield capture
    loguru_logger.remove(handler_id)


@pytest.fixture()
def config() -> KitConfig:
    return KitConfig(service_name="servicekit-test", log_request_headers=True)


@pytest.fixture()
def flask_app(config: KitConfig, log_capture: LogCapture) -> Flask:
    app = create_app(config, loguru_logger.bind(service=config.service_name))
    app.config.update(TESTING=True)
    return app
