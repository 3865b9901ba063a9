from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest
from loguru import logger as loguru_logger

from servicekit.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    new_logger,
    set_correlation_id,
    setup_logging,
)


@pytest.fixture()
def stream() -> Iterator[io.StringIO]:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    buffer = io.StringIO()
    yield buffer
    loguru_logger.remove()
    clear_correlation_id()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _lines(buffer: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in buffer.getvalue().splitlines() if line]


def test_json_records_carry_bound_fields(stream: io.StringIO) -> None:
    setup_logging("info", serialize=True, sink=stream)
    log = new_logger(service="claims-api", version="1.2.0")

    set_correlation_id("corr-1")
    log.debug("hidden")
    log.bind(request={"method": "GET"}).info("request completed")

    (line,) = _lines(stream)
    record = line["record"]
    assert record["message"] == "request completed"
    assert record["level"]["name"] == "INFO"
    assert record["extra"]["service"] == "claims-api"
    assert record["extra"]["correlation_id"] == "corr-1"
    assert record["extra"]["request"] == {"method": "GET"}


def test_correlation_id_defaults_to_dash(stream: io.StringIO) -> None:
    set_correlation_id(None)
    assert get_correlation_id() == "-"
    set_correlation_id("abc")
    clear_correlation_id()
    assert get_correlation_id() == "-"


def test_stdlib_logging_is_intercepted(stream: io.StringIO) -> None:
    setup_logging("INFO", serialize=True, sink=stream)

    logging.getLogger("werkzeug").info("127.0.0.1 - GET /live 200")

    (line,) = _lines(stream)
    assert line["record"]["message"] == "127.0.0.1 - GET /live 200"
    assert line["record"]["extra"]["correlation_id"] == "-"
