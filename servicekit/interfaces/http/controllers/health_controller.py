# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from http import HTTPStatus
from typing import TYPE_CHECKING

from flask import Blueprint, Response, jsonify

if TYPE_CHECKING:
    from loguru import Logger

Probe = Callable[[], bool]


def _always_ok() -> bool:
    return True


class HealthController:
    """Liveness and readiness endpoints for orchestrator probes."""

    def __init__(
        self,
        *,
        liveness_probe: Probe | None = None,
        readiness_probe: Probe | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._logger = logger
        self._liveness_probe = liveness_probe or _always_ok
        self._readiness_probe = readiness_probe or _always_ok

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("health", __name__)
        bp.add_url_rule("/live", view_func=self.live, methods=["GET"])
        bp.add_url_rule("/ready", view_func=self.ready, methods=["GET"])
        return bp

    def live(self) -> tuple[Response, int]:
        return self._check(self._liveness_probe)

    def ready(self) -> tuple[Response, int]:
        return self._check(self._readiness_probe)

    def _check(self, probe: Probe) -> tuple[Response, int]:
        try:
            healthy = probe()
        except Exception:
            if self._logger is not None:
                self._logger.exception("Health probe failed")
            healthy = False
        if healthy:
            return jsonify({"status": "ok"}), HTTPStatus.OK
        return jsonify({"status": "unavailable"}), HTTPStatus.SERVICE_UNAVAILABLE
