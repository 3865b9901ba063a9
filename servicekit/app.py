# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Flask

from servicekit.interfaces.http.controllers.health_controller import HealthController, Probe
from servicekit.shared.config import KitConfig, load_config
from servicekit.shared.errors import ErrorRegistry
from servicekit.shared.logging import new_logger, setup_logging
from servicekit.shared.middleware.error_handler import configure_error_handling
from servicekit.shared.middleware.request_logger import configure_request_logging

if TYPE_CHECKING:
    from loguru import Logger


def create_app(
    config: KitConfig | None = None,
    logger: Logger | None = None,
    *,
    registry: ErrorRegistry | None = None,
    liveness_probe: Probe | None = None,
    readiness_probe: Probe | None = None,
) -> Flask:
    """Build a Flask app with error handling, request logging and probes wired.

    Sinks are only (re)configured when no ``logger`` is passed in.
    """
    config = config or load_config()
    if logger is None:
        setup_logging(
            config.log_level,
            serialize=config.log_serialize,
            log_file=config.log_file,
        )
        logger = new_logger(
            service=config.service_name,
            version=config.service_version,
            env=config.app_env,
        )

    app = Flask(__name__)
    configure_error_handling(app, registry=registry)
    configure_request_logging(
        app,
        logger=logger,
        log_headers=config.log_request_headers,
        request_id_header=config.request_id_header,
    )
    app.register_blueprint(
        HealthController(
            liveness_probe=liveness_probe,
            readiness_probe=readiness_probe,
            logger=logger,
        ).as_blueprint()
    )

    logger.info("Flask app initialized")
    return app
