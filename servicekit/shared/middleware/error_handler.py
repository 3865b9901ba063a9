# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from servicekit.shared.errors import ErrorRegistry, register_error_handler


def configure_error_handling(app: Flask, *, registry: ErrorRegistry | None = None) -> None:
    register_error_handler(app, registry=registry)
