# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from .logger import (
    clear_correlation_id,
    get_correlation_id,
    new_logger,
    set_correlation_id,
    setup_logging,
)
from .sensitive_filter import sanitize_headers, sanitize_query_params

__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "new_logger",
    "sanitize_headers",
    "sanitize_query_params",
    "set_correlation_id",
    "setup_logging",
]
