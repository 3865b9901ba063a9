# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import KitConfig, load_config

__all__ = ["KitConfig", "load_config"]
