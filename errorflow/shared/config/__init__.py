# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import TEST_MODE, AppConfig, load_config

__all__ = ["TEST_MODE", "AppConfig", "load_config"]
