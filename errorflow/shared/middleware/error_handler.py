# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from errorflow.shared.config import AppConfig
from errorflow.shared.errors import ErrorResponder, register_error_handler


def configure_error_handling(app: Flask, config: AppConfig) -> ErrorResponder:
    responder = ErrorResponder(mode=config.app_env)
    register_error_handler(app, responder)
    return responder
