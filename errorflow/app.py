# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from errorflow.interfaces.http.controllers.errors_controller import ErrorsController
from errorflow.shared.config import AppConfig, load_config
from errorflow.shared.logging import logger, setup_logging
from errorflow.shared.middleware.error_handler import configure_error_handling
from errorflow.shared.middleware.lifecycle import configure_lifecycle
from errorflow.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, config.log_file)

    app = Flask(__name__)
    app.config.update(APP_ENV=config.app_env, TESTING=config.is_test())

    configure_lifecycle(app)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_error_handling(app, config)

    app.register_blueprint(ErrorsController(title=config.success_title).as_blueprint())

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=3000, debug=True)
