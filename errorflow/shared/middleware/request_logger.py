# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import time

from flask import Flask, Response, g, request

from errorflow.shared.logging import logger, reset_request_id, set_request_id


def _get_client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    return request.remote_addr or "unknown"


def _log_request_start(debug_mode: bool) -> None:
    if debug_mode:
        logger.debug(
            f"Request started: {request.method} {request.path} "
            f"from {_get_client_ip()}, query={dict(request.args)}, "
            f"body_size={len(request.data)}"
        )


def _log_request_end(status_code: int, start_time: float, size: int | None) -> None:
    duration_ms = (time.perf_counter() - start_time) * 1000.0
    length = "-" if size is None else str(size)
    logger.info(
        f"{request.method} {request.path} {status_code} {duration_ms:.3f} ms - {length}"
    )


def configure_request_logging(app: Flask, debug_mode: bool = False) -> None:
    @app.before_request
    def _before_request() -> None:
        request_id = request.headers.get("X-Request-ID") or secrets.token_urlsafe(8)
        set_request_id(request_id)

        g.request_start_time = time.perf_counter()

        _log_request_start(debug_mode)

    @app.after_request
    def _after_request(response: Response) -> Response:
        start_time = g.get("request_start_time", time.perf_counter())
        _log_request_end(response.status_code, start_time, response.content_length)

        return response

    @app.teardown_request
    def _teardown_request(_exc: BaseException | None) -> None:
        reset_request_id()


__all__ = ["configure_request_logging"]
