# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from flask import Flask, Response, current_app, jsonify, request
from werkzeug.exceptions import HTTPException, NotFound

from errorflow.shared.config import TEST_MODE
from errorflow.shared.logging import logger
from errorflow.shared.middleware.lifecycle import RouteState, current_lifecycle

from .base import AppError, DoubleResponseError, NotFoundError

EXTENSION_KEY = "errorflow.responder"


def serialize_error(error: BaseException) -> dict[str, Any]:
    if isinstance(error, AppError):
        return error.to_dict()
    # Runtime exceptions expose no serializable fields of their own.
    return {
        "error": {
            "message": str(error),
            "name": type(error).__name__,
            "error": {},
        }
    }


def resolve_status(error: BaseException) -> int:
    if isinstance(error, AppError):
        return error.resolved_status()
    return int(HTTPStatus.INTERNAL_SERVER_ERROR)


def http_exception_to_error(exc: HTTPException) -> AppError:
    if isinstance(exc, NotFound):
        return NotFoundError()
    # The HTML content type does not apply to the JSON envelope.
    headers = {
        key: value
        for key, value in exc.get_headers()
        if key.lower() != "content-type"
    }
    return AppError(exc.name, status_code=exc.code, headers=headers)


class ErrorResponder:
    """Terminal stage for every failed request.

    ``mode`` is the process mode flag; diagnostics are written for every
    mode except ``test``.
    """

    def __init__(self, mode: str) -> None:
        self._mode = mode

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def logs_diagnostics(self) -> bool:
        return self._mode != TEST_MODE

    def respond(self, error: BaseException) -> tuple[Response, int]:
        lifecycle = current_lifecycle()
        if lifecycle.state in (RouteState.FAILED, RouteState.RESPONDED):
            raise DoubleResponseError(
                f"request {request.method} {request.path} already answered"
            )
        if lifecycle.state is RouteState.DISPATCHED:
            lifecycle.advance(RouteState.RUNNING)
        lifecycle.advance(RouteState.FAILED)

        if self.logs_diagnostics:
            logger.opt(exception=error).error(
                f"{request.method} {request.path} failed: {error!r}"
            )

        response = jsonify(serialize_error(error))
        if isinstance(error, AppError):
            response.headers.update(error.headers)
        status = resolve_status(error)
        lifecycle.advance(RouteState.RESPONDED)
        return response, status


def forward_error(error: BaseException) -> tuple[Response, int]:
    responder: ErrorResponder = current_app.extensions[EXTENSION_KEY]
    return responder.respond(error)


def register_error_handler(app: Flask, responder: ErrorResponder) -> None:
    app.extensions[EXTENSION_KEY] = responder

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        return responder.respond(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return responder.respond(http_exception_to_error(exc))

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        return responder.respond(exc)


__all__ = [
    "ErrorResponder",
    "forward_error",
    "http_exception_to_error",
    "register_error_handler",
    "resolve_status",
    "serialize_error",
]
