# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify

from errorflow.services import error_helpers as helpers
from errorflow.shared.errors import AppError, forward_error
from errorflow.shared.logging import logger
from errorflow.shared.middleware.stages import with_stages
from errorflow.utils.asyncio_utils import run_async


class ErrorsController:
    def __init__(self, *, title: str = "FrontEnd Guild") -> None:
        self._title = title

    def _success(self) -> tuple[Response, int]:
        return jsonify({"title": self._title}), 200

    def dereference(self) -> tuple[Response, int]:
        # No body parser is installed, so the parsed body is always absent.
        helpers.dereference_profile(g.get("body"))
        return self._success()

    def returned(self) -> tuple[Response, int]:
        error = helpers.return_error()
        logger.debug(f"errors.return: built {error!r} without raising it")
        return self._success()

    def thrown(self) -> tuple[Response, int]:
        helpers.throw_error()
        return self._success()

    def promise(self):
        try:
            run_async(helpers.promise_reject())
        except AppError as exc:
            return forward_error(exc)
        return self._success()

    def nested_promise_return(self):
        try:
            run_async(helpers.promise_consumer(helpers.promise_reject))
        except AppError as exc:
            return forward_error(exc)
        return self._success()

    def nested_promise_throw(self):
        try:
            run_async(helpers.promise_rethrower(helpers.promise_reject))
        except AppError as exc:
            return forward_error(exc)
        return self._success()

    def expected(self):
        try:
            helpers.expected_error()
        except AppError as exc:
            return forward_error(exc)
        return self._success()

    def middleware(self) -> tuple[Response, int]:
        return self._success()

    def async_await(self):
        try:
            run_async(helpers.async_await_helper())
        except AppError as exc:
            return forward_error(exc)
        return self._success()

    def callback(self):
        def _done(err: AppError | None, _result: object):
            if err is not None:
                return forward_error(err)
            return self._success()

        return helpers.node_cb_fn(_done)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("errors", __name__, url_prefix="/error")
        bp.add_url_rule("", view_func=self.dereference, methods=["GET"])
        bp.add_url_rule("/return", view_func=self.returned, methods=["GET"])
        bp.add_url_rule("/throw", view_func=self.thrown, methods=["GET"])
        bp.add_url_rule("/promise", view_func=self.promise, methods=["GET"])
        bp.add_url_rule(
            "/nested-promise/return",
            view_func=self.nested_promise_return,
            methods=["GET"],
        )
        bp.add_url_rule(
            "/consumed-promise",
            endpoint="consumed_promise",
            view_func=self.nested_promise_return,
            methods=["GET"],
        )
        bp.add_url_rule(
            "/nested-promise/throw",
            view_func=self.nested_promise_throw,
            methods=["GET"],
        )
        bp.add_url_rule("/expected", view_func=self.expected, methods=["GET"])
        bp.add_url_rule(
            "/middleware",
            view_func=with_stages(helpers.middleware_fn)(self.middleware),
            methods=["GET"],
        )
        bp.add_url_rule("/async-await", view_func=self.async_await, methods=["GET"])
        bp.add_url_rule("/callback", view_func=self.callback, methods=["GET"])
        return bp


__all__ = ["ErrorsController"]
