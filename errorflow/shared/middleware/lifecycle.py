# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum

from flask import Flask, Response, g


class RouteState(str, Enum):
    DISPATCHED = "dispatched"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    RESPONDED = "responded"


_TRANSITIONS: dict[RouteState, frozenset[RouteState]] = {
    RouteState.DISPATCHED: frozenset({RouteState.RUNNING}),
    RouteState.RUNNING: frozenset({RouteState.SUCCEEDED, RouteState.FAILED}),
    RouteState.SUCCEEDED: frozenset({RouteState.RESPONDED}),
    RouteState.FAILED: frozenset({RouteState.RESPONDED}),
    RouteState.RESPONDED: frozenset(),
}


class InvalidTransitionError(RuntimeError):
    def __init__(self, current: RouteState, target: RouteState) -> None:
        super().__init__(f"cannot move request from {current.value} to {target.value}")
        self.current = current
        self.target = target


class RequestLifecycle:
    """Per-request outcome tracker; ``RESPONDED`` is terminal."""

    def __init__(self) -> None:
        self._state = RouteState.DISPATCHED
        self.history: list[RouteState] = [RouteState.DISPATCHED]

    @property
    def state(self) -> RouteState:
        return self._state

    @property
    def responded(self) -> bool:
        return self._state is RouteState.RESPONDED

    def can_advance(self, target: RouteState) -> bool:
        return target in _TRANSITIONS[self._state]

    def advance(self, target: RouteState) -> None:
        if not self.can_advance(target):
            raise InvalidTransitionError(self._state, target)
        self._state = target
        self.history.append(target)


def current_lifecycle() -> RequestLifecycle:
    lifecycle = g.get("lifecycle")
    if lifecycle is None:
        lifecycle = RequestLifecycle()
        g.lifecycle = lifecycle
    return lifecycle


def configure_lifecycle(app: Flask) -> None:
    @app.before_request
    def _start_lifecycle() -> None:
        current_lifecycle().advance(RouteState.RUNNING)

    @app.after_request
    def _finish_lifecycle(resp: Response) -> Response:
        lifecycle = current_lifecycle()
        if lifecycle.state is RouteState.RUNNING:
            lifecycle.advance(RouteState.SUCCEEDED)
        if lifecycle.state is RouteState.SUCCEEDED:
            lifecycle.advance(RouteState.RESPONDED)
        return resp


__all__ = [
    "InvalidTransitionError",
    "RequestLifecycle",
    "RouteState",
    "configure_lifecycle",
    "current_lifecycle",
]
