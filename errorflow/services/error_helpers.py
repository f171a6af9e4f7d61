# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Operations that each produce an error through one propagation mechanism.

Some of them deliberately never propagate: ``return_error`` and
``promise_consumer`` hand the error back as an ordinary value, so the
caller continues down its success path.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from errorflow.shared.errors import (
    AppError,
    CallbackError,
    UpstreamError,
    ValidationError,
)

R = TypeVar("R")

Completion = Callable[[AppError | None, Any], R]


def throw_error() -> None:
    raise AppError("regular function error")


def return_error() -> AppError:
    return AppError("regular function error")


async def promise_reject() -> Any:
    await asyncio.sleep(0)
    # 503: the database behind this call is unavailable
    raise UpstreamError("Promise Failed", status_code=503)


async def promise_consumer(factory: Callable[[], Awaitable[Any]]) -> Any:
    try:
        return await factory()
    except AppError as err:
        return err


async def promise_rethrower(factory: Callable[[], Awaitable[Any]]) -> Any:
    try:
        return await factory()
    except AppError:
        raise


def expected_error() -> None:
    valid = False
    if not valid:
        raise ValidationError("expected error", status_code=400)


def middleware_fn(signal: Callable[..., Any]) -> Any:
    return signal(AppError("error in middleware", status_code=401))


async def _async_await_inner() -> None:
    await asyncio.sleep(0)
    raise UpstreamError("async await error", status_code=503)


async def async_await_helper() -> None:
    await _async_await_inner()


def node_cb_fn(callback: Completion[R]) -> R:
    err = CallbackError("callback error", status_code=503)
    result = None
    return callback(err, result)


def dereference_profile(payload: dict[str, Any] | None) -> Any:
    return payload["profile"]["name"]  # type: ignore[index]


__all__ = [
    "Completion",
    "async_await_helper",
    "dereference_profile",
    "expected_error",
    "middleware_fn",
    "node_cb_fn",
    "promise_consumer",
    "promise_reject",
    "promise_rethrower",
    "return_error",
    "throw_error",
]
