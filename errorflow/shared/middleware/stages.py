# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol

from errorflow.shared.errors import forward_error


class Signal(Protocol):
    def __call__(self, error: BaseException | None = None) -> Any: ...


Stage = Callable[[Signal], Any]


def signal(error: BaseException | None = None) -> Any:
    """Complete a stage: continue with ``None``, or hand ``error`` to the responder."""
    if error is None:
        return None
    return forward_error(error)


def with_stages(*stages: Stage):
    """Run ``stages`` in order before the view; the first non-None result wins."""

    def decorator(f: Callable):
        @wraps(f)
        def wrapper(*args, **kwargs):
            for stage in stages:
                outcome = stage(signal)
                if outcome is not None:
                    return outcome
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["Signal", "Stage", "signal", "with_stages"]
