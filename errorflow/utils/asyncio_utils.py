from __future__ import annotations

import asyncio
import threading
from collections.abc import Coroutine
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Runner(Generic[T]):  # noqa: UP046
    def __init__(self, coro: Coroutine[Any, Any, T]):
        self.coro = coro
        self.out: T | None = None
        self.err: BaseException | None = None

    def run(self) -> None:
        try:
            self.out = asyncio.run(self.coro)
        except BaseException as e:  # noqa: BLE001
            self.err = e


def run_async(coro: Coroutine[Any, Any, T]) -> T:  # noqa: UP047
    """Drive ``coro`` to completion from synchronous code.

    A failing coroutine re-raises its own exception here. Inside a running
    loop the coroutine gets a private loop on a helper thread.
    """
    try:
        loop: asyncio.AbstractEventLoop | None = asyncio.get_running_loop()
    except RuntimeError:
        loop = None
    if loop is None:
        # No running loop; run outside the handler so failures keep no __context__.
        return asyncio.run(coro)

    r: _Runner[T] = _Runner(coro)
    t = threading.Thread(target=r.run, daemon=True)
    t.start()
    t.join()
    if r.err is not None:
        raise r.err
    return r.out  # type: ignore[return-value]
