# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

DEFAULT_NAME = "Error"
DEFAULT_STATUS = HTTPStatus.INTERNAL_SERVER_ERROR


class AppError(Exception):
    """Error value carried from the point of failure to the responder.

    Fields are read-only once the error is built. ``status_code`` stays
    ``None`` unless the producer declares one; the responder falls back to
    500 in that case.
    """

    default_name: str = DEFAULT_NAME

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        status_code: int | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self._headers = dict(headers or {})
        self._message = message
        self._name = name or self.default_name
        self._status_code = int(status_code) if status_code is not None else None

    @property
    def message(self) -> str:
        return self._message

    @property
    def name(self) -> str:
        return self._name

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def resolved_status(self) -> int:
        return self._status_code if self._status_code is not None else int(DEFAULT_STATUS)

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"message": self._message, "name": self._name}}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self._message!r}, "
            f"name={self._name!r}, status_code={self._status_code!r})"
        )


class ValidationError(AppError):
    def __init__(self, message: str, *, status_code: int = HTTPStatus.BAD_REQUEST) -> None:
        super().__init__(message, status_code=status_code)


class UpstreamError(AppError):
    def __init__(
        self, message: str, *, status_code: int = HTTPStatus.SERVICE_UNAVAILABLE
    ) -> None:
        super().__init__(message, status_code=status_code)


class CallbackError(UpstreamError):
    pass


class NotFoundError(AppError):
    def __init__(self, message: str = "Not Found") -> None:
        super().__init__(message, status_code=HTTPStatus.NOT_FOUND)


class DoubleResponseError(RuntimeError):
    """Raised when the responder is asked to answer a request twice."""


__all__ = [
    "AppError",
    "CallbackError",
    "DEFAULT_NAME",
    "DEFAULT_STATUS",
    "DoubleResponseError",
    "NotFoundError",
    "UpstreamError",
    "ValidationError",
]
