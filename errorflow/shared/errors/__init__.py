# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    AppError,
    CallbackError,
    DoubleResponseError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from .http import ErrorResponder, forward_error, register_error_handler

__all__ = [
    "AppError",
    "CallbackError",
    "DoubleResponseError",
    "ErrorResponder",
    "NotFoundError",
    "UpstreamError",
    "ValidationError",
    "forward_error",
    "register_error_handler",
]
