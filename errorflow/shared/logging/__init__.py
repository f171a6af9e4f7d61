# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from .logger import logger, reset_request_id, set_request_id, setup_logging

__all__ = ["logger", "reset_request_id", "set_request_id", "setup_logging"]
