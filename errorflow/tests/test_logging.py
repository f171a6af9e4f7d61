from __future__ import annotations

from flask import Flask
from loguru import logger


def test_access_log_carries_request_id(app: Flask) -> None:
    records: list[dict] = []
    handler_id = logger.add(
        lambda message: records.append(message.record),
        level="INFO",
        filter="errorflow.shared.middleware.request_logger",
    )
    try:
        res = app.test_client().get("/error/return", headers={"X-Request-ID": "req-42"})
    finally:
        logger.remove(handler_id)

    assert res.status_code == 200
    (record,) = records
    assert record["extra"]["request_id"] == "req-42"
    assert record["message"].startswith("GET /error/return 200")


def test_records_outside_requests_use_placeholder(app: Flask) -> None:
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="INFO")
    try:
        logger.info("idle")
    finally:
        logger.remove(handler_id)

    assert records[0]["extra"]["request_id"] == "-"
