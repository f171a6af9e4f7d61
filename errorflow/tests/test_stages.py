from __future__ import annotations

from flask import Flask, jsonify

from errorflow.shared.errors import AppError
from errorflow.shared.middleware.stages import with_stages


def test_stages_run_in_order_then_view(app: Flask) -> None:
    calls: list[str] = []

    def first(signal):
        calls.append("first")
        return signal()

    def second(signal):
        calls.append("second")
        return signal()

    @with_stages(first, second)
    def view():
        calls.append("view")
        return jsonify({"ok": True})

    app.add_url_rule("/staged", view_func=view)
    res = app.test_client().get("/staged")

    assert res.status_code == 200
    assert calls == ["first", "second", "view"]


def test_signalled_error_skips_later_stages(app: Flask) -> None:
    calls: list[str] = []

    def reject(signal):
        calls.append("reject")
        return signal(AppError("nope", status_code=403))

    def never(signal):
        calls.append("never")
        return signal()

    @with_stages(reject, never)
    def view():
        calls.append("view")
        return jsonify({"ok": True})

    app.add_url_rule("/guarded", view_func=view)
    res = app.test_client().get("/guarded")

    assert res.status_code == 403
    assert res.get_json() == {"error": {"message": "nope", "name": "Error"}}
    assert calls == ["reject"]
