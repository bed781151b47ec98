from __future__ import annotations

import pytest
from flask import Flask, jsonify

from dailytodo.shared.config import load_config
from dailytodo.shared.middleware.rate_limit import InMemoryRateLimiter, rate_limit


def test_limiter_blocks_after_limit_and_recovers() -> None:
    limiter = InMemoryRateLimiter(limit=2, window_seconds=10)

    assert limiter.allow("ip", now=0.0)
    assert limiter.allow("ip", now=1.0)
    assert not limiter.allow("ip", now=2.0)
    assert limiter.allow("other-ip", now=2.0)
    assert limiter.allow("ip", now=11.5)


def test_decorator_returns_429_when_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENABLE_RATE_LIMIT", "true")
    monkeypatch.setenv("RL_LIMIT", "2")
    load_config.cache_clear()

    app = Flask(__name__)

    @app.post("/api/auth/login")
    @rate_limit()
    def login():
        return jsonify({"ok": True})

    client = app.test_client()
    statuses = [client.post("/api/auth/login").status_code for _ in range(3)]

    assert statuses == [200, 200, 429]
    assert client.post("/api/auth/login").get_json() == {"error": "rate_limited"}


def test_decorator_is_a_no_op_when_disabled() -> None:
    app = Flask(__name__)

    @app.post("/api/auth/login")
    @rate_limit(limit=1)
    def login():
        return jsonify({"ok": True})

    client = app.test_client()

    assert [client.post("/api/auth/login").status_code for _ in range(3)] == [200, 200, 200]
