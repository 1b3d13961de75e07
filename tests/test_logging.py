import json
import logging
from flask import g
from app.logging import RequestContextFilter, MaskingFilter, JsonFormatter


def make_record(msg, level=logging.INFO, name="shopfront.test"):
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


def test_request_id_header_and_propagation(client):
    resp = client.get("/__ok", headers={"X-Request-ID": "my-fixed-id-123"})
    assert resp.status_code == 200
    assert resp.headers.get("X-Request-ID") == "my-fixed-id-123"


def test_request_id_generated_when_missing(client):
    first = client.get("/__ok").headers.get("X-Request-ID")
    second = client.get("/__ok").headers.get("X-Request-ID")
    assert first and second and first != second


def test_context_filter_tags_request_and_shopkeeper(app):
    class FakeShopkeeper:
        id = 42

    with app.test_request_context("/main"):
        g.request_id = "rid-abc"
        record = make_record("hello")
        RequestContextFilter().filter(record)
        assert record.request_id == "rid-abc"
        assert record.shopkeeper_id == "anonymous"

        g.shopkeeper = FakeShopkeeper()
        record = make_record("hello again")
        RequestContextFilter().filter(record)
        assert record.shopkeeper_id == "42"


def test_context_filter_outside_request():
    record = make_record("no request")
    RequestContextFilter().filter(record)
    assert record.request_id == "n/a"
    assert record.shopkeeper_id == "anonymous"


def test_sensitive_fields_masked_in_info(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    record = make_record({"email": "user@example.com", "password": "hunter2", "item": 5})
    MaskingFilter().filter(record)
    assert record.msg["email"] == "[REDACTED]"
    assert record.msg["password"] == "[REDACTED]"
    assert record.msg["item"] == 5


def test_sensitive_fields_visible_in_debug(monkeypatch):
    monkeypatch.setenv("APP_ENV", "development")
    record = make_record({"password": "secret"}, level=logging.DEBUG)
    MaskingFilter().filter(record)
    assert record.msg["password"] == "secret"


def test_sensitive_fields_masked_in_production_debug(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    record = make_record({"session_id": "abc"}, level=logging.DEBUG)
    MaskingFilter().filter(record)
    assert record.msg["session_id"] == "[REDACTED]"


def test_json_formatter_emits_one_object_per_line():
    record = make_record("order placed")
    record.request_id = "rid-1"
    record.shopkeeper_id = "7"
    line = JsonFormatter().format(record)
    payload = json.loads(line)
    assert payload["message"] == "order placed"
    assert payload["request_id"] == "rid-1"
    assert payload["shopkeeper_id"] == "7"
    assert payload["level"] == "INFO"


def test_app_logger_uses_json_handler(app):
    handlers = app.logger.handlers
    assert any(isinstance(h.formatter, JsonFormatter) for h in handlers)
