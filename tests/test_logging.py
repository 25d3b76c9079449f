import json
import logging

from app.logging_config import JsonFormatter
from app.middleware.request_context import profile_id_ctx, request_id_ctx


def make_record(msg="Tenant %s accrued", args=(7,), **extra):
    record = logging.LogRecord("app.services.dues_service", logging.INFO, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_core_fields():
    payload = json.loads(JsonFormatter().format(make_record()))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.services.dues_service"
    assert payload["message"] == "Tenant 7 accrued"
    assert "request_id" not in payload
    assert "profile_id" not in payload


def test_formatter_includes_request_context():
    rid_token = request_id_ctx.set("req-42")
    profile_token = profile_id_ctx.set("landlord-9")
    try:
        payload = json.loads(JsonFormatter().format(make_record()))
    finally:
        profile_id_ctx.reset(profile_token)
        request_id_ctx.reset(rid_token)

    assert payload["request_id"] == "req-42"
    assert payload["profile_id"] == "landlord-9"


def test_formatter_includes_structured_extras():
    record = make_record(tenant_id=7, payment_id=None, unrelated="ignored")

    payload = json.loads(JsonFormatter().format(record))

    assert payload["tenant_id"] == 7
    assert "payment_id" not in payload
    assert "unrelated" not in payload


def test_access_log_carries_profile(client, auth_headers, caplog):
    with caplog.at_level(logging.INFO, logger="property_manager.request"):
        client.get("/api/profiles/me", headers=auth_headers)

    record = [r for r in caplog.records if r.name == "property_manager.request"][-1]
    assert record.profile_id == "test-user-123"
    assert record.status_code == 200
    assert record.path == "/api/profiles/me"


def test_access_log_without_authentication(client, caplog):
    with caplog.at_level(logging.INFO, logger="property_manager.request"):
        client.get("/health")

    record = [r for r in caplog.records if r.name == "property_manager.request"][-1]
    assert record.profile_id is None
    assert record.method == "GET"
