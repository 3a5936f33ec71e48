import orjson
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sendcloud.core.errors import InvalidPayloadFailure, InvalidSignatureFailure
from sendcloud.routes.webhooks import create_webhook_router
from sendcloud.webhooks import WebhookHandler, compute_signature, verify_signature

SECRET = "whsec"
EVENT = {"action": "parcel_status_changed", "timestamp": 1700000000, "parcel": {"id": 42, "status": {"id": 11}}}


def _signed(event=EVENT, secret=SECRET):
    body = orjson.dumps(event)
    return body, compute_signature(body, secret)


def test_verify_signature():
    body, signature = _signed()
    assert verify_signature(body, signature, SECRET)
    assert not verify_signature(body, signature, "other")
    assert not verify_signature(body, None, SECRET)
    assert not verify_signature(body + b" ", signature, SECRET)


def test_handler_dispatches_to_matching_and_wildcard_listeners():
    handler = WebhookHandler(SECRET)
    status_events, all_events, other_events = [], [], []
    handler.add_listener("parcel_status_changed", status_events.append)
    handler.add_listener("*", all_events.append)
    handler.add_listener("integration_deleted", other_events.append)

    body, signature = _signed()
    event = handler.handle(body, signature)

    assert event == EVENT
    assert status_events == [EVENT]
    assert all_events == [EVENT]
    assert other_events == []


def test_handler_rejects_bad_signature():
    handler = WebhookHandler(SECRET)
    calls = []
    handler.add_listener("*", calls.append)
    body, _ = _signed()
    with pytest.raises(InvalidSignatureFailure):
        handler.handle(body, "0" * 64)
    assert calls == []


def test_handler_rejects_undecodable_body():
    handler = WebhookHandler(SECRET)
    body = b"not json"
    with pytest.raises(InvalidPayloadFailure):
        handler.handle(body, compute_signature(body, SECRET))


def test_handler_reads_secret_from_settings(monkeypatch):
    monkeypatch.setenv("SENDCLOUD_WEBHOOK_SECRET", SECRET)
    handler = WebhookHandler()
    body, signature = _signed()
    assert handler.handle(body, signature)["action"] == "parcel_status_changed"


def _client(handler):
    app = FastAPI()
    app.include_router(create_webhook_router(handler))
    return TestClient(app)


def test_router_accepts_signed_webhook():
    handler = WebhookHandler(SECRET)
    received = []
    handler.add_listener("parcel_status_changed", received.append)
    body, signature = _signed()

    response = _client(handler).post("/webhooks/sendcloud", content=body, headers={"Sendcloud-Signature": signature})

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "action": "parcel_status_changed"}
    assert received == [EVENT]


def test_router_maps_failures_to_http_errors():
    client = _client(WebhookHandler(SECRET))
    body, _ = _signed()
    assert client.post("/webhooks/sendcloud", content=body).status_code == 401
    assert client.post("/webhooks/sendcloud", content=body, headers={"Sendcloud-Signature": "bad"}).status_code == 401
    garbage = b"[oops"
    response = client.post(
        "/webhooks/sendcloud", content=garbage, headers={"Sendcloud-Signature": compute_signature(garbage, SECRET)}
    )
    assert response.status_code == 400
