"""
webhooks.py
------------

Verification and dispatch of Sendcloud webhook calls.

Sendcloud signs every webhook body with HMAC-SHA256, keyed with the
integration's secret, and sends the hex digest in the
``Sendcloud-Signature`` header.  :class:`WebhookHandler` checks that
signature, decodes the event and passes it to the listeners registered
for the event's ``action`` (e.g. ``parcel_status_changed``).  Listeners
registered for ``"*"`` receive every event.
"""

from __future__ import annotations

import hashlib
import hmac
import json
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional

import orjson

from sendcloud.core.config import get_settings
from sendcloud.core.errors import InvalidPayloadFailure, InvalidSignatureFailure
from sendcloud.logging_config import logger

SIGNATURE_HEADER = "Sendcloud-Signature"
ANY_ACTION = "*"

Listener = Callable[[Dict[str, Any]], None]


def compute_signature(body: bytes, secret: str) -> str:
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def verify_signature(body: bytes, signature: Optional[str], secret: str) -> bool:
    """Return True when ``signature`` is the HMAC of ``body`` under ``secret``."""
    if not signature or not secret:
        return False
    return hmac.compare_digest(compute_signature(body, secret), signature.strip())


class WebhookHandler:
    """Verify incoming webhook calls and fan them out to listeners.

    :param secret: signing secret; defaults to ``SENDCLOUD_WEBHOOK_SECRET``
    """

    def __init__(self, secret: Optional[str] = None) -> None:
        self.secret = secret if secret is not None else get_settings().webhook_secret
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def add_listener(self, action: str, listener: Listener) -> None:
        self._listeners[action].append(listener)

    def listeners(self, action: str) -> List[Listener]:
        return list(self._listeners.get(action, [])) + list(self._listeners.get(ANY_ACTION, []))

    def handle(self, body: bytes, signature: Optional[str]) -> Dict[str, Any]:
        """Verify, decode and dispatch one webhook call.

        Listener exceptions propagate to the caller.

        :raises InvalidSignatureFailure: if the signature does not match
        :raises InvalidPayloadFailure: if the body is not a JSON object
        :return: the decoded event
        """
        if not verify_signature(body, signature, self.secret):
            logger.warning(json.dumps({"event": "webhook_invalid_signature", "body_size": len(body)}))
            raise InvalidSignatureFailure("Webhook signature does not match the request body.")
        try:
            event = orjson.loads(body)
        except orjson.JSONDecodeError as exc:
            raise InvalidPayloadFailure(
                "Invalid webhook body", body=body.decode("utf-8", errors="replace")
            ) from exc
        if not isinstance(event, dict):
            raise InvalidPayloadFailure("Webhook body must be a JSON object", body=body.decode("utf-8", errors="replace"))

        action = str(event.get("action", ""))
        listeners = self.listeners(action)
        logger.info(json.dumps({
            "event": "webhook_received",
            "action": action,
            "listeners": len(listeners),
        }))
        for listener in listeners:
            listener(event)
        return event
