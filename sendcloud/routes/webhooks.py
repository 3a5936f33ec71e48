"""
routes/webhooks.py
-------------------

FastAPI route receiving Sendcloud webhook calls.  The route reads the
raw body (the signature covers the exact bytes sent), delegates to a
:class:`~sendcloud.webhooks.WebhookHandler` and maps its failures to
HTTP errors: a bad signature is a 401, an undecodable body a 400.

Mount it in an application with::

    app.include_router(create_webhook_router(handler))
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import APIRouter, Header, HTTPException, Request

from sendcloud.core.errors import InvalidPayloadFailure, InvalidSignatureFailure
from sendcloud.webhooks import WebhookHandler


def create_webhook_router(handler: WebhookHandler, path: str = "/webhooks/sendcloud") -> APIRouter:
    router = APIRouter()

    @router.post(path)
    async def receive_webhook(
        request: Request,
        sendcloud_signature: Optional[str] = Header(None, alias="Sendcloud-Signature"),
    ) -> Dict[str, str]:
        body = await request.body()
        try:
            event = handler.handle(body, sendcloud_signature)
        except InvalidSignatureFailure:
            raise HTTPException(status_code=401, detail="Invalid signature")
        except InvalidPayloadFailure:
            raise HTTPException(status_code=400, detail="Invalid payload")
        return {"status": "ok", "action": str(event.get("action", ""))}

    return router
