"""
clients/http_client.py
----------------------

Default transport for the Sendcloud client, built on ``httpx``.

A transport performs exactly one synchronous HTTP call and reports the
outcome as a :class:`~sendcloud.models.TransportResponse`, whatever the
status code.  Interpreting the status is the client's job, not the
transport's.  Connection-level problems (DNS, TCP, TLS, timeouts) are
raised as :class:`~sendcloud.core.errors.TransportFailure`.

Any object with a matching ``send`` method can be passed to
:class:`sendcloud.api.SendcloudAPI`, which makes it easy to swap the
implementation or inject a stub in tests.  No retries are performed
here; a failure propagates immediately.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Mapping, Optional, Protocol

import httpx

from sendcloud.core.config import get_settings
from sendcloud.core.errors import TransportFailure
from sendcloud.logging_config import log_http_request, logger
from sendcloud.models import TransportResponse


class Transport(Protocol):
    """Contract expected by the client from any HTTP transport.

    ``options`` always carries ``headers``, may carry ``body`` (already
    encoded bytes) and otherwise holds transport-specific keyword
    arguments such as ``timeout`` or ``verify``.  Redirect responses are
    returned to the caller, not followed.
    """

    def send(self, method: str, uri: str, options: Mapping[str, Any]) -> TransportResponse:
        ...


class HttpxTransport:
    """Synchronous ``httpx`` transport.

    A single :class:`httpx.Client` is created lazily and reused for
    every call until :meth:`close` is called.  An existing client may be
    injected instead, e.g. one wired to :class:`httpx.MockTransport`.

    ``httpx`` configures TLS, proxies and HTTP/2 on the client rather
    than per request, so the keys in :data:`CLIENT_OPTIONS` are taken
    out of the call options and used when the client is built.  An
    injected client keeps its own configuration.  Redirects are not
    followed unless ``follow_redirects`` is passed.
    """

    CLIENT_OPTIONS = ("verify", "cert", "proxy", "http2", "trust_env")

    def __init__(self, client: Optional[httpx.Client] = None, timeout: Optional[float] = None,
                 **client_options: Any) -> None:
        self.timeout = timeout if timeout is not None else get_settings().http_timeout
        self.client_options: Dict[str, Any] = client_options
        self._client = client

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, **self.client_options)
        return self._client

    def close(self) -> None:
        """Close the underlying HTTPX client and release its connections."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def send(self, method: str, uri: str, options: Mapping[str, Any]) -> TransportResponse:
        extra: Dict[str, Any] = dict(options)
        headers = dict(extra.pop("headers", None) or {})
        body = extra.pop("body", None)
        for key in self.CLIENT_OPTIONS:
            if key in extra:
                value = extra.pop(key)
                if self._client is None:
                    self.client_options.setdefault(key, value)
        start_time = time.time()
        log_http_request(method, uri, headers=headers, body_size=len(body) if body else None)
        try:
            response = self.client.request(method, uri, headers=headers, content=body, **extra)
        except httpx.TransportError as exc:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(json.dumps({
                "event": "http_error",
                "method": method,
                "url": uri,
                "detail": str(exc),
                "duration_ms": round(duration_ms, 2),
            }), exc_info=True)
            raise TransportFailure(f"{method} {uri} failed: {exc}") from exc
        duration_ms = (time.time() - start_time) * 1000
        log_http_request(method, uri, status=response.status_code, duration_ms=duration_ms)
        return TransportResponse(
            status_code=response.status_code,
            headers={k: v for k, v in response.headers.items()},
            body=response.content,
            protocol_version=response.http_version.replace("HTTP/", ""),
            reason_phrase=response.reason_phrase,
        )
