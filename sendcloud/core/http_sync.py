"""
Synchronous transport built on ``requests``.

Drop-in alternative to the default ``httpx`` transport for
applications that already standardise on a ``requests.Session``
(custom adapters, proxies, client certificates).  It fulfils the same
contract as :class:`sendcloud.clients.http_client.HttpxTransport`.

Usage example:

    from sendcloud import SendcloudAPI
    from sendcloud.core.http_sync import RequestsTransport

    api = SendcloudAPI(key, secret, transport=RequestsTransport())
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import requests

from sendcloud.core.config import get_settings
from sendcloud.core.errors import TransportFailure
from sendcloud.logging_config import log_http_request, logger
from sendcloud.models import TransportResponse

Timeout = Union[float, Tuple[float, float]]


def _protocol_version(response: requests.Response) -> str:
    # urllib3 reports the version as 10 / 11 / 20
    version = getattr(response.raw, "version", None)
    if isinstance(version, int) and version > 0:
        return f"{version // 10}.{version % 10}"
    return "1.1"


class RequestsTransport:
    """Transport that sends every call through a ``requests.Session``.

    Redirects are returned as-is, like the ``httpx`` transport does,
    unless ``allow_redirects`` is passed.  A single ``proxy`` URL is
    accepted under the ``httpx`` spelling and applied to both schemes.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[Timeout] = None) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else get_settings().http_timeout

    def close(self) -> None:
        self.session.close()

    def send(self, method: str, uri: str, options: Mapping[str, Any]) -> TransportResponse:
        extra: Dict[str, Any] = dict(options)
        headers = dict(extra.pop("headers", None) or {})
        body = extra.pop("body", None)
        extra.setdefault("timeout", self.timeout)
        extra.setdefault("allow_redirects", False)
        if "proxy" in extra:
            proxy = extra.pop("proxy")
            extra.setdefault("proxies", {"http": proxy, "https": proxy})
        start_time = time.time()
        log_http_request(method, uri, headers=headers, body_size=len(body) if body else None)
        try:
            resp = self.session.request(method=method, url=uri, headers=headers, data=body, **extra)
        except requests.exceptions.RequestException as exc:
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
        log_http_request(method, uri, status=resp.status_code, duration_ms=duration_ms)
        return TransportResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=resp.content or b"",
            protocol_version=_protocol_version(resp),
            reason_phrase=resp.reason or "",
        )
