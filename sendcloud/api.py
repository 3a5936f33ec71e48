"""
api.py
-------

The Sendcloud client: builds authenticated requests, hands them to a
transport and classifies the outcome.

Status handling is deliberately asymmetric.  A 400 response is the
API's way of reporting validation problems, so it is returned as a
normal :class:`~sendcloud.response.SendcloudResponse` whose ``error``
explains what was rejected.  Every other 4xx/5xx status raises
:class:`~sendcloud.core.errors.ApiFailure`, and connection-level
problems surface as the transport's
:class:`~sendcloud.core.errors.TransportFailure`.  Nothing is retried.

A client instance is meant to be used from one thread at a time.
Credentials, host and transport are only changed through the explicit
setters; share one instance across threads only with your own locking.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Mapping, Optional

import orjson
from requests.structures import CaseInsensitiveDict

from sendcloud.clients.http_client import HttpxTransport, Transport
from sendcloud.core.auth import build_auth_headers, build_auth_token, build_uri
from sendcloud.core.config import get_settings
from sendcloud.core.errors import ApiFailure
from sendcloud.logging_config import logger
from sendcloud.models import RequestDescriptor, TransportResponse
from sendcloud.response import SendcloudResponse, reason_phrase_for
from sendcloud.services import Module, resolve_module
from sendcloud.utils.query import append_query

RequestHook = Callable[[RequestDescriptor], None]


class SendcloudAPI:
    """Entry point for all Sendcloud API calls.

    :param username: public API key; falls back to ``SENDCLOUD_USERNAME``
    :param password: secret API key; falls back to ``SENDCLOUD_PASSWORD``
    :param options: extra transport options merged into every call
        (e.g. ``{"timeout": 30}``); an ``options["headers"]`` mapping
        overrides individual default headers
    :param transport: object implementing ``send(method, uri, options)``;
        an :class:`HttpxTransport` is created on first use when omitted
    :param api_host: API base URL; falls back to ``SENDCLOUD_API_HOST``
    :param request_hook: callable receiving every
        :class:`RequestDescriptor` before it is submitted
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
        *,
        transport: Optional[Transport] = None,
        api_host: Optional[str] = None,
        request_hook: Optional[RequestHook] = None,
    ) -> None:
        settings = get_settings()
        self.set_auth_credentials(
            username if username is not None else settings.username,
            password if password is not None else settings.password,
        )
        self.options: Dict[str, Any] = dict(options or {})
        self.api_host = api_host or settings.api_host
        self.request_hook = request_hook
        self._transport = transport

    def __enter__(self) -> "SendcloudAPI":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport if it holds resources."""
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_api_host(self, api_host: str) -> None:
        """Override the API host, e.g. for a staging environment."""
        self.api_host = api_host

    def set_auth_credentials(self, username: str, password: str) -> None:
        """Update the credentials and recompute the Basic token."""
        self._auth_token = build_auth_token(username, password)

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpxTransport()
        return self._transport

    def set_transport(self, transport: Transport) -> None:
        self._transport = transport

    # ------------------------------------------------------------------
    # Request pipeline
    # ------------------------------------------------------------------

    @staticmethod
    def build_uri(host: str, path: str) -> str:
        return build_uri(host, path)

    def build_request(
        self,
        method: str,
        uri: str,
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RequestDescriptor:
        return RequestDescriptor(
            method=method,
            uri=uri,
            payload=dict(payload or {}),
            headers=dict(headers or {}),
        )

    def submit_request(self, request: RequestDescriptor) -> TransportResponse:
        """Merge defaults into ``request``, encode it and send it.

        Headers are merged case-insensitively in this order, the last
        write winning: auth defaults, the request's own headers, then
        ``options["headers"]``.  GET payloads become the query string;
        other verbs send them as a JSON body.
        """
        options = dict(self.options)
        headers: CaseInsensitiveDict = CaseInsensitiveDict(build_auth_headers(self._auth_token))
        headers.update(request.headers)
        headers.update(options.pop("headers", None) or {})
        options["headers"] = dict(headers.items())

        uri = request.uri
        if request.payload:
            if request.method == "GET":
                uri = append_query(uri, request.payload)
            else:
                options["body"] = orjson.dumps(request.payload)

        return self.transport.send(request.method, uri, options)

    def request_raw(
        self,
        method: str,
        endpoint: str,
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        *,
        hook: Optional[RequestHook] = None,
    ) -> TransportResponse:
        """Send a request and return the transport's response untouched.

        :param method: HTTP verb, case-insensitive
        :param endpoint: path relative to the API host, or an absolute URL
        :param payload: query parameters (GET) or JSON body (other verbs)
        :param headers: additional headers for this call
        :param hook: per-call hook, used instead of ``request_hook``
        :raises ApiFailure: for 4xx/5xx statuses other than 400
        :raises TransportFailure: on network errors
        """
        uri = self.build_uri(self.api_host, endpoint)
        request = self.build_request(method, uri, payload, headers)
        callback = hook or self.request_hook
        if callback is not None:
            callback(request)

        response = self.submit_request(request)
        status = response.status_code
        if status >= 400 and status != 400:
            kind = "Client error" if status < 500 else "Server error"
            phrase = reason_phrase_for(status, response.reason_phrase)
            message = f"{kind}: `{request.method} {request.uri}` resulted in a `{status} {phrase}` response"
            logger.warning(json.dumps({
                "event": "api_failure",
                "method": request.method,
                "url": request.uri,
                "status": status,
            }))
            raise ApiFailure(message, status, response)
        return response

    def request(
        self,
        method: str,
        endpoint: str,
        payload: Optional[Mapping[str, Any]] = None,
        *,
        hook: Optional[RequestHook] = None,
    ) -> SendcloudResponse:
        """Send a JSON request and wrap the result in a :class:`SendcloudResponse`.

        :raises InvalidPayloadFailure: if the body is not valid JSON
        """
        response = self.request_raw(method, endpoint, payload, {"Accept": "application/json"}, hook=hook)
        return SendcloudResponse.from_transport(response)

    def request_file(
        self,
        method: str,
        endpoint: str,
        payload: Optional[Mapping[str, Any]] = None,
        *,
        hook: Optional[RequestHook] = None,
    ) -> TransportResponse:
        """Request a binary document (labels, customs forms) as PDF.

        The body is returned as raw bytes and is not decoded.
        """
        return self.request_raw(method, endpoint, payload, {"Accept": "application/pdf"}, hook=hook)

    # ------------------------------------------------------------------
    # Endpoint modules
    # ------------------------------------------------------------------

    def module(self, name: str) -> Module:
        """Return the endpoint module registered as ``name``.

        :raises KeyError: if no module is registered under that name
        """
        return resolve_module(name)(self)

    def __getattr__(self, name: str) -> Module:
        # Only reached when normal attribute lookup failed.
        if name.startswith("_"):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        try:
            return resolve_module(name)(self)
        except KeyError:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}") from None
