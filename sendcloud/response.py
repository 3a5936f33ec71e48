"""
Response envelope returned by :meth:`sendcloud.api.SendcloudAPI.request`.

The body is decoded strictly as JSON.  If the decoded object carries an
``error`` key, that subtree becomes :attr:`SendcloudResponse.error` and
``payload`` stays ``None``; otherwise the whole document is the
payload.  The two are never set together.

Payload keys can be read without a schema::

    response = api.parcels.get("42")
    response.parcel            # attribute-style, None when absent
    response.get("parcel")     # same, with an optional default
    "parcel" in response       # existence check
    response.to_model(Parcel, key="parcel")   # typed view
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import orjson
from pydantic import BaseModel

from sendcloud.core.errors import InvalidPayloadFailure
from sendcloud.schemas.errors import ErrorDetail

ModelT = TypeVar("ModelT", bound=BaseModel)

UNKNOWN_STATUS = "Unknown status code"

# Standard HTTP status code / reason phrases, WebDAV extensions included.
PHRASES: Dict[int, str] = {
    100: "Continue",
    101: "Switching Protocols",
    102: "Processing",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    207: "Multi-status",
    208: "Already Reported",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    306: "Switch Proxy",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Time-out",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Request Entity Too Large",
    414: "Request-URI Too Large",
    415: "Unsupported Media Type",
    416: "Requested range not satisfiable",
    417: "Expectation Failed",
    418: "I'm a teapot",
    422: "Unprocessable Entity",
    423: "Locked",
    424: "Failed Dependency",
    425: "Unordered Collection",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    451: "Unavailable For Legal Reasons",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Time-out",
    505: "HTTP Version not supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    510: "Not Extended",
    511: "Network Authentication Required",
}

# Explicit accessors consulted before the payload by get() / has().
ACCESSORS = frozenset({
    "status_code",
    "reason_phrase",
    "headers",
    "protocol_version",
    "payload",
    "error",
    "body",
})


def reason_phrase_for(status_code: int, reason_phrase: Optional[str] = None) -> str:
    """Return ``reason_phrase`` or the standard phrase for ``status_code``."""
    if reason_phrase:
        return reason_phrase
    return PHRASES.get(status_code, UNKNOWN_STATUS)


def _accessor_name(key: str) -> str:
    return key.replace("-", "_").lower()


class SendcloudResponse:
    """Structured wrapper around one HTTP response from the API.

    :param status_code: HTTP status code
    :param headers: response headers
    :param body: raw response body
    :param protocol_version: HTTP protocol version, e.g. ``"1.1"``
    :param reason_phrase: reason phrase; derived from the status code when empty
    :raises InvalidPayloadFailure: if ``body`` is not valid JSON
    """

    def __init__(
        self,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
        body: bytes | str | None = None,
        protocol_version: str = "1.1",
        reason_phrase: Optional[str] = None,
    ) -> None:
        self._status_code = status_code
        self._headers: Dict[str, str] = dict(headers or {})
        self._body = body.encode("utf-8") if isinstance(body, str) else (body or b"")
        self._protocol_version = protocol_version
        self._reason_phrase = reason_phrase_for(status_code, reason_phrase)
        self._error: Any = None
        self._payload = self.interpret_response(self._body, status_code)

    def interpret_response(self, body: bytes, status_code: int) -> Any:
        """Decode ``body`` and split it into payload and error.

        Returns the payload, or ``None`` when the document carried an
        ``error`` key (the error is stored on the instance instead).
        """
        try:
            decoded = orjson.loads(body)
        except orjson.JSONDecodeError as exc:
            text = body.decode("utf-8", errors="replace")
            raise InvalidPayloadFailure(
                f"Invalid response body from API, code: {status_code}, body: {text}",
                body=text,
                status_code=status_code,
            ) from exc

        if isinstance(decoded, dict) and decoded.get("error") is not None:
            self._error = decoded["error"]
            return None
        return decoded

    @classmethod
    def from_transport(cls, response: Any) -> "SendcloudResponse":
        """Build an envelope from a :class:`~sendcloud.models.TransportResponse`."""
        return cls(
            response.status_code,
            response.headers,
            response.body,
            response.protocol_version,
            response.reason_phrase,
        )

    # ------------------------------------------------------------------
    # Explicit accessors
    # ------------------------------------------------------------------

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def reason_phrase(self) -> str:
        return self._reason_phrase

    @property
    def headers(self) -> Dict[str, str]:
        return self._headers

    @property
    def protocol_version(self) -> str:
        return self._protocol_version

    @property
    def body(self) -> bytes:
        return self._body

    @property
    def payload(self) -> Any:
        return self._payload

    @property
    def error(self) -> Optional[ErrorDetail]:
        """The structured ``error`` subtree, or ``None`` for a normal payload."""
        if self._error is None:
            return None
        return ErrorDetail.from_raw(self._error)

    @property
    def raw_error(self) -> Any:
        return self._error

    @property
    def is_error(self) -> bool:
        return self._error is not None

    def with_status(self, status_code: int, reason_phrase: str = "") -> "SendcloudResponse":
        """Return a copy with a different status code.

        The reason phrase is resolved like in the constructor; the body
        is not decoded again.
        """
        new = copy.copy(self)
        new._status_code = int(status_code)
        new._reason_phrase = reason_phrase_for(new._status_code, reason_phrase)
        return new

    def to_model(self, model: Type[ModelT], key: Optional[str] = None) -> ModelT:
        """Validate the payload, or ``payload[key]``, into a pydantic model.

        :raises pydantic.ValidationError: if the data does not fit ``model``
        :raises KeyError: if ``key`` is missing from the payload
        """
        data = self[key] if key is not None else self._payload
        return model.model_validate(data)

    # ------------------------------------------------------------------
    # Dynamic field projection
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """Resolve ``key`` through the accessors first, then the payload.

        ``status-code``, ``status_code`` and ``Status_Code`` all reach
        the :attr:`status_code` accessor.  Any other key is looked up as
        given in the payload.  ``default`` is returned when nothing
        matches.
        """
        name = _accessor_name(key)
        if name in ACCESSORS:
            return getattr(self, name)
        if isinstance(self._payload, dict) and key in self._payload:
            return self._payload[key]
        return default

    def has(self, key: str) -> bool:
        """Existence check with the same precedence as :meth:`get`.

        A payload key whose value is ``None`` counts as absent.
        """
        if _accessor_name(key) in ACCESSORS:
            return True
        return isinstance(self._payload, dict) and self._payload.get(key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __getitem__(self, key: str) -> Any:
        if not isinstance(self._payload, dict):
            raise KeyError(key)
        return self._payload[key]

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup failed.
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __repr__(self) -> str:
        return f"<SendcloudResponse [{self._status_code} {self._reason_phrase}]>"
