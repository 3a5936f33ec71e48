"""
Value objects passed between the client and its transports.

``RequestDescriptor`` captures one outbound call before the defaults
are merged in, and ``TransportResponse`` is what every transport hands
back.  Both are frozen pydantic models: they are created per call and
never modified afterwards.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE")


class RequestDescriptor(BaseModel):
    """One call to the API: verb, absolute URI, payload and extra headers.

    An empty ``payload`` means no query string for GET and no body for
    the other verbs.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    uri: str
    payload: Dict[str, Any] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=dict)

    @field_validator("method")
    @classmethod
    def _normalise_method(cls, value: str) -> str:
        method = value.strip().upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method {value!r}, expected one of {', '.join(ALLOWED_METHODS)}")
        return method


class TransportResponse(BaseModel):
    """Raw outcome of a transport call."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: Dict[str, str] = Field(default_factory=dict)
    body: bytes = b""
    protocol_version: str = "1.1"
    reason_phrase: str = ""
