"""
core/errors.py
---------------

Exception hierarchy for the Sendcloud client.

Every failure raised by the library derives from :class:`SendcloudError`
so callers can catch the whole family at once.  Note that an HTTP 400
response is *not* an exception: the API reports validation problems in
the body of a 400, and the client returns those as a regular
:class:`~sendcloud.response.SendcloudResponse` whose ``error`` is set.
"""

from __future__ import annotations

from typing import Any, Optional


class SendcloudError(Exception):
    """Base class for all errors raised by the client."""


class TransportFailure(SendcloudError):
    """The HTTP call never produced a response (DNS, TCP, TLS, timeout).

    Raised by transports; the underlying library exception is kept as
    ``__cause__``.  The client never catches or retries it.
    """


class ApiFailure(SendcloudError):
    """The API answered with a 4xx or 5xx status other than 400."""

    def __init__(self, message: str, status_code: int, response: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response


class ValidationFailure(SendcloudError):
    """A required field was missing from a call's payload or query.

    Raised by endpoint modules before anything is sent.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidPayloadFailure(SendcloudError):
    """A response or webhook body could not be decoded as JSON."""

    def __init__(self, message: str, body: Any = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.body = body
        self.status_code = status_code


class InvalidSignatureFailure(SendcloudError):
    """A webhook body did not match its ``Sendcloud-Signature`` header."""
