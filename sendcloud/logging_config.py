"""
logging_config.py
------------------

Shared logging utilities for the Sendcloud client.  Everything is
routed through Python's built-in ``logging`` module on the
``sendcloud`` logger, and messages are serialised as JSON so that
downstream collectors (ELK, Grafana, Datadog) can parse them.

Being a library, nothing is configured at import time.  Applications
that want the JSON lines on stdout call :func:`configure_logging` once
during start-up.

The ``log_call`` decorator records entry and exit of endpoint module
calls at DEBUG level without leaking credentials, and
``log_http_request`` is used by the transports around every outbound
request.
"""

from __future__ import annotations

import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel

logger = logging.getLogger("sendcloud")

# Header names that must never reach the logs.
_SENSITIVE_HEADERS = {"authorization", "sendcloud-signature"}


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stdout handler to the ``sendcloud`` logger.

    The level defaults to ``SENDCLOUD_LOG_LEVEL`` from the settings.
    Calling this more than once replaces the previously installed
    handler instead of stacking a second one.
    """
    if level is None:
        from sendcloud.core.config import get_settings

        level = get_settings().log_level
    for handler in list(logger.handlers):
        if getattr(handler, "_sendcloud_handler", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    handler._sendcloud_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level.upper())


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries lose keys containing 'token', 'password' or 'secret',
    byte strings are summarised by their length, and lists and tuples
    are processed element-wise.  Pydantic models are logged through
    their ``model_dump()`` output.  Anything that still is not JSON
    serialisable falls back to its ``repr``.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in ("token", "password", "secret")):
                continue
            clean[str(k)] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if isinstance(obj, BaseModel):
        return _sanitize(obj.model_dump())
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return repr(obj)


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of endpoint calls.

    Emits a ``call_start`` DEBUG event with the sanitised arguments
    before the call and a ``call_end`` event with the sanitised result
    afterwards.  Exceptions raised by the wrapped callable propagate
    untouched; no ``call_end`` event is written for them.

    Examples
    --------

    >>> @log_call
    ... def add(a, b):
    ...     return a + b
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_start",
                "function": func.__qualname__,
                "args": _sanitize(args),
                "kwargs": _sanitize(kwargs),
            }))
        result = func(*args, **kwargs)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_end",
                "function": func.__qualname__,
                "result": _sanitize(result),
            }))
        return result

    return wrapper


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     body_size: int | None = None, status: int | None = None,
                     duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Called by the transports once before the request is sent and once
    after the response arrives.  Sensitive headers are removed and the
    body is summarised by its size only.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The URL being requested, query string included.
    headers : dict, optional
        Request headers.  ``Authorization`` is removed.
    body_size : int, optional
        Size in bytes of the encoded request body.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if k.lower() not in _SENSITIVE_HEADERS}
    if body_size:
        data["body_size"] = body_size
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
