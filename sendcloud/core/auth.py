"""
core/auth.py
-------------

Helpers for building authenticated requests to Sendcloud.

These functions centralise construction of request URIs and the
default HTTP headers, so the Basic token is assembled in exactly one
place.  The client computes the token once per credential update and
passes it to :func:`build_auth_headers` for every request.
"""

from __future__ import annotations

import base64
import re
from typing import Dict

_ABSOLUTE_URL = re.compile(r"^https?://")


def build_auth_token(username: str, password: str) -> str:
    """Return the base64 token for Basic authentication.

    :param username: public API key
    :param password: secret API key
    :return: ``base64("username:password")`` as text
    """
    raw = f"{username}:{password}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def build_auth_headers(token: str) -> Dict[str, str]:
    """Create the default headers for an authenticated call.

    Headers supplied by the request or by the client options are merged
    over these and override them key by key.

    :param token: token returned by :func:`build_auth_token`
    :return: a dictionary of headers
    """
    return {
        "Authorization": f"Basic {token}",
        "Content-Type": "application/json",
    }


def build_uri(host: str, path: str) -> str:
    """Join ``host`` and ``path`` with one (and only one) slash.

    A ``path`` that already is an absolute http(s) URL is returned
    as-is, which lets download calls pass the fully-qualified links the
    API hands out.  No further validation is performed.

    >>> build_uri("https://panel.sendcloud.sc/", "/api/v2/parcels")
    'https://panel.sendcloud.sc/api/v2/parcels'
    """
    if _ABSOLUTE_URL.match(path):
        return path
    return f"{host.rstrip('/')}/{path.lstrip('/')}"
