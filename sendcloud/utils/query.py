"""
utils/query.py
---------------

Query-string encoding for GET requests.

The API receives filters as plain query parameters.  ``encode_query``
flattens a payload mapping into ``(key, value)`` pairs the way the API
expects them and then percent-encodes the result:

* ``None`` values are dropped;
* booleans become ``true`` / ``false``;
* lists and tuples repeat the key once per element
  (``ids=1&ids=2``);
* nested mappings use bracket notation (``address[city]=Eindhoven``).
"""

from __future__ import annotations

from typing import Any, List, Mapping, Tuple
from urllib.parse import urlencode


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(key: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _flatten(f"{key}[{sub_key}]", sub_value, pairs)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _flatten(key, item, pairs)
    else:
        pairs.append((key, _scalar(value)))


def encode_query(payload: Mapping[str, Any]) -> str:
    """Return ``payload`` as a URL query string (without the ``?``)."""
    pairs: List[Tuple[str, str]] = []
    for key, value in payload.items():
        _flatten(str(key), value, pairs)
    return urlencode(pairs)


def append_query(uri: str, payload: Mapping[str, Any]) -> str:
    """Append the encoded ``payload`` to ``uri``.

    An empty payload, or one that encodes to nothing, leaves the URI
    untouched.  A URI that already carries a query string is extended
    with ``&``.
    """
    query = encode_query(payload) if payload else ""
    if not query:
        return uri
    separator = "&" if "?" in uri else "?"
    return f"{uri}{separator}{query}"
