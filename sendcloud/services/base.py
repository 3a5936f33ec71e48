"""
services/base.py
-----------------

Common base for the endpoint modules.  A module groups the calls for
one API resource: it validates that required keys are present, fills
in the path and delegates to the client.  Validation is presence-only;
types and values are left to the API, which reports them in a 400.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Mapping

from sendcloud.core.errors import ValidationFailure
from sendcloud.logging_config import logger

if TYPE_CHECKING:
    from sendcloud.api import SendcloudAPI


class Module:
    """Base class for endpoint modules; holds the owning client."""

    def __init__(self, client: "SendcloudAPI") -> None:
        self.client = client

    def __repr__(self) -> str:
        return f"<{type(self).__name__} module>"


def require_field(data: Mapping[str, Any], field: str, message: str) -> None:
    """Raise :class:`ValidationFailure` unless ``field`` is set in ``data``.

    A key holding ``None`` counts as missing.
    """
    if data.get(field) is None:
        logger.warning(json.dumps({"event": "validation_failure", "field": field}))
        raise ValidationFailure(message, field=field)


def require_list(data: Mapping[str, Any], field: str, message: str) -> None:
    """Like :func:`require_field`, but the value must also be a list."""
    if not isinstance(data.get(field), (list, tuple)):
        logger.warning(json.dumps({"event": "validation_failure", "field": field}))
        raise ValidationFailure(message, field=field)
