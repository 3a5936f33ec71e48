"""
schemas/errors.py
------------------

Model for the ``error`` subtree the API returns alongside 4xx
responses, e.g. ``{"error": {"code": 400, "message": "...",
"request": "api/v2/parcels"}}``.  Unknown keys are kept.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: Optional[Union[int, str]] = None
    message: Optional[str] = None
    request: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "ErrorDetail":
        """Build an ``ErrorDetail`` from whatever the API put under ``error``."""
        if isinstance(raw, dict):
            return cls.model_validate(raw)
        return cls(message=str(raw))
