"""Tracking information by tracking number."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.response import SendcloudResponse
from sendcloud.services.base import Module


class Tracking(Module):
    @log_call
    def get(self, tracking_number: str, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        return self.client.request("get", f"/api/v2/tracking/{tracking_number}", query)
