"""Price lookup for a shipping method and destination."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.response import SendcloudResponse
from sendcloud.services.base import Module


class ShippingPrices(Module):
    @log_call
    def get(self, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        return self.client.request("get", "/api/v2/shipping-price", query)
