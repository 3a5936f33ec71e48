"""Carrier shipping products and their functionalities."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.response import SendcloudResponse
from sendcloud.services.base import Module


class ShippingProducts(Module):
    @log_call
    def list(self, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        return self.client.request("get", "/api/v2/shipping-products", query)
