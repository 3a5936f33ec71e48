"""Shipping methods available to the account."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.response import SendcloudResponse
from sendcloud.services.base import Module


class ShippingMethods(Module):
    @log_call
    def list(self, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        """List shipping methods, e.g. filtered by ``sender_address`` or ``to_country``."""
        return self.client.request("get", "/api/v2/shipping_methods", query)

    @log_call
    def get(self, method_id: str, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        return self.client.request("get", f"/api/v2/shipping_methods/{method_id}", query)
