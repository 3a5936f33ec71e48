"""Delivery options for checkout configurations."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.response import SendcloudResponse
from sendcloud.services.base import Module


class Checkout(Module):
    @log_call
    def get(self, configuration_id: str, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        """Retrieve the delivery options of a checkout configuration."""
        endpoint = f"/api/v2/checkout/configurations/{configuration_id}/delivery-options"
        return self.client.request("get", endpoint, query)
