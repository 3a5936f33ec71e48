"""Transit time insights per carrier and per shipping method."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.response import SendcloudResponse
from sendcloud.services.base import Module, require_list


class TransitTimes(Module):
    @log_call
    def get_carriers(self, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        return self.client.request("get", "/api/v2/insights/carriers/transit-times", query)

    @log_call
    def get_shipping_method(self, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        """Transit times for one or more shipping methods.

        :param query: must contain ``shipping_method_code`` as a list
        :raises ValidationFailure: if it is missing or not a list
        """
        query = query or {}
        require_list(query, "shipping_method_code", "Please provide shipping_method_code array.")
        return self.client.request("get", "/api/v2/insights/shipping-methods/transit-times", query)
