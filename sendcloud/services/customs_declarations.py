"""Customs declaration documents (CN23 and commercial invoices)."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.response import SendcloudResponse
from sendcloud.services.base import Module, require_field


class CustomsDeclarations(Module):
    @log_call
    def get(self, parcel_id: str, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        """Retrieve the customs declaration of one parcel."""
        endpoint = f"/api/v2/customs_declaration/normal_printer/{parcel_id}"
        return self.client.request("get", endpoint, query)

    @log_call
    def get_multiple_pdf(self, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        """Retrieve the customs declarations of several parcels.

        :param query: must contain ``ids``, the parcel ids
        :raises ValidationFailure: if ``ids`` is missing
        """
        query = query or {}
        require_field(query, "ids", "Please provide parcel ids array.")
        return self.client.request("get", "/api/v2/customs_declaration/normal_printer", query)
