"""
services/labels.py
-------------------

Shipping labels.  Label links can be fetched for a single parcel or in
bulk, either as A4 sheets (``normal_printer``) or as one label per page
for label printers (``label_printer``).  The bulk calls need the parcel
ids and are refused locally when they are missing.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.response import SendcloudResponse
from sendcloud.services.base import Module, require_field

_IDS_MESSAGE = "Please provide parcel ids array."


class Labels(Module):
    @log_call
    def get(self, parcel_id: str, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        """Retrieve the label links of one parcel."""
        return self.client.request("get", f"/api/v2/labels/{parcel_id}", query)

    @log_call
    def get_multiple(self, payload: Dict[str, Any]) -> SendcloudResponse:
        """Create labels for several parcels in one call.

        :param payload: must contain ``label``, e.g.
            ``{"label": {"parcels": [1, 2]}}``
        :raises ValidationFailure: if ``label`` is missing
        """
        require_field(payload, "label", "Please provide label array.")
        return self.client.request("post", "/api/v2/labels", payload)

    @log_call
    def get_pdf(self, parcel_id: str, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        return self.client.request("get", f"/api/v2/labels/normal_printer/{parcel_id}", query)

    @log_call
    def get_multiple_pdf(self, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        query = query or {}
        require_field(query, "ids", _IDS_MESSAGE)
        return self.client.request("get", "/api/v2/labels/normal_printer", query)

    @log_call
    def get_pdf_specific(self, parcel_id: str, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        return self.client.request("get", f"/api/v2/labels/label_printer/{parcel_id}", query)

    @log_call
    def get_multiple_pdf_specific(self, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        query = query or {}
        require_field(query, "ids", _IDS_MESSAGE)
        return self.client.request("get", "/api/v2/labels/label_printer", query)
