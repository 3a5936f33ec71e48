"""
services/parcels.py
--------------------

Parcel lifecycle: lookup, listing, creation, update, cancellation and
return portal links.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.response import SendcloudResponse
from sendcloud.services.base import Module, require_field


class Parcels(Module):
    @log_call
    def get(self, parcel_id: str, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        """Retrieve a single parcel."""
        return self.client.request("get", f"/api/v2/parcels/{parcel_id}", query)

    @log_call
    def list(self, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        """List parcels, optionally filtered (``order_number``, ``updated_after``...)."""
        return self.client.request("get", "/api/v2/parcels", query)

    @log_call
    def create(self, payload: Dict[str, Any]) -> SendcloudResponse:
        """Create one parcel (``{"parcel": {...}}``) or many (``{"parcels": [...]}``)."""
        return self.client.request("post", "/api/v2/parcels", payload)

    @log_call
    def update(self, payload: Dict[str, Any]) -> SendcloudResponse:
        """Update a parcel that has no label yet.

        :param payload: must contain the parcel ``id``
        :raises ValidationFailure: if ``id`` is missing
        """
        require_field(payload, "id", "Please provide parcel id with the request payload.")
        return self.client.request("put", "/api/v2/parcels", payload)

    @log_call
    def delete(self, parcel_id: str) -> SendcloudResponse:
        """Cancel a parcel, or delete it when no label was created yet."""
        return self.client.request("post", f"/api/v2/parcels/{parcel_id}/cancel")

    @log_call
    def get_return_portal_url(self, parcel_id: str, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        return self.client.request("get", f"/api/v2/parcels/{parcel_id}/return_portal_url", query)
