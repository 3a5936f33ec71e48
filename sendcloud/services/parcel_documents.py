"""Documents attached to a parcel (label, CN23, commercial invoice...)."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.response import SendcloudResponse
from sendcloud.services.base import Module


class ParcelDocuments(Module):
    @log_call
    def get(self, parcel_id: str, document_type: str, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        endpoint = f"/api/v2/parcels/{parcel_id}/documents/{document_type}"
        return self.client.request("get", endpoint, query)
