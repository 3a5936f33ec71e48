"""Binary downloads of the document links handed out by the API."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.models import TransportResponse
from sendcloud.services.base import Module


class Downloads(Module):
    @log_call
    def get(self, url: str, query: Optional[Dict[str, Any]] = None) -> TransportResponse:
        """Download a PDF from a relative path or an absolute API URL.

        The body of the returned response holds the raw document bytes.
        """
        return self.client.request_file("get", url, query)
