"""Carrier pickups."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sendcloud.logging_config import log_call
from sendcloud.response import SendcloudResponse
from sendcloud.services.base import Module


class Pickups(Module):
    @log_call
    def get(self, pickup_id: str, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        return self.client.request("get", f"/api/v2/pickups/{pickup_id}", query)

    @log_call
    def create(self, payload: Dict[str, Any]) -> SendcloudResponse:
        """Schedule a pickup with a carrier."""
        return self.client.request("post", "/api/v2/pickups", payload)

    @log_call
    def list(self, query: Optional[Dict[str, Any]] = None) -> SendcloudResponse:
        return self.client.request("get", "/api/v2/pickups", query)
