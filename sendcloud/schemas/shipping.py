"""
schemas/shipping.py
--------------------

Typed views of shipping methods and printable labels.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ShippingMethod(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: Optional[str] = None
    carrier: Optional[str] = None
    min_weight: Optional[str] = None
    max_weight: Optional[str] = None
    service_point_input: Optional[str] = None
    price: Optional[float] = None
    countries: List[Dict[str, Any]] = Field(default_factory=list)


class Label(BaseModel):
    """Printable label links for one or more parcels."""

    model_config = ConfigDict(extra="allow")

    normal_printer: List[str] = Field(default_factory=list)
    label_printer: Optional[str] = None
