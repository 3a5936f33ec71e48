"""
schemas/parcels.py
-------------------

Typed views of the parcel objects returned by ``/api/v2/parcels``.
Only the documented attributes are declared; everything else the API
sends is preserved as extra fields, so newer API versions never break
validation.  Use them through
:meth:`sendcloud.response.SendcloudResponse.to_model`.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .shipping import Label


class ParcelStatus(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    message: Optional[str] = None


class Country(BaseModel):
    model_config = ConfigDict(extra="allow")

    iso_2: Optional[str] = None
    iso_3: Optional[str] = None
    name: Optional[str] = None


class Parcel(BaseModel):
    """A parcel as returned by the API."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: Optional[str] = None
    company_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[Country] = None
    email: Optional[str] = None
    telephone: Optional[str] = None
    order_number: Optional[str] = None
    tracking_number: Optional[str] = None
    weight: Optional[str] = None
    status: Optional[ParcelStatus] = None
    label: Optional[Label] = None
