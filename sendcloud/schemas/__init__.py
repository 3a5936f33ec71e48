"""
Pydantic models for documented Sendcloud API objects.

The response envelope never requires these: every field is reachable
through dynamic lookup.  They exist for callers who want validated,
typed access to the attributes they rely on.
"""

from .errors import ErrorDetail
from .parcels import Country, Parcel, ParcelStatus
from .shipping import Label, ShippingMethod

__all__ = [
    "Country",
    "ErrorDetail",
    "Label",
    "Parcel",
    "ParcelStatus",
    "ShippingMethod",
]
