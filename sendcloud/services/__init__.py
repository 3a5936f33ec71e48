"""
Endpoint modules, one per API resource.

``MODULES`` is the static registry used by
:meth:`sendcloud.api.SendcloudAPI.module` and by attribute access on
the client (``api.parcels``, ``api.labels``...).
"""

from __future__ import annotations

import re
from typing import Dict, Type

from .base import Module
from .checkout import Checkout
from .customs_declarations import CustomsDeclarations
from .downloads import Downloads
from .labels import Labels
from .parcel_documents import ParcelDocuments
from .parcel_statuses import ParcelStatuses
from .parcels import Parcels
from .pickups import Pickups
from .shipping_methods import ShippingMethods
from .shipping_prices import ShippingPrices
from .shipping_products import ShippingProducts
from .tracking import Tracking
from .transit_times import TransitTimes

MODULES: Dict[str, Type[Module]] = {
    "checkout": Checkout,
    "customs_declarations": CustomsDeclarations,
    "downloads": Downloads,
    "labels": Labels,
    "parcel_documents": ParcelDocuments,
    "parcel_statuses": ParcelStatuses,
    "parcels": Parcels,
    "pickups": Pickups,
    "shipping_methods": ShippingMethods,
    "shipping_prices": ShippingPrices,
    "shipping_products": ShippingProducts,
    "tracking": Tracking,
    "transit_times": TransitTimes,
}


def resolve_module(name: str) -> Type[Module]:
    """Look up a module class by name.

    ``parcelStatuses``, ``parcel-statuses`` and ``parcel_statuses`` all
    resolve to the same class.

    :raises KeyError: if the name is not registered
    """
    key = re.sub(r"(?<!^)(?=[A-Z])", "_", name).replace("-", "_").lower()
    try:
        return MODULES[key]
    except KeyError:
        raise KeyError(f"Unknown Sendcloud module {name!r}") from None


__all__ = [
    "MODULES",
    "Module",
    "resolve_module",
    "Checkout",
    "CustomsDeclarations",
    "Downloads",
    "Labels",
    "ParcelDocuments",
    "ParcelStatuses",
    "Parcels",
    "Pickups",
    "ShippingMethods",
    "ShippingPrices",
    "ShippingProducts",
    "Tracking",
    "TransitTimes",
]
