"""
sendcloud package
------------------

Python client for the Sendcloud shipping API.  Importing ``sendcloud``
exposes the client, the response envelope and the error hierarchy::

    from sendcloud import SendcloudAPI

    with SendcloudAPI("public-key", "secret-key") as api:
        response = api.parcels.get("42")
        if response.error:
            print(response.error.message)
        else:
            print(response.parcel["tracking_number"])
"""

from .api import SendcloudAPI
from .core.errors import (
    ApiFailure,
    InvalidPayloadFailure,
    InvalidSignatureFailure,
    SendcloudError,
    TransportFailure,
    ValidationFailure,
)
from .models import RequestDescriptor, TransportResponse
from .response import SendcloudResponse

__version__ = "1.0.0"

__all__ = [
    "ApiFailure",
    "InvalidPayloadFailure",
    "InvalidSignatureFailure",
    "RequestDescriptor",
    "SendcloudAPI",
    "SendcloudError",
    "SendcloudResponse",
    "TransportFailure",
    "TransportResponse",
    "ValidationFailure",
]
