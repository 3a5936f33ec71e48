"""HTTP transports used by :class:`sendcloud.api.SendcloudAPI`."""

from .http_client import HttpxTransport, Transport

__all__ = ["HttpxTransport", "Transport"]
