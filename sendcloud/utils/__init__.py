"""Small helpers shared by the client."""

from .query import append_query, encode_query

__all__ = ["append_query", "encode_query"]
