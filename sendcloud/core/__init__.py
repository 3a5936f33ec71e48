"""
Core helpers package for the Sendcloud client.

Low-level infrastructure: settings, authentication helpers, the error
hierarchy and the ``requests``-based transport.  Keeping these in a
dedicated package makes it easy to swap implementations or customise
behaviour for testing.
"""

__all__ = []
