"""
API Services - Business logic and data access for the paramguard API.

Services receive parameters that request validators have already cleaned.
"""

from .fancy_store import FancyResource, FancyResourceStore

__all__ = [
    "FancyResource",
    "FancyResourceStore",
]
