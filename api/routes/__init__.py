"""API routes package"""

from . import feedings, health

__all__ = ["feedings", "health"]
