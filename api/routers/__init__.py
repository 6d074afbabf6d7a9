"""
Reputation API Routers.
"""
from . import reclaim, reputation, loans

__all__ = ["reclaim", "reputation", "loans"]
