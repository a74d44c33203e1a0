"""
ListDistributorsQuery.

Query listing every distributor with its owning account and location count.
"""

from dataclasses import dataclass


@dataclass
class ListDistributorsQuery:
    """Query to list distributors ordered by name."""
