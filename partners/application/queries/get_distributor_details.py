"""
GetDistributorDetailsQuery.
"""

import uuid
from dataclasses import dataclass


@dataclass
class GetDistributorDetailsQuery:
    """Query to get a distributor with its locations and sellers."""

    distributor_id: uuid.UUID
