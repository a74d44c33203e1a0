"""
RedeemAccessTokenQuery.

Query resolving a customer access token into the customer's QR codes.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class RedeemAccessTokenQuery:
    """Query to redeem a customer access token."""

    token: Optional[str]
    accept_language: Optional[str] = None
