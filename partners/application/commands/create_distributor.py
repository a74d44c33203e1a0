"""
CreateDistributorCommand.

Command to create a distributor together with its DISTRIBUTOR account.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CreateDistributorCommand:
    """Command to create a distributor."""

    name: str
    email: str
    password: str
    contact_person: Optional[str] = None
    alternative_email: Optional[str] = None
    telephone: Optional[str] = None
    notes: Optional[str] = None
