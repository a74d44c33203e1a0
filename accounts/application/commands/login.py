"""
LoginCommand.

Command to authenticate an account with email and password.
"""
from dataclasses import dataclass


@dataclass
class LoginCommand:
    """Command to authenticate an account."""

    email: str
    password: str
