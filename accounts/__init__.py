"""
Accounts module - Credentials, roles and login.

This module handles:
- Account entity and password verification
- Role claims (ADMIN, DISTRIBUTOR, LOCATION, SELLER)
- Session login for the admin API
"""
