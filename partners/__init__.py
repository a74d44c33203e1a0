"""
Partners module - Distributor, Location and Seller management.

This module handles:
- Distributor, Location and Seller entities
- Seller QR configuration
- Partner repositories (ports) and Django ORM adapters
- Administrative listing, creation and editing
"""
