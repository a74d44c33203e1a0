"""
Customers module - Customer access tokens and QR codes.

This module handles:
- Customer access token redemption
- QR codes issued to customers by sellers
- Customer language detection
- Purging of long-expired access tokens
"""
