"""
HTTP API layer: DRF views, serializers and exception handling.
"""
