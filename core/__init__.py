"""
Shared kernel of the partner network service.

Holds the value objects and exceptions every bounded context uses, the
in-process event bus, request middleware and the health probes.
"""
