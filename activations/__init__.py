"""
Activations module - Hierarchical activation engine.

This module handles:
- Toggling the active flag of distributors, locations and sellers
- The activation precondition (no active node under an inactive ancestor)
- Status change domain events
"""
