"""
Adapters Layer - External Integrations.

This layer contains adapters that translate between our domain
and external systems (Redis, JSON).
"""

__all__ = []
