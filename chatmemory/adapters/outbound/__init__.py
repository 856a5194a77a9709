"""
Outbound Adapters - External Service Implementations.

Outbound adapters implement ports to connect to external services.

Modules:
    - persistence: Repository implementations
    - serialization: Message encoders
"""

__all__ = []
