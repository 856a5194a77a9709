"""
Serialization Adapters - MessageSerializer implementations.

Implementations:
    - JsonMessageSerializer: pydantic-backed JSON with a message_type tag
"""

from .json_message_serializer import JsonMessageSerializer

__all__ = [
    "JsonMessageSerializer",
]
