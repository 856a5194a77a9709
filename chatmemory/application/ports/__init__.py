"""
Ports - Interfaces for external systems.

Ports define how the application layer talks to storage and encoding.
They are implemented by adapters in the adapters layer.
"""

from .chat_memory_repository import ChatMemoryRepository
from .message_serializer import MessageSerializer

__all__ = [
    "ChatMemoryRepository",
    "MessageSerializer",
]
