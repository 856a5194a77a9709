"""
Application Layer - Ports and Services.

    - Ports: ChatMemoryRepository, MessageSerializer
    - Services: MessageWindowChatMemory
"""

from .ports import ChatMemoryRepository, MessageSerializer
from .services import MessageWindowChatMemory

__all__ = [
    "ChatMemoryRepository",
    "MessageSerializer",
    "MessageWindowChatMemory",
]
