"""
Application Services - Orchestration Layer.

Services coordinate domain rules with storage through ports.
"""

from .chat_memory_service import MessageWindowChatMemory

__all__ = [
    "MessageWindowChatMemory",
]
