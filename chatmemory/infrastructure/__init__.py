"""
Infrastructure Layer - Cross-cutting Concerns.

    - Configuration management
    - Logging setup
"""

from .config import RedisMemoryConfig
from .logging import setup_logging

__all__ = [
    "RedisMemoryConfig",
    "setup_logging",
]
