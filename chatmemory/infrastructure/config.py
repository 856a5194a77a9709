"""Configuration management for chatmemory."""

from dataclasses import asdict, dataclass, field, replace
from typing import Optional, Dict, Any
import logging
import os

import dotenv

from ..domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "chat_memory:"
BACKENDS = ("redis", "memory")


@dataclass(frozen=True)
class RedisMemoryConfig:
    """
    Configuration for the chat memory store.

    Values can be provided directly or loaded from environment variables.

    Attributes:
        backend: Which repository to build ("redis" or "memory")
        key_prefix: Prepended to every conversation id to form the Redis key
        host: Redis host
        port: Redis port
        db: Redis logical database number
        username: Optional ACL username
        password: Optional password
        ssl: Connect over TLS
        client_name: Name reported by CLIENT LIST
        timeout_seconds: Socket timeout for every command
        scan_count: COUNT hint sent with each SCAN page
        atomic_save: Replace histories inside MULTI/EXEC instead of DEL then RPUSH
        max_messages: Window size for MessageWindowChatMemory
        log_level: Logging level

    Example:
        # Create with defaults
        config = RedisMemoryConfig()

        # Create with custom values
        config = RedisMemoryConfig(host="redis.internal", key_prefix="bot:")

        # Load from environment
        config = RedisMemoryConfig.from_env()
    """

    backend: str = "redis"
    key_prefix: str = DEFAULT_KEY_PREFIX

    # Connection
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    ssl: bool = False
    client_name: Optional[str] = None
    timeout_seconds: float = 2.0

    # Repository behavior
    scan_count: int = 100
    atomic_save: bool = False

    # Chat memory window
    max_messages: int = 20

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ConfigurationError(
                f"Unknown backend {self.backend!r}, expected one of {BACKENDS}",
                setting="backend",
            )
        if not self.key_prefix:
            raise ConfigurationError("key_prefix cannot be empty", setting="key_prefix")
        if not 0 < self.port < 65536:
            raise ConfigurationError(f"Invalid port: {self.port}", setting="port")
        if self.scan_count < 1:
            raise ConfigurationError("scan_count must be at least 1", setting="scan_count")
        if self.max_messages < 1:
            raise ConfigurationError(
                "max_messages must be at least 1", setting="max_messages"
            )

    @classmethod
    def from_env(
        cls,
        prefix: str = "CHAT_MEMORY_",
        env_file: Optional[str] = None,
    ) -> "RedisMemoryConfig":
        """
        Load configuration from environment variables.

        Environment variables are prefixed with CHAT_MEMORY_ by default.

        Args:
            prefix: Prefix for environment variables
            env_file: Optional .env file to load first (existing variables win)

        Returns:
            RedisMemoryConfig instance with values from environment

        Example:
            export CHAT_MEMORY_REDIS_HOST=redis.internal
            export CHAT_MEMORY_KEY_PREFIX=support_bot:

            config = RedisMemoryConfig.from_env()
        """
        if env_file is not None:
            dotenv.load_dotenv(env_file, override=False)

        def get_env(key: str, default: Any = None) -> Optional[str]:
            return os.environ.get(f"{prefix}{key}", default)

        def get_bool(key: str, default: bool = False) -> bool:
            value = get_env(key)
            if value is None:
                return default
            return value.lower() in ("true", "1", "yes", "on")

        def get_int(key: str, default: int = 0) -> int:
            value = get_env(key)
            if value is None:
                return default
            try:
                return int(value)
            except ValueError:
                logger.warning(f"Invalid int value for {prefix}{key}: {value}, using default: {default}")
                return default

        def get_float(key: str, default: float = 0.0) -> float:
            value = get_env(key)
            if value is None:
                return default
            try:
                return float(value)
            except ValueError:
                logger.warning(f"Invalid float value for {prefix}{key}: {value}, using default: {default}")
                return default

        return cls(
            backend=get_env("BACKEND", cls.backend).lower(),
            key_prefix=get_env("KEY_PREFIX", cls.key_prefix),
            host=get_env("REDIS_HOST", cls.host),
            port=get_int("REDIS_PORT", cls.port),
            db=get_int("REDIS_DB", cls.db),
            username=get_env("REDIS_USERNAME"),
            password=get_env("REDIS_PASSWORD"),
            ssl=get_bool("REDIS_SSL", cls.ssl),
            client_name=get_env("REDIS_CLIENT_NAME"),
            timeout_seconds=get_float("REDIS_TIMEOUT", cls.timeout_seconds),
            scan_count=get_int("SCAN_COUNT", cls.scan_count),
            atomic_save=get_bool("ATOMIC_SAVE", cls.atomic_save),
            max_messages=get_int("MAX_MESSAGES", cls.max_messages),
            log_level=get_env("LOG_LEVEL", cls.log_level),
        )

    def with_overrides(self, **kwargs: Any) -> "RedisMemoryConfig":
        """
        Create a new config with overrides.

        Args:
            **kwargs: Values to override

        Returns:
            New RedisMemoryConfig with overrides applied
        """
        return replace(self, **kwargs)

    def redacted(self) -> Dict[str, Any]:
        """Return the configuration as a dict that is safe to log."""
        values = asdict(self)
        if values["password"]:
            values["password"] = "***"
        return values
