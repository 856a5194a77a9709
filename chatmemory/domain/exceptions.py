"""Domain-specific exceptions."""


class ChatMemoryError(Exception):
    """Base exception for all chat memory errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgument(ChatMemoryError, ValueError):
    """Raised when a caller passes a blank id, a missing message list, or a null message."""

    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message, details={"argument": argument})
        self.argument = argument


class SerializationError(ChatMemoryError):
    """Raised when a message cannot be encoded to or decoded from its stored form."""


class StoreCommunicationError(ChatMemoryError):
    """Raised when the backing key-value store fails a command."""

    def __init__(self, message: str, command: str | None = None):
        super().__init__(message, details={"command": command})
        self.command = command


class StoreClosedError(ChatMemoryError):
    """Raised when a repository is used after it has been closed."""

    def __init__(self, message: str = "Repository has been closed"):
        super().__init__(message)


class ConfigurationError(ChatMemoryError, ValueError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str, setting: str | None = None):
        super().__init__(message, details={"setting": setting})
        self.setting = setting
