from typing import Optional


class ConnectionResolutionError(Exception):
    """Base class for all connection resolution failures."""
    pass

class ConfigurationError(ConnectionResolutionError, ValueError):
    """Raised when a database config block is missing or invalid."""
    pass

class NotConfiguredError(ConfigurationError):
    """Raised when the legacy source has no database block at all."""
    pass

class PortParseError(ConfigurationError):
    """Raised when a string port is not a non-negative integer."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid database port: {value!r} is not a non-negative integer")

class FileReadError(ConnectionResolutionError):
    """Raised when a referenced certificate, key or CA file cannot be read."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Failed to read file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
