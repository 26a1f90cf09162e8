"""
Error types raised by the contribution bot.
"""


class OssiError(Exception):
    """Base class for all application errors."""


class MissingConfigError(OssiError, KeyError):
    """Raised when a required configuration key is not set."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Missing configuration key: {self.key}"


class ContributionStoreError(OssiError):
    """Raised when the contribution store cannot complete an operation."""


class ContributionNotFoundError(ContributionStoreError):
    """Raised when no contribution matches the requested identity."""


class ContributionDataError(ContributionStoreError):
    """Raised when a stored row is not a valid contribution."""


class InvalidRollbackIdError(OssiError, ValueError):
    """Raised when a rollback id cannot be decoded into id and sequence."""

    def __init__(self, rollback_id: str, reason: str):
        super().__init__(f"Invalid rollback id '{rollback_id}': {reason}")
        self.rollback_id = rollback_id
        self.reason = reason


class UnknownCommandError(OssiError, KeyError):
    """Raised when the slash command text names no registered command."""

    def __init__(self, command_name: str):
        super().__init__(command_name)
        self.command_name = command_name

    def __str__(self) -> str:
        return f"Unknown command: {self.command_name}"


class ChatDeliveryError(OssiError):
    """Raised when a message could not be posted to the chat platform."""
