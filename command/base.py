"""
Base class and data structures for command system.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol

from utils.config import Config
from utils.types import Contribution


class ContributionStore(Protocol):
    """Store operations the commands depend on."""

    async def get_contributions(self, username: str) -> list[Contribution]: ...

    async def delete_entry(self, contribution_id: str, sequence: str) -> None: ...


@dataclass
class CommandContext:
    """Context passed to commands during execution."""
    user_id: str
    config: Config
    store: ContributionStore


@dataclass
class CommandResponse:
    """Response returned by command execution."""
    status_code: int
    body: str

    @classmethod
    def ephemeral(cls, text: str, status_code: int = 200) -> "CommandResponse":
        """Reply visible only to the invoking user."""
        return cls(
            status_code=status_code,
            body=json.dumps({"response_type": "ephemeral", "text": text})
        )

    @classmethod
    def message(cls, text: str, attachments: list[dict[str, Any]]) -> "CommandResponse":
        return cls(
            status_code=200,
            body=json.dumps({"text": text, "attachments": attachments})
        )

    @property
    def is_json(self) -> bool:
        return self.body.startswith("{")

    def to_payload(self) -> dict[str, Any]:
        return {"statusCode": self.status_code, "body": self.body}


class CommandBase(ABC):
    """Abstract base class for all commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name as typed after the slash command."""
        pass

    @property
    @abstractmethod
    def usage(self) -> str:
        """Command usage format."""
        pass

    @abstractmethod
    def validate(self, args: list[str]) -> tuple[bool, str]:
        """
        Validate command arguments.

        Returns:
            Tuple of (is_valid, error_message)
        """
        pass

    @abstractmethod
    async def execute(self, context: CommandContext, args: list[str]) -> CommandResponse:
        """
        Execute the command.

        Args:
            context: Command execution context
            args: Parsed arguments

        Returns:
            CommandResponse with execution result
        """
        pass
