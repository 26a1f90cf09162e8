"""
Command registry resolving slash command names to command classes.
"""

from typing import Type

from command.base import CommandBase
from utils.errors import UnknownCommandError


class CommandFactory:
    """Registry of the commands available under the slash command."""

    _commands: dict[str, Type[CommandBase]] = {}

    @classmethod
    def register(cls, command_class: Type[CommandBase]) -> Type[CommandBase]:
        """Register a command class under its name."""
        cls._commands[command_class().name] = command_class
        return command_class

    @classmethod
    def create(cls, command_name: str) -> CommandBase:
        """
        Create a command instance by name.

        Raises:
            UnknownCommandError: If no command has that name
        """
        try:
            command_class = cls._commands[command_name]
        except KeyError:
            raise UnknownCommandError(command_name) from None
        return command_class()

    @classmethod
    def names(cls) -> list[str]:
        return sorted(cls._commands)


def register_builtin_commands():
    """Register built-in commands with lazy imports to avoid circular imports."""
    from command.commands.help import HelpCommand
    from command.commands.listing import ListCommand
    from command.commands.rollback import RollbackCommand

    for command_class in (HelpCommand, ListCommand, RollbackCommand):
        CommandFactory.register(command_class)
