"""
Slash command system for the contribution bot.
Provides base command class, factory, and command implementations.
"""

from command.base import CommandBase, CommandContext, CommandResponse, ContributionStore
from command.factory import CommandFactory
from command.router import CommandParser

__all__ = [
    'CommandBase',
    'CommandContext',
    'CommandResponse',
    'ContributionStore',
    'CommandFactory',
    'CommandParser'
]
