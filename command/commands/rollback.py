"""
Rollback command - permanently delete one of the user's contributions.
"""

import logging

from command.base import CommandBase, CommandContext, CommandResponse
from utils.errors import InvalidRollbackIdError
from utils.types import RollbackIdError, parse_rollback_id

logger = logging.getLogger(__name__)

MISSING_ID_TEXT = "Pass rollback id to delete entry"


class RollbackCommand(CommandBase):
    """Delete a contribution by its rollback id."""

    @property
    def name(self) -> str:
        return "rollback"

    @property
    def usage(self) -> str:
        return "rollback ROLLBACK_ID"

    def validate(self, args: list[str]) -> tuple[bool, str]:
        """A missing id is answered by execute, extra words are not."""
        if len(args) > 1:
            return False, f"Invalid format. Usage: {self.usage}"
        return True, ""

    async def execute(self, context: CommandContext, args: list[str]) -> CommandResponse:
        return await self.rollback(context, args[0] if args else None)

    async def rollback(self, context: CommandContext, rollback_id: str | None) -> CommandResponse:
        """
        Delete the contribution identified by rollback_id.

        Args:
            context: Command execution context
            rollback_id: "{id}-{sequence}", split on the first hyphen

        Raises:
            InvalidRollbackIdError: If rollback_id contains no hyphen
            ContributionNotFoundError: If no contribution matches
        """
        if not rollback_id:
            return CommandResponse.ephemeral(MISSING_ID_TEXT)

        parsed = parse_rollback_id(rollback_id)
        if isinstance(parsed, RollbackIdError):
            raise InvalidRollbackIdError(parsed.value, parsed.reason)

        await context.store.delete_entry(parsed.id, parsed.sequence)
        logger.info(f"User {context.user_id} rolled back contribution {rollback_id}")

        return CommandResponse.ephemeral(f"OK, I deleted your contribution with ID: {rollback_id}")
