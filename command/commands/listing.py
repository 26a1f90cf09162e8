"""
List command - show the invoking user's contributions.
"""

import logging
from typing import Any

from command.base import CommandBase, CommandContext, CommandResponse
from utils.types import Contribution, Status

logger = logging.getLogger(__name__)

EMPTY_LISTING_TEXT = "You do not have any contributions. Submit one by sending a private message to Ossitron-2000!"
LISTING_TEXT = "Here is the listing of your open source contribution submissions"

# Statuses without an entry render in the chat platform's default color
STATUS_COLORS: dict[Status, str] = {
    Status.PENDING: "#ffff00",
    Status.ACCEPTED: "#36a64f",
    Status.DECLINED: "#ff0000",
}


def status_color(status: Status) -> str | None:
    return STATUS_COLORS.get(status)


def contribution_attachment(contribution: Contribution) -> dict[str, Any]:
    """Render one contribution as a message attachment."""
    attachment: dict[str, Any] = {"fallback": "fallback"}
    color = status_color(contribution.status)
    if color is not None:
        attachment["color"] = color
    attachment["text"] = contribution.text
    attachment["fields"] = [
        {"title": "Size", "value": contribution.size.value, "short": True},
        {"title": "Status", "value": contribution.status.value, "short": True},
        {"title": "Rollback ID", "value": contribution.rollback_id, "short": True}
    ]
    return attachment


class ListCommand(CommandBase):
    """Command to list the contributions submitted by the invoking user."""

    @property
    def name(self) -> str:
        return "list"

    @property
    def usage(self) -> str:
        return "list"

    def validate(self, args: list[str]) -> tuple[bool, str]:
        if args:
            return False, "The list command takes no arguments"
        return True, ""

    async def execute(self, context: CommandContext, args: list[str]) -> CommandResponse:
        """Fetch the user's contributions; store errors propagate."""
        contributions = await context.store.get_contributions(context.user_id)
        logger.info(f"Listing {len(contributions)} contributions for {context.user_id}")

        if not contributions:
            return CommandResponse(status_code=200, body=EMPTY_LISTING_TEXT)

        return CommandResponse.message(
            LISTING_TEXT,
            [contribution_attachment(item) for item in contributions]
        )
