"""
Slack Web API client for posting messages to users and channels.
"""

import logging
from typing import Any

import httpx

from utils.config import Config
from utils.errors import ChatDeliveryError
from utils.types import Contribution, Status

logger = logging.getLogger(__name__)

POST_MESSAGE_URL = "https://slack.com/api/chat.postMessage"


class SlackClient:
    """Async client for chat.postMessage."""

    def __init__(
        self,
        config: Config,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        """
        Initialize Slack client.

        Args:
            config: Configuration holding SLACK_TOKEN
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.config = config
        self.timeout = timeout
        self.transport = transport

    async def post_message(
        self,
        channel: str,
        text: str,
        attachments: list[dict[str, Any]] | None = None
    ) -> dict[str, int]:
        """
        Post a message to a channel.

        The response body is not inspected; only completion of the
        HTTP call counts as delivery.

        Raises:
            MissingConfigError: If SLACK_TOKEN is not configured
            ChatDeliveryError: If the request fails or returns an error status
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.get('SLACK_TOKEN')}"
        }
        payload = {
            "attachments": attachments or [],
            "channel": channel,
            "text": text
        }

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.post(POST_MESSAGE_URL, json=payload, headers=headers)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to post message to {channel}: {e}")
            raise ChatDeliveryError(f"Failed to post message to {channel}") from e

        return {"statusCode": 200}


_REVIEW_MESSAGES = {
    Status.ACCEPTED: "Your contribution was accepted, thank you! :tada:",
    Status.DECLINED: "Your contribution was declined.",
}


def _summary_attachment(contribution: Contribution) -> dict[str, Any]:
    return {
        "fallback": "fallback",
        "text": contribution.text,
        "fields": [
            {"title": "Size", "value": contribution.size.value, "short": True},
            {"title": "Status", "value": contribution.status.value, "short": True}
        ]
    }


async def notify_contributor(client: SlackClient, contribution: Contribution) -> dict[str, int]:
    """Tell the contributor about the review outcome in their private channel."""
    text = _REVIEW_MESSAGES.get(contribution.status, f"Your contribution is now {contribution.status.value}.")
    return await client.post_message(contribution.private_channel, text, [_summary_attachment(contribution)])


async def notify_management(client: SlackClient, contribution: Contribution, channel: str) -> dict[str, int]:
    """Announce a new submission in the management channel."""
    text = f"<@{contribution.username}> submitted a new contribution (rollback id {contribution.rollback_id})"
    return await client.post_message(channel, text, [_summary_attachment(contribution)])
