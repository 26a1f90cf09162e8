"""
Help command implementation.
"""

import logging

from command.base import CommandBase, CommandContext, CommandResponse

logger = logging.getLogger(__name__)


class HelpCommand(CommandBase):
    """Display usage and contact information."""

    @property
    def name(self) -> str:
        return "help"

    @property
    def usage(self) -> str:
        return "help"

    def validate(self, args: list) -> tuple[bool, str]:
        """Help command takes no arguments."""
        if args:
            return False, "The help command takes no arguments"
        return True, ""

    async def execute(self, context: CommandContext, args: list) -> CommandResponse:
        """Reply with the help text, with deployment info when configured."""
        version = ""
        environment = ""
        try:
            version = context.config.get("VERSION")
            environment = context.config.get("ENVIRONMENT")
        except Exception as e:
            logger.error(f"Something went wrong with fetching config: {e}")

        help_message = "\n".join([
            "*Hi there!*",
            "",
            "My name is Ossi (a.k.a Ossitron-2000) :robot_face:, and I'm here to record your Open Source Contributions. :gem:",
            "",
            "You can send me (Ossitron-2000) a *private message* which describes your contribution. "
            "Then I will ask, if you want to submit given contribution. "
            "If you decide to submit, I will store the contribution and notify my management channel about your contribution.",
            "",
            "When your contribution gets processed, I will notify you back.",
            "",
            "",
            "If you have questions about the process contact Valtteri Valovirta. If I'm broken contact Juho Friman.",
            "",
            "I have additional features under this slash command. My slash commands are all _ephemeral_ "
            "which means only you see the results. So feel free to shoot slash commands at any channel.",
            "",
            "`help` shows this help",
            "`list` lists your submitted contributions",
            "`rollback ROLLBACK_ID` deletes the contribution with given rollback id (shown by `list`)",
            "",
            "_Information about the policy_: https://intra.solita.fi/pages/viewpage.action?pageId=76514684",
            "_My source code_: https://github.com/solita/ossi-bot",
            f"_Deployment_: {version} {environment}"
        ])

        return CommandResponse(status_code=200, body=help_message)
