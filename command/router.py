"""
Command parser for slash command text.
"""

DEFAULT_COMMAND = "help"


class CommandParser:
    """Parse slash command text to extract command and arguments."""

    @staticmethod
    def parse(text: str | None) -> tuple[str, list[str]]:
        """
        Parse the text typed after the slash command.

        Args:
            text: Text following the slash command, may be empty

        Returns:
            Tuple of (command_name, args_list)

        Example:
            "rollback abc123-1" -> ("rollback", ["abc123-1"])
            "" -> ("help", [])
        """
        command_text = (text or "").strip()

        if not command_text:
            return DEFAULT_COMMAND, []

        parts = command_text.split(maxsplit=1)
        command_name = parts[0].lower()

        args = []
        if len(parts) > 1:
            args = parts[1].split()

        return command_name, args
