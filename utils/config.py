"""
Process configuration read from environment variables.
"""

import os
from collections.abc import Mapping
from typing import Any

from utils.errors import MissingConfigError

_MISSING = object()


class Config:
    """Read-only configuration with fail-fast key lookup."""

    def __init__(self, values: Mapping[str, str] | None = None):
        self._values = os.environ if values is None else values

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """
        Look up a configuration value.

        Args:
            key: Configuration key, e.g. SLACK_TOKEN
            default: Returned when the key is missing; when omitted a
                missing key raises

        Raises:
            MissingConfigError: If the key is missing or empty and no
                default was given
        """
        value = self._values.get(key)
        if value:
            return value
        if default is not _MISSING:
            return default
        raise MissingConfigError(key)


# Global instance
_config_instance: Config | None = None


def get_config() -> Config:
    """Get or create global Config instance backed by os.environ."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance
