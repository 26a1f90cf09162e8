"""
Shared types, configuration and chat client for the contribution bot.
"""

from utils.types import (
    Size,
    Status,
    Contribution,
    ParsedRollbackId,
    RollbackIdError,
    encode_rollback_id,
    parse_rollback_id
)
from utils.config import Config, get_config
from utils.slack import SlackClient, notify_contributor, notify_management

__all__ = [
    'Size',
    'Status',
    'Contribution',
    'ParsedRollbackId',
    'RollbackIdError',
    'encode_rollback_id',
    'parse_rollback_id',
    'Config',
    'get_config',
    'SlackClient',
    'notify_contributor',
    'notify_management'
]
