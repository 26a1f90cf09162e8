"""
Data types for contribution records and rollback identifiers.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Size(str, Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    NO_COMPENSATION = "NO_COMPENSATION"
    LARGE = "LARGE"
    COMPETENCE_DEVELOPMENT = "COMPETENCE_DEVELOPMENT"


class Status(str, Enum):
    INITIAL = "INITIAL"
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"


class Contribution(BaseModel):
    """One reported act of open source work."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    sequence: str
    timestamp: int  # epoch milliseconds
    username: str
    private_channel: str = Field(alias="privateChannel")
    size: Size
    status: Status
    text: str

    @property
    def rollback_id(self) -> str:
        """Human-typable deletion key for this contribution."""
        return encode_rollback_id(self.id, self.sequence)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


@dataclass(frozen=True)
class ParsedRollbackId:
    """Successfully decoded rollback identifier."""
    id: str
    sequence: str


@dataclass(frozen=True)
class RollbackIdError:
    """Rollback identifier that could not be decoded."""
    value: str
    reason: str


def encode_rollback_id(contribution_id: str, sequence: str) -> str:
    return f"{contribution_id}-{sequence}"


def parse_rollback_id(value: str) -> ParsedRollbackId | RollbackIdError:
    """
    Decode a rollback identifier of the form "{id}-{sequence}".

    Only the first hyphen is a split point, so "a-1-2" decodes to
    id "a" and sequence "1-2".

    Args:
        value: Rollback identifier typed by the user

    Returns:
        ParsedRollbackId on success, RollbackIdError otherwise
    """
    contribution_id, separator, sequence = value.partition("-")
    if not separator:
        return RollbackIdError(value=value, reason="missing '-' between id and sequence")
    return ParsedRollbackId(id=contribution_id, sequence=sequence)
