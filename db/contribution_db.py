"""
SQLite database module for persisting and querying contributions.
"""

import logging
import time
import uuid

import aiosqlite
from pydantic import ValidationError

from utils.errors import ContributionDataError, ContributionNotFoundError, ContributionStoreError
from utils.types import Contribution, Size, Status

logger = logging.getLogger(__name__)

# Database path
DB_PATH = "ossi.db"

CREATION_STATUSES = (Status.INITIAL, Status.PENDING)
REVIEW_STATUSES = (Status.ACCEPTED, Status.DECLINED)

_COLUMNS = "id, sequence, timestamp, username, private_channel, size, status, text"


def _row_to_contribution(row: tuple) -> Contribution:
    """Convert a database row into a Contribution, rejecting invalid values."""
    try:
        return Contribution(
            id=row[0],
            sequence=row[1],
            timestamp=row[2],
            username=row[3],
            private_channel=row[4],
            size=row[5],
            status=row[6],
            text=row[7]
        )
    except ValidationError as e:
        logger.error(f"Invalid contribution row {row[0]}: {e}")
        raise ContributionDataError(f"Invalid contribution record {row[0]}") from e


class ContributionDB:
    """Database manager for contributions."""

    def __init__(self, db_path: str = DB_PATH):
        self.db_path = db_path
        self._initialized = False

    async def init(self) -> None:
        """Initialize database with required tables and indices."""
        if self._initialized:
            return

        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("""
                    CREATE TABLE IF NOT EXISTS contributions (
                        id TEXT PRIMARY KEY,
                        sequence TEXT NOT NULL,
                        timestamp INTEGER NOT NULL,
                        username TEXT NOT NULL,
                        private_channel TEXT NOT NULL,
                        size TEXT NOT NULL,
                        status TEXT NOT NULL,
                        text TEXT NOT NULL
                    )
                """)

                await db.execute("""
                    CREATE INDEX IF NOT EXISTS idx_username
                    ON contributions(username)
                """)

                await db.commit()
                self._initialized = True
                logger.info("Database initialized successfully")
        except aiosqlite.Error as e:
            logger.error(f"Failed to initialize database: {e}")
            raise ContributionStoreError("Failed to initialize database") from e

    async def save_contribution(
        self,
        username: str,
        private_channel: str,
        size: Size,
        text: str,
        status: Status = Status.INITIAL
    ) -> Contribution:
        """
        Store a new contribution.

        The store assigns the id, the per-user sequence and the timestamp.

        Args:
            username: Chat identity of the reporting user
            private_channel: Conversation used for follow-up notifications
            size: Contribution size category
            text: Free-form description
            status: INITIAL or PENDING

        Returns:
            The stored Contribution
        """
        status = Status(status)
        if status not in CREATION_STATUSES:
            raise ValueError(f"New contributions must be INITIAL or PENDING, got {status.value}")

        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    "SELECT COALESCE(MAX(CAST(sequence AS INTEGER)), 0) + 1 "
                    "FROM contributions WHERE username = ?",
                    (username,)
                )
                row = await cursor.fetchone()
                contribution = Contribution(
                    id=uuid.uuid4().hex,
                    sequence=str(row[0]),
                    timestamp=int(time.time() * 1000),
                    username=username,
                    private_channel=private_channel,
                    size=size,
                    status=status,
                    text=text
                )
                await db.execute(
                    f"INSERT INTO contributions ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                    (
                        contribution.id,
                        contribution.sequence,
                        contribution.timestamp,
                        contribution.username,
                        contribution.private_channel,
                        contribution.size.value,
                        contribution.status.value,
                        contribution.text
                    )
                )
                await db.commit()
        except aiosqlite.Error as e:
            logger.error(f"Failed to save contribution: {e}")
            raise ContributionStoreError("Failed to save contribution") from e

        logger.info(f"Stored contribution {contribution.rollback_id} for {username}")
        return contribution

    async def get_contributions(self, username: str) -> list[Contribution]:
        """Retrieve all contributions of a user, oldest first."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    f"SELECT {_COLUMNS} FROM contributions WHERE username = ? "
                    "ORDER BY timestamp ASC, CAST(sequence AS INTEGER) ASC",
                    (username,)
                )
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            logger.error(f"Failed to retrieve contributions for {username}: {e}")
            raise ContributionStoreError(f"Failed to retrieve contributions for {username}") from e

        return [_row_to_contribution(row) for row in rows]

    async def get_contribution(self, contribution_id: str) -> Contribution:
        """Retrieve a single contribution by id."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    f"SELECT {_COLUMNS} FROM contributions WHERE id = ?",
                    (contribution_id,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            logger.error(f"Failed to retrieve contribution {contribution_id}: {e}")
            raise ContributionStoreError(f"Failed to retrieve contribution {contribution_id}") from e

        if row is None:
            raise ContributionNotFoundError(f"No contribution with id {contribution_id}")
        return _row_to_contribution(row)

    async def delete_entry(self, contribution_id: str, sequence: str) -> None:
        """
        Permanently delete the contribution identified by id and sequence.

        Raises:
            ContributionNotFoundError: If no contribution matches
        """
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    "DELETE FROM contributions WHERE id = ? AND sequence = ?",
                    (contribution_id, sequence)
                )
                await db.commit()
                deleted = cursor.rowcount
        except aiosqlite.Error as e:
            logger.error(f"Failed to delete contribution {contribution_id}-{sequence}: {e}")
            raise ContributionStoreError(f"Failed to delete contribution {contribution_id}-{sequence}") from e

        if deleted == 0:
            raise ContributionNotFoundError(f"No contribution with id {contribution_id}-{sequence}")
        logger.info(f"Deleted contribution {contribution_id}-{sequence}")

    async def update_status(self, contribution_id: str, status: Status) -> Contribution:
        """Record the review outcome of a contribution."""
        status = Status(status)
        if status not in REVIEW_STATUSES:
            raise ValueError(f"Review status must be ACCEPTED or DECLINED, got {status.value}")

        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    "UPDATE contributions SET status = ? WHERE id = ?",
                    (status.value, contribution_id)
                )
                await db.commit()
                updated = cursor.rowcount
        except aiosqlite.Error as e:
            logger.error(f"Failed to update contribution {contribution_id}: {e}")
            raise ContributionStoreError(f"Failed to update contribution {contribution_id}") from e

        if updated == 0:
            raise ContributionNotFoundError(f"No contribution with id {contribution_id}")
        return await self.get_contribution(contribution_id)


# Global instance
_db_instance: ContributionDB | None = None


def get_contribution_db(db_path: str | None = None) -> ContributionDB:
    """Get or create global ContributionDB instance."""
    global _db_instance
    if _db_instance is None:
        _db_instance = ContributionDB(db_path or DB_PATH)
    return _db_instance

