"""Player repository for data access."""

import logging

from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from roster.core.errors import PlayerExistsError, StoreError
from roster.core.merge import MergePolicy, merge_into
from roster.db.models import Player

logger = logging.getLogger(__name__)


class PlayerRepository:
    """Pure data access for Player entities, keyed by Riot ID."""

    def __init__(self, session: Session, merge_policy: MergePolicy = MergePolicy.PRESENCE):
        self.session = session
        self.merge_policy = merge_policy

    def list_all(self) -> list[Player]:
        """Get every stored player in insertion order."""
        result = self.session.execute(select(Player).order_by(Player.id))
        return list(result.scalars().all())

    def find_by_key(self, riot_id: str) -> Player | None:
        """Get a player by Riot ID, or None if there is no match."""
        if not riot_id:
            return None
        result = self.session.execute(select(Player).where(Player.riot_id == riot_id))
        return result.scalar_one_or_none()

    def insert(self, player: Player) -> Player:
        """Persist a new player as given.

        Raises:
            PlayerExistsError: If the Riot ID is already stored.
            StoreError: If the store rejects the row for any other reason.
        """
        if self.find_by_key(player.riot_id) is not None:
            raise PlayerExistsError(player.riot_id)

        self.session.add(player)
        try:
            self.session.flush()
        except IntegrityError as e:
            self.session.rollback()
            if self.find_by_key(player.riot_id) is not None:
                # Lost a race with a concurrent insert of the same key
                raise PlayerExistsError(player.riot_id) from e
            logger.error(f"[{player.riot_id}] Insert rejected by the store: {e}")
            raise StoreError("Failed to store player") from e
        return player

    def delete_by_key(self, riot_id: str) -> Player | None:
        """Delete a player and return it as it was before deletion.

        Deleting a missing key is a no-op that returns None.
        """
        player = self.find_by_key(riot_id)
        if player is None:
            return None
        self.session.delete(player)
        self.session.flush()
        return player

    def delete_all(self) -> list[Player]:
        """Delete every player and return the pre-deletion snapshot.

        Snapshot and delete run in the session's current transaction.

        Raises:
            StoreError: If the batch delete fails. The snapshot is discarded.
        """
        snapshot = self.list_all()
        try:
            self.session.execute(delete(Player))
            self.session.flush()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Batch delete of {len(snapshot)} players failed: {e}")
            raise StoreError("Failed to delete players") from e
        return snapshot

    def update_by_key(self, riot_id: str, patch: BaseModel) -> Player | None:
        """Merge a partial record into the stored player.

        Returns the merged player, or None without touching the store when
        the key is missing.
        """
        player = self.find_by_key(riot_id)
        if player is None:
            return None

        changed = merge_into(player, patch, self.merge_policy)
        if changed:
            self.session.flush()
        logger.debug(f"[{riot_id}] Updated fields: {changed}")
        return player
