"""Player service for business logic."""

import logging

from sqlalchemy.orm import Session

from roster.core.errors import PlayerExistsError, StoreError
from roster.core.merge import MergePolicy
from roster.core.result import ErrorKind, Result
from roster.db.models import Player
from roster.db.repositories import PlayerRepository
from roster.schemas import PlayerPatch, PlayerRecord

logger = logging.getLogger(__name__)

PLAYER_NOT_FOUND = "Player not found"
DELETION_FAILED = "Failed to delete players"


class PlayerService:
    """Roster operations, one per HTTP route."""

    def __init__(self, session: Session, merge_policy: MergePolicy = MergePolicy.PRESENCE):
        self.session = session
        self.player_repo = PlayerRepository(session, merge_policy=merge_policy)

    def list_players(self) -> Result[list[Player]]:
        """Get every player."""
        return Result.ok(self.player_repo.list_all())

    def get_player(self, riot_id: str) -> Result[Player]:
        """Get a player by Riot ID."""
        player = self.player_repo.find_by_key(riot_id)
        if player is None:
            logger.warning(f"[{riot_id}] Player not found")
            return Result.err(PLAYER_NOT_FOUND, ErrorKind.NOT_FOUND)
        return Result.ok(player)

    def create_player(self, record: PlayerRecord) -> Result[Player]:
        """Store a new player."""
        try:
            player = self.player_repo.insert(Player(**record.model_dump()))
        except PlayerExistsError as e:
            logger.warning(f"[{record.riot_id}] Rejected duplicate player")
            return Result.err(str(e), ErrorKind.CONFLICT)
        logger.info(f"[{player.riot_id}] Player created")
        return Result.ok(player)

    def update_player(self, riot_id: str, patch: PlayerPatch) -> Result[Player]:
        """Merge a partial profile into an existing player."""
        player = self.player_repo.update_by_key(riot_id, patch)
        if player is None:
            logger.warning(f"[{riot_id}] Player not found for update")
            return Result.err(PLAYER_NOT_FOUND, ErrorKind.NOT_FOUND)
        logger.info(f"[{riot_id}] Player updated")
        return Result.ok(player)

    def delete_player(self, riot_id: str) -> Result[Player | None]:
        """Delete a player, returning it as it was.

        Deleting a missing player succeeds with None so that repeated
        deletes are harmless.
        """
        player = self.player_repo.delete_by_key(riot_id)
        if player is None:
            logger.info(f"[{riot_id}] Nothing to delete")
            return Result.ok(None)
        logger.info(f"[{riot_id}] Player deleted")
        return Result.ok(player)

    def delete_all_players(self) -> Result[list[Player]]:
        """Delete every player, returning the deleted records."""
        try:
            players = self.player_repo.delete_all()
        except StoreError as e:
            return Result.err(str(e) or DELETION_FAILED, ErrorKind.STORE_FAILURE)
        logger.info(f"Deleted all players ({len(players)} records)")
        return Result.ok(players)
