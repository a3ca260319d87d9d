"""Repository layer for data access."""

from roster.db.repositories.player import PlayerRepository

__all__ = [
    "PlayerRepository",
]
