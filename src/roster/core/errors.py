"""Exceptions raised by the data access layer."""


class RosterError(Exception):
    """Base class for roster errors."""


class PlayerExistsError(RosterError):
    """A player with the same Riot ID is already stored."""

    def __init__(self, riot_id: str):
        super().__init__(f"Player already exists: {riot_id}")
        self.riot_id = riot_id


class StoreError(RosterError):
    """The underlying store failed to complete an operation."""
