"""SQLAlchemy models for the player roster."""

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Player(Base):
    """A player profile, addressed externally by its Riot ID."""

    __tablename__ = "players"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # Entered as NAME-TAG, e.g. John-123
    riot_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    irl_name: Mapped[str] = mapped_column(String(100), default="")
    team: Mapped[str] = mapped_column(String(100), default="")
    rank: Mapped[str] = mapped_column(String(50), default="")
    role: Mapped[str] = mapped_column(String(50), default="")
    main: Mapped[str] = mapped_column(String(50), default="")

    acs: Mapped[float] = mapped_column(default=0.0)
    kdr: Mapped[float] = mapped_column(default=0.0)
    damage_per_round: Mapped[float] = mapped_column(default=0.0)
    hs: Mapped[float] = mapped_column(default=0.0)

    def to_dict(self) -> dict:
        """Convert player to its wire representation."""
        return {
            "riotid": self.riot_id,
            "irlname": self.irl_name,
            "team": self.team,
            "rank": self.rank,
            "role": self.role,
            "main": self.main,
            "acs": self.acs,
            "kdr": self.kdr,
            "dpr": self.damage_per_round,
            "hs": self.hs,
        }

    def __repr__(self) -> str:
        return f"Player(riot_id={self.riot_id!r}, team={self.team!r})"
