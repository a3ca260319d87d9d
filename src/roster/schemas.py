"""HTTP request and response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PlayerRecord(BaseModel):
    """A full player profile as sent to and returned by the API."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    riot_id: str = Field(alias="riotid", min_length=1, description="Riot ID in NAME-TAG form")
    irl_name: str = Field(default="", alias="irlname", description="Real name")
    team: str = Field(default="", description="Team name")
    rank: str = Field(default="", description="Competitive rank")
    role: str = Field(default="", description="Team role")
    main: str = Field(default="", description="Most played agent")
    acs: float = Field(default=0.0, description="Average combat score")
    kdr: float = Field(default=0.0, description="Kill/death ratio")
    damage_per_round: float = Field(default=0.0, alias="dpr", description="Damage per round")
    hs: float = Field(default=0.0, description="Headshot percentage")


class PlayerPatch(BaseModel):
    """A partial player profile for PUT requests.

    Fields the client leaves out are tracked by pydantic (model_fields_set)
    and are never merged. The Riot ID cannot be changed and is ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)

    irl_name: str = Field(default="", alias="irlname")
    team: str = ""
    rank: str = ""
    role: str = ""
    main: str = ""
    acs: float = 0.0
    kdr: float = 0.0
    damage_per_round: float = Field(default=0.0, alias="dpr")
    hs: float = 0.0


class ErrorResponse(BaseModel):
    """Body returned with every non-2xx response."""

    error: str = Field(description="Human readable error message")
