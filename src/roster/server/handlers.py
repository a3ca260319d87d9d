"""Request handlers for player routes - testable without an HTTP server."""

import logging
from collections.abc import Iterable

from fastapi import status
from fastapi.responses import JSONResponse

from roster.context import AppContext
from roster.core.result import ErrorKind, Result
from roster.db.models import Player
from roster.schemas import PlayerPatch, PlayerRecord

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def serialize_player(player: Player) -> dict:
    """Convert a stored player to its wire representation."""
    return player.to_dict()


def serialize_players(players: Iterable[Player]) -> list[dict]:
    return [serialize_player(p) for p in players]


def error_response(result: Result) -> JSONResponse:
    """Build the JSON error response for a failed result."""
    status_code = ERROR_STATUS.get(result.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(status_code=status_code, content=result.to_dict())


class PlayerHandler:
    """Maps each player route onto exactly one service call.

    Results are serialized inside the session so the response never reports
    changes that failed to commit.
    """

    def __init__(self, ctx: AppContext):
        self.ctx = ctx

    def list_players(self) -> JSONResponse:
        with self.ctx.players() as service:
            players = service.list_players().unwrap()
            return JSONResponse(content=serialize_players(players))

    def get_player(self, riot_id: str) -> JSONResponse:
        with self.ctx.players() as service:
            result = service.get_player(riot_id)
            if result.is_err:
                return error_response(result)
            return JSONResponse(content=serialize_player(result.unwrap()))

    def create_player(self, record: PlayerRecord) -> JSONResponse:
        logger.info(f"[{record.riot_id}] Create request")
        with self.ctx.players() as service:
            result = service.create_player(record)
            if result.is_err:
                return error_response(result)
            return JSONResponse(content=serialize_player(result.unwrap()))

    def update_player(self, riot_id: str, patch: PlayerPatch) -> JSONResponse:
        logger.info(f"[{riot_id}] Update request: fields={sorted(patch.model_fields_set)}")
        with self.ctx.players() as service:
            result = service.update_player(riot_id, patch)
            if result.is_err:
                return error_response(result)
            return JSONResponse(content=serialize_player(result.unwrap()))

    def delete_player(self, riot_id: str) -> JSONResponse:
        with self.ctx.players() as service:
            player = service.delete_player(riot_id).unwrap()
            body = serialize_player(player) if player is not None else None
            return JSONResponse(content=body)

    def delete_all_players(self) -> JSONResponse:
        logger.info("Delete-all request")
        with self.ctx.players() as service:
            result = service.delete_all_players()
            if result.is_err:
                return error_response(result)
            return JSONResponse(content=serialize_players(result.unwrap()))
