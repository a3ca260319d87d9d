"""FastAPI application exposing the player roster."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from roster import __version__
from roster.context import AppContext, create_context
from roster.core.errors import RosterError
from roster.db.session import create_tables
from roster.schemas import ErrorResponse, PlayerPatch, PlayerRecord
from roster.server.handlers import PlayerHandler

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

INVALID_BODY = "Invalid request body"
STORE_FAILURE = "Database error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup - create context
    ctx = create_context()
    app.state.ctx = ctx

    settings = ctx.settings
    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info(f"Roster server starting on {settings.host}:{settings.port}")
    logger.info(f"Database: {ctx.engine.url!r}")

    try:
        create_tables(ctx.engine)
    except SQLAlchemyError as e:
        logger.critical(f"Database unavailable at startup: {e}")
        ctx.dispose()
        raise
    logger.info("Database initialized")

    yield

    # Shutdown
    ctx.dispose()
    logger.info("Roster server shutting down")


app = FastAPI(
    title="Roster API",
    description="REST API for competitive-game player profiles",
    version=__version__,
    lifespan=lifespan,
)


def get_handler(request: Request) -> PlayerHandler:
    """Resolve the player handler for the running application."""
    ctx: AppContext = request.app.state.ctx
    return PlayerHandler(ctx)


def describe_errors(exc: RequestValidationError) -> list[dict]:
    """Summarize validation errors without echoing the rejected input."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    """Report missing or unparsable request bodies as client errors."""
    logger.warning(f"{request.method} {request.url.path}: {INVALID_BODY}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": INVALID_BODY, "detail": describe_errors(exc)},
    )


@app.exception_handler(SQLAlchemyError)
@app.exception_handler(RosterError)
async def store_failure_handler(request: Request, exc: Exception):
    """Fail the request without guessing at partial success."""
    logger.error(f"{request.method} {request.url.path}: store failure: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": STORE_FAILURE},
    )


PLAYER_RESPONSES = {
    200: {"model": PlayerRecord},
    404: {"model": ErrorResponse},
}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "roster"}


@app.get("/players", responses={200: {"model": list[PlayerRecord]}})
def get_all_players(handler: PlayerHandler = Depends(get_handler)):
    """List every player."""
    return handler.list_players()


@app.post(
    "/players",
    responses={200: {"model": PlayerRecord}, 400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def create_player(record: PlayerRecord, handler: PlayerHandler = Depends(get_handler)):
    """Add a player to the roster."""
    return handler.create_player(record)


@app.delete(
    "/players",
    responses={200: {"model": list[PlayerRecord]}, 500: {"model": ErrorResponse}},
)
def delete_all_players(handler: PlayerHandler = Depends(get_handler)):
    """Delete every player and return what was deleted."""
    return handler.delete_all_players()


@app.get("/players/{riotid}", responses=PLAYER_RESPONSES)
def get_player(riotid: str, handler: PlayerHandler = Depends(get_handler)):
    """Get a player by Riot ID."""
    return handler.get_player(riotid)


@app.put("/players/{riotid}", responses={**PLAYER_RESPONSES, 400: {"model": ErrorResponse}})
def update_player(
    riotid: str, patch: PlayerPatch, handler: PlayerHandler = Depends(get_handler)
):
    """Update the fields of a player present in the request body."""
    return handler.update_player(riotid, patch)


@app.delete("/players/{riotid}", responses={200: {"model": PlayerRecord | None}})
def delete_player(riotid: str, handler: PlayerHandler = Depends(get_handler)):
    """Delete a player and return it as it was, or null if it did not exist."""
    return handler.delete_player(riotid)
