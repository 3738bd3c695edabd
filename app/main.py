import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.services.pokemon_service import PokemonService
from app.dependencies import get_pokemon_service, close_clients
from app.models import HttpError
from app.responses import send, send_error

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    logger.info("Shakespearean Pokedex API started")
    yield
    await close_clients()
    logger.info("Shakespearean Pokedex API shutting down")


app = FastAPI(
    title="Shakespearean Pokedex API",
    description="Describes a Pokemon in the words of Shakespeare.",
    lifespan=lifespan,
)


# Routing errors (unknown paths, wrong methods) use the same {message, status} body
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    logger.warning(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.detail}")
    response = send_error(HttpError(message=str(exc.detail), status=exc.status_code))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


# The `path` converter keeps extra segments so they can be rejected with a 400
@app.get(
    "/pokemon/{name:path}",
    summary="Returns a Pokemon's description translated into Shakespearean English",
)
async def get_shakespearean_pokemon(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
) -> Response:
    """Fetches the first English description for a Pokemon and translates it."""
    outcome = await service.describe(name)
    if isinstance(outcome, HttpError):
        return send_error(outcome)
    return send(outcome)
