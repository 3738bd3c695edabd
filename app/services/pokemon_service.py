import logging
from typing import Optional, Protocol

from app.clients.errors import FetchError, TranslationError
from app.models import HttpError, Pokemon, PokemonResponse

logger = logging.getLogger(__name__)

DOT_SEGMENTS = (".", "..")

INVALID_REQUEST = HttpError(message="Invalid request", status=400)
NOT_FOUND = HttpError(message="Not found", status=404)


class PokemonFetcher(Protocol):
    async def get(self, name: str) -> Optional[Pokemon]: ...


class Translator(Protocol):
    async def translate(self, text: str) -> str: ...


def parse_pokemon_name(path: str) -> str | HttpError:
    """Validates the path segment after `/pokemon/`. Only a single, non-empty segment that is not `.` or `..` is accepted."""
    if not path or "/" in path or path in DOT_SEGMENTS:
        return INVALID_REQUEST
    return path


class PokemonService:
    # Service requires both capabilities via Dependency Injection
    def __init__(self, poke_client: PokemonFetcher, translation_client: Translator):
        self._poke_client = poke_client
        self._translation_client = translation_client

    async def describe(self, path: str) -> PokemonResponse | HttpError:
        """
        Runs the request pipeline: validate -> fetch -> translate.
        Every failure short-circuits into an HttpError value carrying its status.
        """
        name = parse_pokemon_name(path)
        if isinstance(name, HttpError):
            logger.warning(f"Rejected invalid Pokemon path: {path!r}")
            return name

        try:
            pokemon = await self._poke_client.get(name)
        except FetchError as e:
            return HttpError(message=f"Failed to fetch Pokemon - {e.detail}", status=500)
        if pokemon is None:
            logger.warning(f"Pokemon not found: {name}")
            return NOT_FOUND

        # Translation depends on the fetched description, so it must come second
        try:
            translated = await self._translation_client.translate(pokemon.description)
        except TranslationError as e:
            return HttpError(message=f"Failed to translate - {e.detail}", status=500)
        if not translated:
            logger.warning(f"Empty translation for Pokemon: {name}")
            return NOT_FOUND

        return PokemonResponse(name=pokemon.name, description=translated)
