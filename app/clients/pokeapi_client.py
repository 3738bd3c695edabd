import os
import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.clients.errors import FetchError
from app.models import Pokemon, SpeciesPayload

logger = logging.getLogger(__name__)

ENGLISH = "en"

def is_utf8_json(content_type: str) -> bool:
    """True for `application/json`, optionally with a utf-8 charset."""
    media_type, _, params = content_type.partition(";")
    if media_type.strip().lower() != "application/json":
        return False
    for param in params.split(";"):
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset":
            return value.strip().strip('"').lower() == "utf-8"
    return True

class PokeAPIClient:
    BASE_URL = "https://pokeapi.co/api/v2/pokemon-species"

    def __init__(self, base_url: Optional[str] = None):
        # Use environment variable if base_url not provided
        if base_url is None:
            base_url = os.getenv("POKEAPI_BASE_URL", self.BASE_URL)
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient()

    async def get(self, name: str) -> Optional[Pokemon]:
        """
        Looks up a Pokemon and returns it with its first English description.
        Returns None when PokeAPI does not know the name or has no English text.
        """
        segment = quote(name, safe="")
        # Dot segments would be resolved away by httpx, leaving the species path
        if segment in (".", ".."):
            segment = segment.replace(".", "%2E")
        url = f"{self.base_url}/{segment}"
        logger.info(f"Fetching Pokemon species: {name}")

        try:
            response = await self.client.get(url)
        except httpx.RequestError as e:
            logger.error(f"PokeAPI network error: {str(e)}")
            raise FetchError(f"PokeAPI network error: {str(e)}") from e

        # Unknown names come back as plain text, not JSON
        if not is_utf8_json(response.headers.get("content-type", "")):
            logger.info(f"PokeAPI has no species named '{name}'")
            return None

        try:
            payload = SpeciesPayload.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"PokeAPI response parsing error for '{name}'.")
            raise FetchError(f"PokeAPI returned an unexpected response format: {e.error_count()} error(s)") from e

        english_description = next(
            (entry.flavor_text for entry in payload.flavor_text_entries if entry.language.name == ENGLISH),
            None,
        )
        if english_description is None:
            logger.info(f"No English description for '{name}'")
            return None

        # The requested name is kept, not the one PokeAPI reports
        return Pokemon(name=name, description=english_description)

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
