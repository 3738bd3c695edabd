from typing import Optional

from fastapi import Depends

from app.clients import PokeAPIClient, TranslationClient
from app.services import PokemonFetcher, PokemonService, Translator

# One pooled HTTP client per upstream, shared by every request
_poke_client: Optional[PokeAPIClient] = None
_translation_client: Optional[TranslationClient] = None

def get_poke_client() -> PokemonFetcher:
    """Production fetcher; tests swap it through `app.dependency_overrides`."""
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

def get_translation_client() -> Translator:
    """Production translator; tests swap it through `app.dependency_overrides`."""
    global _translation_client
    if _translation_client is None:
        _translation_client = TranslationClient()
    return _translation_client

def get_pokemon_service(
    poke_client: PokemonFetcher = Depends(get_poke_client),
    translation_client: Translator = Depends(get_translation_client),
) -> PokemonService:
    return PokemonService(poke_client=poke_client, translation_client=translation_client)

async def close_clients():
    """Closes whichever clients were created (call on app shutdown)."""
    global _poke_client, _translation_client
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None
    if _translation_client is not None:
        await _translation_client.close()
        _translation_client = None
