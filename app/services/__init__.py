"""Service layer composing the external API clients."""
from .pokemon_service import PokemonFetcher, PokemonService, Translator, parse_pokemon_name

__all__ = [
    'PokemonService',
    'PokemonFetcher',
    'Translator',
    'parse_pokemon_name'
]
