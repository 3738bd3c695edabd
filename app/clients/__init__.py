"""Client modules for external API communication."""
from .errors import APIClientError, FetchError, TranslationError
from .pokeapi_client import PokeAPIClient
from .translation_client import TranslationClient

__all__ = [
    'PokeAPIClient',
    'TranslationClient',
    'APIClientError',
    'FetchError',
    'TranslationError'
]
