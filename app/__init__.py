"""Shakespearean Pokedex API."""
