"""
Utilitaires et constantes pour CineShelf.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from src.utils.constants import (
    CSV_MIME_TYPE,
    DEFAULT_COVER_URL,
    UNKNOWN_ACTOR,
    UNKNOWN_GENRE,
)
from src.utils.helpers import parse_leading_int, split_actors

__all__ = [
    "CSV_MIME_TYPE",
    "DEFAULT_COVER_URL",
    "UNKNOWN_ACTOR",
    "UNKNOWN_GENRE",
    "parse_leading_int",
    "split_actors",
]
