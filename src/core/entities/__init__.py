"""
Business entities representing core domain concepts.

Exports:
- Movie: A catalog entry
- MovieFormat: Owned format of an entry (Digital, DVD, Blu-ray)
"""

from src.core.entities.media import Movie, MovieFormat

__all__ = [
    "Movie",
    "MovieFormat",
]
