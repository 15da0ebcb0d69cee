"""
Catalog entities.

Entities representing the movies of the personal catalog with the
metadata the user curates (or imports from a spreadsheet export).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class MovieFormat(str, Enum):
    """Physical or digital format of a catalog entry."""

    DIGITAL = "Digital"
    DVD = "DVD"
    BLU_RAY = "Blu-ray"

    @classmethod
    def from_label(cls, label: str) -> Optional["MovieFormat"]:
        """
        Resolve an exact, case-sensitive label to a format.

        Returns None for unknown labels ("dvd", "VHS", ...).
        """
        for member in cls:
            if member.value == label:
                return member
        return None


@dataclass
class Movie:
    """
    Movie entry of the catalog.

    Attributes:
        id: Internal ID, assigned by the repository on insert (None before)
        name: Title of the movie
        year: Release year
        director: Director name (may be empty)
        actors: Main actors, in credit order
        genre: Single genre label
        format: Owned format (Digital, DVD, Blu-ray)
        cover_url: URL of the cover image
    """

    id: Optional[str] = None
    name: str = ""
    year: int = 0
    director: str = ""
    actors: tuple[str, ...] = field(default_factory=tuple)
    genre: str = ""
    format: MovieFormat = MovieFormat.DIGITAL
    cover_url: str = ""

    @property
    def decade(self) -> str:
        """Decade label used by the catalog filters (ex: "1990s")."""
        return f"{(self.year // 10) * 10}s"
