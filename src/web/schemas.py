"""
Schémas Pydantic de l'API JSON.

Convertissent les entités du domaine (dataclass) en représentations
sérialisables, et valident les corps de requête.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..core.entities.media import Movie, MovieFormat


class MovieIn(BaseModel):
    """Corps de requête pour l'ajout ou la modification d'un film."""

    name: str = ""
    year: int = 0
    director: str = ""
    actors: list[str] = Field(default_factory=list)
    genre: str = ""
    format: MovieFormat = MovieFormat.DIGITAL
    cover_url: str = ""

    def to_entity(self) -> Movie:
        return Movie(
            name=self.name,
            year=self.year,
            director=self.director,
            actors=tuple(self.actors),
            genre=self.genre,
            format=self.format,
            cover_url=self.cover_url,
        )


class MovieOut(MovieIn):
    """Représentation d'un film du catalogue."""

    id: Optional[str] = None

    @classmethod
    def from_entity(cls, movie: Movie) -> "MovieOut":
        return cls(
            id=movie.id,
            name=movie.name,
            year=movie.year,
            director=movie.director,
            actors=list(movie.actors),
            genre=movie.genre,
            format=movie.format,
            cover_url=movie.cover_url,
        )


class FacetsOut(BaseModel):
    """Valeurs disponibles pour les filtres du catalogue."""

    genres: list[str]
    decades: list[str]


class LookupOut(BaseModel):
    """Résultat d'une recherche de métadonnées."""

    found: bool
    movie: Optional[MovieOut] = None
    error: Optional[str] = None


class ImportSummaryOut(BaseModel):
    """Résumé d'un import CSV."""

    success_count: int
    failure_count: int
    shown_errors: list[str]
    remaining_errors: int
    skipped_lines: list[int] = Field(default_factory=list)
