"""
Service de gestion du catalogue.

Fournit les cas d'usage de l'ajout et de l'edition manuels (avec
validation des champs obligatoires), de la suppression, de la recherche
textuelle et des filtres par genre et par decennie.
"""

from dataclasses import replace
from typing import Iterable, Optional

from loguru import logger

from src.core.entities.media import Movie
from src.core.ports.repositories import IMovieRepository


class EntryValidationError(Exception):
    """
    Entree incomplete lors d'un ajout ou d'une edition manuelle.

    Attributes:
        missing_fields: Noms des champs manquants
    """

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        super().__init__(
            "Please fill in all required fields and at least one actor "
            f"(missing: {', '.join(missing_fields)})"
        )


def _matches_term(movie: Movie, term: str) -> bool:
    """Recherche insensible a la casse sur titre, realisateur et acteurs."""
    if not term:
        return True
    needle = term.lower()
    return (
        needle in movie.name.lower()
        or needle in movie.director.lower()
        or any(needle in actor.lower() for actor in movie.actors)
    )


class CatalogService:
    """
    Service de gestion du catalogue.

    Les entrees ajoutees manuellement sont plus strictes que les lignes
    importees: titre, annee non nulle, realisateur, genre, couverture et au moins
    un acteur sont obligatoires.

    Attributs injectes:
        movie_repo: Repository du catalogue
    """

    REQUIRED_FIELDS = ("name", "director", "genre", "cover_url")

    def __init__(self, movie_repo: IMovieRepository) -> None:
        self._movie_repo = movie_repo

    def validate(self, movie: Movie) -> Movie:
        """
        Verifie une entree saisie manuellement.

        Les acteurs vides sont retires de l'entree retournee.

        Raises:
            EntryValidationError: Si un champ obligatoire manque
        """
        missing = [name for name in self.REQUIRED_FIELDS if not getattr(movie, name)]
        if movie.year == 0:
            missing.append("year")
        actors = tuple(actor.strip() for actor in movie.actors if actor.strip())
        if not actors:
            missing.append("actors")
        if missing:
            raise EntryValidationError(missing)
        return replace(movie, actors=actors)

    def add(self, movie: Movie) -> Movie:
        """Valide puis insere une nouvelle entree."""
        stored = self._movie_repo.insert(replace(self.validate(movie), id=None))
        logger.info(f"Film ajoute: {stored.name} (#{stored.id})")
        return stored

    def update(self, movie_id: str, movie: Movie) -> Optional[Movie]:
        """Valide puis remplace une entree existante. None si absente."""
        updated = self._movie_repo.update(movie_id, self.validate(movie))
        if updated is not None:
            logger.info(f"Film mis a jour: {updated.name} (#{movie_id})")
        return updated

    def delete(self, movie_id: str) -> bool:
        deleted = self._movie_repo.delete(movie_id)
        if deleted:
            logger.info(f"Film supprime: #{movie_id}")
        return deleted

    def get(self, movie_id: str) -> Optional[Movie]:
        return self._movie_repo.get_by_id(movie_id)

    def list_all(self) -> list[Movie]:
        return self._movie_repo.list_all()

    def search(
        self,
        term: str = "",
        genres: Iterable[str] = (),
        decades: Iterable[str] = (),
    ) -> list[Movie]:
        """
        Filtre le catalogue.

        Args:
            term: Texte recherche dans le titre, le realisateur ou les acteurs
            genres: Genres retenus (exact), aucun = tous
            decades: Decennies retenues (ex: "1990s"), aucune = toutes

        Returns:
            Entrees correspondant a tous les criteres, dans l'ordre du catalogue
        """
        selected_genres = set(genres)
        selected_decades = set(decades)
        return [
            movie
            for movie in self._movie_repo.list_all()
            if _matches_term(movie, term)
            and (not selected_genres or movie.genre in selected_genres)
            and (not selected_decades or movie.decade in selected_decades)
        ]

    def available_genres(self) -> list[str]:
        """Genres presents dans le catalogue, tries."""
        return sorted({movie.genre for movie in self._movie_repo.list_all()})

    def available_decades(self) -> list[str]:
        """Decennies presentes dans le catalogue, de la plus recente a la plus ancienne."""
        return sorted(
            {movie.decade for movie in self._movie_repo.list_all()}, reverse=True
        )
