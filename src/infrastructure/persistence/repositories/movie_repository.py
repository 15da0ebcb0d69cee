"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance du catalogue
dans la base de donnees SQLite via SQLModel.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Session, select

from src.core.entities.media import Movie, MovieFormat
from src.core.ports.repositories import IMovieRepository
from src.infrastructure.persistence.models import MovieModel


def _parse_id(movie_id: str) -> Optional[int]:
    """Convertit un ID externe en cle primaire, None s'il n'est pas numerique."""
    try:
        return int(movie_id)
    except (TypeError, ValueError):
        return None


class SQLModelMovieRepository(IMovieRepository):
    """
    Repository SQLModel pour le catalogue.

    Implemente IMovieRepository avec conversion bidirectionnelle
    entre l'entite Movie (domaine) et MovieModel (persistance).
    Chaque operation d'ecriture est commitee immediatement.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MovieModel) -> Movie:
        """Convertit un modele DB en entite domaine."""
        return Movie(
            id=str(model.id) if model.id is not None else None,
            name=model.name,
            year=model.year,
            director=model.director,
            actors=tuple(model.actors),
            genre=model.genre,
            format=MovieFormat.from_label(model.format) or MovieFormat.DIGITAL,
            cover_url=model.cover_url,
        )

    @staticmethod
    def _apply(model: MovieModel, entity: Movie) -> None:
        """Copie les champs de l'entite dans le modele."""
        model.name = entity.name
        model.year = entity.year
        model.director = entity.director
        model.actors = list(entity.actors)
        model.genre = entity.genre
        model.format = MovieFormat(entity.format).value
        model.cover_url = entity.cover_url

    def insert(self, movie: Movie) -> Movie:
        """Insere un film et retourne sa forme stockee (ID attribue par la BDD)."""
        if movie.id is not None:
            raise ValueError(f"Le film a deja un ID: {movie.id}")

        model = MovieModel(name=movie.name, year=movie.year)
        self._apply(model, movie)
        self._session.add(model)
        try:
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        self._session.refresh(model)
        return self._to_entity(model)

    def update(self, movie_id: str, movie: Movie) -> Optional[Movie]:
        """Remplace les donnees d'un film existant."""
        pk = _parse_id(movie_id)
        model = self._session.get(MovieModel, pk) if pk is not None else None
        if model is None:
            return None

        self._apply(model, movie)
        model.updated_at = datetime.now(timezone.utc)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def delete(self, movie_id: str) -> bool:
        """Supprime un film par ID."""
        pk = _parse_id(movie_id)
        model = self._session.get(MovieModel, pk) if pk is not None else None
        if model is None:
            return False
        self._session.delete(model)
        self._session.commit()
        return True

    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        """Recupere un film par son ID interne."""
        pk = _parse_id(movie_id)
        if pk is None:
            return None
        model = self._session.get(MovieModel, pk)
        if model:
            return self._to_entity(model)
        return None

    def list_all(self) -> list[Movie]:
        """Liste tous les films dans l'ordre d'insertion."""
        statement = select(MovieModel).order_by(MovieModel.id)
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]
