"""
Fixtures pytest partagees pour les tests CineShelf.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Session SQLModel sur une base SQLite en memoire
- Repository du catalogue et quelques films types
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.config import Settings
from src.core.entities.media import Movie, MovieFormat
from src.core.ports.repositories import IMovieRepository
from src.infrastructure.persistence import models  # noqa: F401
from src.infrastructure.persistence.repositories import SQLModelMovieRepository


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler la base, le cache et les logs.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        omdb_api_key=None,
        api_cache_dir=tmp_path / "cache",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def session() -> Iterator[Session]:
    """Session SQLModel sur une base SQLite en memoire, tables creees."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def movie_repository(session: Session) -> SQLModelMovieRepository:
    """Repository du catalogue branche sur la base en memoire."""
    return SQLModelMovieRepository(session)


@pytest.fixture
def mock_movie_repository() -> MagicMock:
    """
    Mock de IMovieRepository.

    insert() retourne l'entree recue avec un ID sequentiel.
    """
    mock = MagicMock(spec=IMovieRepository)
    counter = {"next": 1}

    def fake_insert(movie: Movie) -> Movie:
        stored = Movie(
            id=str(counter["next"]),
            name=movie.name,
            year=movie.year,
            director=movie.director,
            actors=movie.actors,
            genre=movie.genre,
            format=movie.format,
            cover_url=movie.cover_url,
        )
        counter["next"] += 1
        return stored

    mock.insert.side_effect = fake_insert
    return mock


@pytest.fixture
def matrix() -> Movie:
    """Film type (Blu-ray, annees 1990)."""
    return Movie(
        name="The Matrix",
        year=1999,
        director="The Wachowskis",
        actors=("Keanu Reeves", "Laurence Fishburne", "Carrie-Anne Moss"),
        genre="Science Fiction",
        format=MovieFormat.BLU_RAY,
        cover_url="https://example.com/matrix.jpg",
    )


@pytest.fixture
def inception() -> Movie:
    """Film type (Digital, annees 2010)."""
    return Movie(
        name="Inception",
        year=2010,
        director="Christopher Nolan",
        actors=("Leonardo DiCaprio", "Marion Cotillard", "Tom Hardy"),
        genre="Science Fiction",
        format=MovieFormat.DIGITAL,
        cover_url="https://example.com/inception.jpg",
    )


@pytest.fixture
def godfather() -> Movie:
    """Film type (DVD, annees 1970)."""
    return Movie(
        name="The Godfather",
        year=1972,
        director="Francis Ford Coppola",
        actors=("Marlon Brando", "Al Pacino", "James Caan"),
        genre="Crime",
        format=MovieFormat.DVD,
        cover_url="https://example.com/godfather.jpg",
    )
