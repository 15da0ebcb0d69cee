"""
Configuration de la base de donnees SQLite pour CineShelf.

Ce module fournit :
- Engine partage, cree a la demande a partir de CINESHELF_DATABASE_URL
- Session factory (generateur)
- Initialisation des tables et liberation de l'engine

Une URL SQLite en memoire ("sqlite://" ou "sqlite:///:memory:") utilise
une connexion unique partagee, sinon chaque session verrait une base vide.
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def _build_engine(db_url: str) -> Engine:
    """Cree l'engine, en preparant le repertoire du fichier SQLite si besoin."""
    if db_url in _MEMORY_URLS:
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    if db_url.startswith("sqlite:///"):
        db_path = Path(db_url.removeprefix("sqlite:///"))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(db_url, echo=False, connect_args={"check_same_thread": False})


def get_engine(database_url: Optional[str] = None) -> Engine:
    """
    Retourne l'engine partage, en le creant si necessaire.

    Args:
        database_url: URL explicite; par defaut celle de la configuration.
            Ignoree si l'engine existe deja.
    """
    global _engine
    if _engine is None:
        if database_url is None:
            from src.config import Settings
            database_url = Settings().database_url
        _engine = _build_engine(database_url)
        logger.debug("Engine cree", url=database_url)
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() :
        session = next(get_session())

    Yields:
        Session SQLModel connectee a l'engine partage
    """
    with Session(get_engine()) as session:
        yield session


def init_db(database_url: Optional[str] = None) -> None:
    """
    Cree les tables du catalogue si elles n'existent pas.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from src.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(get_engine(database_url))


def dispose_engine() -> None:
    """Ferme les connexions et oublie l'engine partage."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None
