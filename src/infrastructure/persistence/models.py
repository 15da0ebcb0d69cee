"""
Modeles SQLModel pour la base de donnees CineShelf.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- movies: Entrees du catalogue

La liste des acteurs est stockee serialisee en JSON (actors_json).
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    """Horodatage UTC avec fuseau."""
    return datetime.now(timezone.utc)


class MovieModel(SQLModel, table=True):
    """
    Modele representant une entree du catalogue.

    Le format est stocke sous son libelle ("Digital", "DVD", "Blu-ray").
    """

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    year: int = Field(index=True)
    director: str = ""
    actors_json: str = "[]"  # JSON: ["Acteur 1", "Acteur 2", ...]
    genre: str = Field(default="", index=True)
    format: str = "Digital"
    cover_url: str = ""
    created_at: datetime | None = Field(default_factory=_utcnow)
    updated_at: datetime | None = Field(default_factory=_utcnow)

    @property
    def actors(self) -> list[str]:
        """Retourne les acteurs deserialises."""
        if self.actors_json:
            return json.loads(self.actors_json)
        return []

    @actors.setter
    def actors(self, value: list[str]) -> None:
        """Serialise les acteurs en JSON."""
        self.actors_json = json.dumps(value)
