"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance du catalogue.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel, en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.media import Movie


class IMovieRepository(ABC):
    """
    Interface de stockage des films du catalogue.

    Stockage clé-valeur indexé par l'ID de l'entrée. L'ID est attribué
    par le repository lors de l'insertion, jamais par l'appelant.
    """

    @abstractmethod
    def insert(self, movie: Movie) -> Movie:
        """Insère un nouveau film et retourne sa forme stockée (avec ID)."""
        ...

    @abstractmethod
    def update(self, movie_id: str, movie: Movie) -> Optional[Movie]:
        """Remplace les données d'un film existant. Retourne None si absent."""
        ...

    @abstractmethod
    def delete(self, movie_id: str) -> bool:
        """Supprime un film par ID. Retourne True si supprimé."""
        ...

    @abstractmethod
    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        """Récupère un film par son ID interne."""
        ...

    @abstractmethod
    def list_all(self) -> list[Movie]:
        """Liste tous les films du catalogue, dans l'ordre d'insertion."""
        ...
