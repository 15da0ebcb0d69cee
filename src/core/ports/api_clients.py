"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) définissant le contrat du service externe
de résolution de métadonnées (titre libre -> fiche film), utilisé par
le flux d'ajout manuel d'une entrée.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from src.core.entities.media import Movie


@dataclass
class LookupResult:
    """
    Résultat d'une recherche de métadonnées.

    Attributs :
        found : True si une fiche a été résolue
        movie : Fiche résolue (sans ID) si found, sinon brouillon éventuel
        error : Diagnostic optionnel quand found est False
    """

    found: bool
    movie: Optional[Movie] = None
    error: Optional[str] = None

    @classmethod
    def not_found(cls, error: Optional[str] = None) -> "LookupResult":
        """Construit un résultat 'non trouvé' avec un diagnostic optionnel."""
        return cls(found=False, movie=None, error=error)


class IMetadataLookup(ABC):
    """
    Interface de résolution titre -> métadonnées.

    Les implémentations ne doivent jamais lever d'exception vers l'appelant :
    toute panne réseau ou de service se dégrade en LookupResult.not_found().
    """

    @abstractmethod
    async def lookup(self, query: str) -> LookupResult:
        """
        Recherche un film par titre libre.

        Args :
            query : Titre saisi par l'utilisateur

        Retourne :
            LookupResult (found=True avec la fiche, ou found=False avec un diagnostic)
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'omdb')."""
        ...
