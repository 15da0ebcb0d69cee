"""
Service de pre-remplissage pour l'ajout manuel d'un film.

Interroge le service de metadonnees a partir d'un titre libre. Si rien
n'est trouve, retourne un brouillon contenant uniquement le titre saisi
pour que l'utilisateur complete la fiche a la main.
"""

from datetime import date
from typing import Optional

from loguru import logger

from src.core.entities.media import Movie
from src.core.ports.api_clients import IMetadataLookup, LookupResult


class LookupService:
    """
    Service de pre-remplissage des fiches.

    Attributs injectes:
        lookup_client: Implementation de IMetadataLookup (None si desactive)
    """

    def __init__(self, lookup_client: Optional[IMetadataLookup]) -> None:
        self._lookup_client = lookup_client

    @property
    def enabled(self) -> bool:
        return self._lookup_client is not None

    async def prefill(self, query: str) -> LookupResult:
        """
        Recherche une fiche pour le titre saisi.

        Args:
            query: Titre libre

        Returns:
            LookupResult trouve, ou non trouve avec un brouillon (name=query, annee courante)
        """
        query = query.strip()
        if not query:
            return LookupResult.not_found("Search query is required")

        if self._lookup_client is None:
            result = LookupResult.not_found("Metadata lookup is not configured")
        else:
            result = await self._lookup_client.lookup(query)

        if result.found:
            logger.info(f"Fiche trouvee pour {query!r} ({self._lookup_client.source})")
            return result

        logger.info(f"Aucune fiche pour {query!r}: {result.error}")
        draft = Movie(name=query, year=date.today().year)
        return LookupResult(found=False, movie=draft, error=result.error)
