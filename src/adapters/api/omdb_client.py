"""
Client OMDb pour la resolution titre -> fiche film.

Implemente l'interface IMetadataLookup pour l'API OMDb (Open Movie Database).
Utilise le cache persistant et le mecanisme de retry du package.

Aucune erreur n'est propagee a l'appelant: cle absente ou invalide,
erreur HTTP, service injoignable ou reponse malformee se degradent en
LookupResult.not_found() avec un diagnostic.

Usage:
    cache = APICache()
    client = OMDbClient(api_key="your_key", cache=cache)
    result = await client.lookup("The Matrix")
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.adapters.api.cache import APICache
from src.adapters.api.retry import RetryableHTTPError, request_with_retry
from src.core.entities.media import Movie
from src.core.ports.api_clients import IMetadataLookup, LookupResult
from src.utils.helpers import parse_leading_int

# Valeur utilisee par OMDb pour un champ inconnu
_NOT_AVAILABLE = "N/A"


def _field(data: dict[str, Any], key: str) -> str:
    """Retourne le champ texte, "" si absent ou "N/A"."""
    value = data.get(key) or ""
    if not isinstance(value, str):
        raise TypeError(f"Champ OMDb non textuel: {key}")
    return "" if value == _NOT_AVAILABLE else value.strip()


class OMDbClient(IMetadataLookup):
    """
    Client API OMDb.

    Recherche par titre exact (parametre t) et conversion de la reponse
    en fiche du catalogue: 3 premiers acteurs, premier genre, affiche.

    Attributes:
        OMDB_BASE_URL: URL de base de l'API
        MAX_ACTORS: Nombre d'acteurs conserves
    """

    OMDB_BASE_URL = "https://www.omdbapi.com"
    MAX_ACTORS = 3

    def __init__(
        self, api_key: Optional[str], cache: APICache, max_attempts: int = 3
    ) -> None:
        """
        Initialise le client OMDb.

        Args:
            api_key: Cle API OMDb (None = recherche desactivee)
            cache: Instance APICache pour le caching des fiches
            max_attempts: Tentatives sur 429 et 502/503/504
        """
        self._api_key = api_key
        self._cache = cache
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.OMDB_BASE_URL,
                headers={"Accept": "application/json"},
                params={"apikey": self._api_key},
                timeout=15.0,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "omdb"

    async def lookup(self, query: str) -> LookupResult:
        """
        Recherche un film par titre.

        Utilise le pattern cache-first. Seules les fiches trouvees
        sont mises en cache.

        Args:
            query: Titre a rechercher

        Returns:
            LookupResult trouve avec la fiche, ou non trouve avec un diagnostic
        """
        if not self._api_key:
            return LookupResult.not_found("API key not configured")

        cache_key = f"omdb:lookup:{query.strip().lower()}"
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return LookupResult(found=True, movie=cached)

        logger.debug(f"Recherche OMDb: {query}")
        try:
            response = await request_with_retry(
                self._get_client(),
                "GET",
                "/",
                max_attempts=self._max_attempts,
                params={"t": query},
            )
            data = response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"Erreur HTTP OMDb: {status}")
            if status == 401:
                return LookupResult.not_found(
                    "Invalid API key or unauthorized access. "
                    "Please check your OMDB API key."
                )
            return LookupResult.not_found(f"OMDB API error: {status}")
        except RetryableHTTPError as e:
            logger.warning(f"OMDb indisponible: {e}")
            return LookupResult.not_found(f"OMDB API error: {e.status_code}")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"OMDb injoignable: {e}")
            return LookupResult.not_found("OMDB API unreachable")

        if not isinstance(data, dict) or data.get("Response") == "False":
            error = data.get("Error") if isinstance(data, dict) else None
            return LookupResult.not_found(error or "Movie not found")

        try:
            movie = self._to_movie(data)
        except (TypeError, ValueError) as e:
            logger.warning(f"Reponse OMDb inattendue: {e}")
            return LookupResult.not_found("Unexpected OMDB response")

        await self._cache.set_lookup(cache_key, movie)
        return LookupResult(found=True, movie=movie)

    def _to_movie(self, data: dict[str, Any]) -> Movie:
        """Convertit une reponse OMDb en fiche (sans ID, format Digital)."""
        actors = [name.strip() for name in _field(data, "Actors").split(",") if name.strip()]
        genres = [name.strip() for name in _field(data, "Genre").split(",") if name.strip()]
        return Movie(
            name=_field(data, "Title"),
            year=parse_leading_int(_field(data, "Year")),
            director=_field(data, "Director"),
            actors=tuple(actors[: self.MAX_ACTORS]),
            genre=genres[0] if genres else "",
            cover_url=_field(data, "Poster"),
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
