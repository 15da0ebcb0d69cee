"""
Cache persistant des recherches de metadonnees.

Le cache utilise diskcache pour conserver les fiches resolues entre deux
lancements de l'application. Seules les recherches abouties sont mises
en cache: un echec (service indisponible, titre inconnu) est retente
au prochain appel.
"""

import asyncio
from functools import partial
from typing import Any, Optional

from diskcache import Cache


class APICache:
    """
    Cache asynchrone avec TTL pour les appels API.

    Les operations diskcache sont executees dans l'executor par defaut
    pour ne pas bloquer la boucle evenementielle.

    Attributes:
        LOOKUP_TTL: Duree de vie d'une fiche resolue (24h)

    Example:
        cache = APICache(cache_dir=".cache/api")
        await cache.set_lookup("omdb:lookup:alien", movie)
        movie = await cache.get("omdb:lookup:alien")
    """

    LOOKUP_TTL = 24 * 60 * 60

    def __init__(self, cache_dir: str = ".cache/api") -> None:
        """
        Initialise le cache.

        Args:
            cache_dir: Repertoire du cache (cree si inexistant)
        """
        self._cache = Cache(str(cache_dir))

    async def get(self, key: str) -> Optional[Any]:
        """Retourne la valeur stockee, ou None si absente ou expiree."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Stocke une valeur (serialisable par pickle) avec un TTL en secondes."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, value, expire=ttl)
        )

    async def set_lookup(self, key: str, value: Any) -> None:
        """Stocke une fiche resolue (TTL de 24h)."""
        await self.set(key, value, self.LOOKUP_TTL)

    def close(self) -> None:
        """Ferme la connexion au cache."""
        self._cache.close()
