"""
Cache persistant pour les recherches catalogue.

Les resultats bruts des recherches TMDB sont conserves sur disque
(diskcache) entre les scans et les redemarrages : un nouveau fichier dont
le titre a deja ete cherche ne consomme aucun quota API.

Format des cles : "<fournisseur>:<endpoint>:<k1=v1&k2=v2...>", parametres
tries par nom pour qu'une meme recherche donne toujours la meme cle.
"""

import asyncio
from collections.abc import Mapping
from functools import partial
from pathlib import Path
from typing import Any, Optional, Union

from diskcache import Cache


class APICache:
    """
    Cache asynchrone avec TTL pour les recherches catalogue.

    Les operations diskcache (bloquantes) sont deportees dans l'executor
    par defaut de la boucle.

    Attributes:
        SEARCH_TTL: Duree de vie par defaut d'une recherche (24h)
    """

    SEARCH_TTL = 24 * 60 * 60

    def __init__(
        self,
        cache_dir: Union[str, Path] = ".cache/api",
        search_ttl: int = SEARCH_TTL,
    ) -> None:
        """
        Args:
            cache_dir: Repertoire du cache (cree si inexistant)
            search_ttl: Duree de vie des recherches en secondes
        """
        self._cache = Cache(str(cache_dir))
        self._search_ttl = search_ttl

    @staticmethod
    def search_key(provider: str, endpoint: str, params: Mapping[str, Any]) -> str:
        """Construit la cle canonique d'une recherche."""
        query = "&".join(f"{name}={params[name]}" for name in sorted(params))
        return f"{provider}:{endpoint.strip('/')}:{query}"

    async def get(self, key: str) -> Optional[Any]:
        """Retourne la valeur stockee, None si absente ou expiree."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, partial(self._cache.set, key, value, expire=ttl))

    async def set_search(self, key: str, value: Any) -> None:
        """Stocke les resultats bruts d'une recherche avec le TTL configure."""
        await self.set(key, value, self._search_ttl)

    async def clear(self) -> int:
        """Vide le cache et retourne le nombre d'entrees supprimees."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.clear)

    def __len__(self) -> int:
        return len(self._cache)

    def close(self) -> None:
        self._cache.close()
