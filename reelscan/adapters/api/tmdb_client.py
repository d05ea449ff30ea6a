"""
Client TMDB pour la recherche de films et de series.

Implemente l'interface ICatalogClient pour TMDB (The Movie Database).
Utilise le cache persistant (optionnel) et le mecanisme de retry pour
gerer le rate limiting.

Usage:
    client = TMDBClient(bearer_token="eyJ...", cache=APICache())
    results = await client.search_movie("Inception", year=2010)
    series = await client.search_series("The Office")
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from reelscan.adapters.api.cache import APICache
from reelscan.adapters.api.retry import RateLimitError, request_with_retry
from reelscan.core.errors import CatalogError, CatalogUnavailableError
from reelscan.core.ports.catalog import CatalogMovie, CatalogSeries, ICatalogClient
from reelscan.utils.constants import TMDB_BASE_URL, TMDB_MAX_YEAR, TMDB_MIN_YEAR


class TMDBClient(ICatalogClient):
    """
    Client API TMDB.

    Implemente ICatalogClient avec:
    - Recherche de films par titre (annee, page, region optionnelles)
    - Recherche de series par titre (annee de premiere diffusion, page, region)
    - Cache persistant optionnel (24h)
    - Retry automatique sur rate limiting (429)

    Les reponses non 2xx deviennent des CatalogError portant le code et le
    message TMDB. Les erreurs reseau deviennent des CatalogUnavailableError.

    Example:
        client = TMDBClient(bearer_token="xxx")
        results = await client.search_movie("Inception", year=2010)
        if results:
            print(results[0].title)
        await client.close()
    """

    def __init__(
        self,
        bearer_token: str,
        language: str = "en-US",
        include_adult: bool = False,
        cache: Optional[APICache] = None,
        base_url: str = TMDB_BASE_URL,
        timeout: float = 10.0,
        max_attempts: int = 5,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            bearer_token: Read Access Token v4, ou cle API v3 (32 caracteres)
            language: Langue des resultats (ex: "en-US", "fr-FR")
            include_adult: Inclure les contenus adultes
            cache: Cache des recherches (None pour desactiver)
            base_url: URL de base de l'API
            timeout: Delai d'une requete HTTP en secondes
            max_attempts: Tentatives maximum sur 429
        """
        self._bearer_token = bearer_token
        self._language = language
        self._include_adult = include_adult
        self._cache = cache
        self._base_url = base_url
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._bearer_token) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._bearer_token}"
            else:
                params["api_key"] = self._bearer_token

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    @staticmethod
    def _valid_year(year: Optional[int]) -> bool:
        return year is not None and TMDB_MIN_YEAR <= year <= TMDB_MAX_YEAR

    def _build_params(
        self,
        title: str,
        page: Optional[int],
        region: Optional[str],
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "query": title,
            "language": self._language,
            "include_adult": "true" if self._include_adult else "false",
            "page": page if page and page > 0 else 1,
        }
        if region:
            params["region"] = region
        return params

    async def search_movie(
        self,
        title: str,
        *,
        year: Optional[int] = None,
        page: Optional[int] = None,
        region: Optional[str] = None,
    ) -> list[CatalogMovie]:
        """
        Recherche des films par titre.

        Utilise le pattern cache-first quand un cache est configure.

        Args:
            title: Titre du film
            year: Annee de sortie (ignoree hors 1000-9999)
            page: Page de resultats (1 par defaut)
            region: Code region ISO 3166-1

        Returns:
            Liste de CatalogMovie dans l'ordre TMDB (vide si aucun resultat)

        Raises:
            CatalogError: Reponse non 2xx de TMDB
            CatalogUnavailableError: TMDB injoignable
        """
        params = self._build_params(title, page, region)
        if self._valid_year(year):
            params["year"] = year

        data = await self._search("/search/movie", params)
        return [self._to_movie(item) for item in data]

    async def search_series(
        self,
        title: str,
        *,
        first_air_date_year: Optional[int] = None,
        page: Optional[int] = None,
        region: Optional[str] = None,
    ) -> list[CatalogSeries]:
        """
        Recherche des series par titre.

        Returns:
            Liste de CatalogSeries dans l'ordre TMDB (vide si aucun resultat)

        Raises:
            CatalogError: Reponse non 2xx de TMDB
            CatalogUnavailableError: TMDB injoignable
        """
        params = self._build_params(title, page, region)
        if self._valid_year(first_air_date_year):
            params["first_air_date_year"] = first_air_date_year

        data = await self._search("/search/tv", params)
        return [self._to_series(item) for item in data]

    async def _search(self, endpoint: str, params: dict[str, Any]) -> list[dict]:
        """Execute une recherche (cache-first) et retourne les resultats bruts."""
        cache_key = APICache.search_key("tmdb", endpoint, params)

        if self._cache is not None:
            cached = await self._cache.get(cache_key)
            if cached is not None:
                return cached

        data = await self._fetch(endpoint, params)
        results = [
            item for item in data.get("results") or []
            if isinstance(item, dict) and self._has_valid_id(item)
        ]

        if self._cache is not None:
            await self._cache.set_search(cache_key, results)

        return results

    async def _fetch(self, endpoint: str, params: dict[str, Any]) -> dict:
        """
        Execute un GET et retourne le corps JSON.

        Raises:
            CatalogError: Statut non 2xx ou corps illisible
            CatalogUnavailableError: Erreur de transport
        """
        client = self._get_client()
        try:
            response = await request_with_retry(
                client, "GET", endpoint, max_attempts=self._max_attempts, params=params
            )
        except RateLimitError as e:
            if e.response is not None:
                raise self._to_error(e.response) from e
            raise CatalogError(429, "rate limit exceeded") from e
        except httpx.TransportError as e:
            logger.warning(f"TMDB injoignable ({endpoint}): {e}")
            raise CatalogUnavailableError(f"TMDB unreachable: {e}") from e

        if not response.is_success:
            raise self._to_error(response)

        try:
            data = response.json()
        except ValueError as e:
            raise CatalogError(response.status_code, "invalid JSON response") from e
        if not isinstance(data, dict):
            raise CatalogError(response.status_code, "unexpected response shape")
        return data

    @staticmethod
    def _to_error(response: httpx.Response) -> CatalogError:
        """Construit une CatalogError depuis un corps {status_message, status_code}."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and "status_message" in body:
            code = body.get("status_code")
            return CatalogError(
                status_code=code if isinstance(code, int) else response.status_code,
                message=str(body["status_message"]),
                http_status=response.status_code,
            )

        return CatalogError(
            status_code=response.status_code,
            message=response.reason_phrase or f"HTTP {response.status_code}",
            http_status=response.status_code,
        )

    @staticmethod
    def _has_valid_id(item: dict) -> bool:
        """Ecarte les resultats sans identifiant entier exploitable."""
        try:
            int(item["id"])
        except (KeyError, TypeError, ValueError):
            return False
        return True

    @staticmethod
    def _to_movie(item: dict) -> CatalogMovie:
        return CatalogMovie(
            id=int(item["id"]),
            title=item.get("title") or item.get("original_title") or "",
            original_title=item.get("original_title") or "",
            overview=item.get("overview") or "",
            release_date=item.get("release_date") or "",
            poster_path=item.get("poster_path"),
            backdrop_path=item.get("backdrop_path"),
            vote_average=float(item.get("vote_average") or 0.0),
            vote_count=int(item.get("vote_count") or 0),
            popularity=float(item.get("popularity") or 0.0),
            original_language=item.get("original_language") or "",
        )

    @staticmethod
    def _to_series(item: dict) -> CatalogSeries:
        return CatalogSeries(
            id=int(item["id"]),
            name=item.get("name") or item.get("original_name") or "",
            original_name=item.get("original_name") or "",
            overview=item.get("overview") or "",
            first_air_date=item.get("first_air_date") or "",
            poster_path=item.get("poster_path"),
            backdrop_path=item.get("backdrop_path"),
            vote_average=float(item.get("vote_average") or 0.0),
            vote_count=int(item.get("vote_count") or 0),
            popularity=float(item.get("popularity") or 0.0),
            original_language=item.get("original_language") or "",
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
