"""
Interfaces ports pour le catalogue de métadonnées.

Interface abstraite (port) définissant le contrat de recherche dans un
catalogue de métadonnées externe. L'implémentation concrète est le client
TMDB (adapters/api/tmdb_client.py).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class CatalogMovie:
    """
    Film renvoyé par une recherche catalogue.

    Attributs :
        id : ID TMDB
        title : Titre localisé
        original_title : Titre en langue originale
        release_date : Date de sortie brute ("YYYY-MM-DD", peut être vide)
        vote_average : Note moyenne (0-10)
        vote_count : Nombre de votes
    """

    id: int
    title: str
    original_title: str = ""
    overview: str = ""
    release_date: str = ""
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    vote_average: float = 0.0
    vote_count: int = 0
    popularity: float = 0.0
    original_language: str = ""


@dataclass
class CatalogSeries:
    """
    Série renvoyée par une recherche catalogue.

    Attributs :
        id : ID TMDB
        name : Nom localisé
        original_name : Nom en langue originale
        first_air_date : Date de première diffusion brute ("YYYY-MM-DD")
    """

    id: int
    name: str
    original_name: str = ""
    overview: str = ""
    first_air_date: str = ""
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    vote_average: float = 0.0
    vote_count: int = 0
    popularity: float = 0.0
    original_language: str = ""


class ICatalogClient(ABC):
    """
    Interface du catalogue de métadonnées.

    Les résultats sont renvoyés dans l'ordre de classement du fournisseur.
    L'appelant retient le premier résultat et rien d'autre.

    Erreurs :
        CatalogError : réponse non 2xx du fournisseur
        CatalogUnavailableError : fournisseur injoignable
    """

    @abstractmethod
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

        Args :
            title : Titre recherché
            year : Année de sortie (ignorée hors 1000-9999)
            page : Page de résultats (1 par défaut)
            region : Code région ISO 3166-1

        Retourne :
            Liste classée, vide si aucun résultat
        """
        ...

    @abstractmethod
    async def search_series(
        self,
        title: str,
        *,
        first_air_date_year: Optional[int] = None,
        page: Optional[int] = None,
        region: Optional[str] = None,
    ) -> list[CatalogSeries]:
        """Recherche des séries par titre. Liste vide si aucun résultat."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libère les connexions HTTP."""
        ...
