"""
Service de reconciliation des fichiers avec le graphe d'entites.

Pour un fichier film : retrouve le Movie par chemin ou en cree un nouveau,
enrichi par le premier resultat TMDB.
Pour un fichier episode : retrouve ou cree la chaine Series -> Season ->
Episode, dans cet ordre.

Le chemin du fichier est la cle d'idempotence : un fichier deja connu
n'est jamais re-apparie au catalogue, seul son last_scanned est rafraichi.
"""

from pathlib import Path
from typing import Optional, TypeVar, Union

from loguru import logger

from reelscan.adapters.parsing.filename_parser import parse_movie, parse_series_episode
from reelscan.core.entities.library import Library
from reelscan.core.entities.media import Episode, LibraryItem, Movie, Season, Series
from reelscan.core.errors import CatalogError, CatalogUnavailableError, ReconciliationError
from reelscan.core.ports.catalog import CatalogMovie, CatalogSeries, ICatalogClient
from reelscan.core.ports.extractor import IMediaExtractor
from reelscan.core.ports.repositories import (
    IEpisodeRepository,
    IMovieRepository,
    ISeasonRepository,
    ISeriesRepository,
)
from reelscan.core.value_objects.media_metadata import MediaMetadata
from reelscan.core.value_objects.parsed_info import EpisodeInfo
from reelscan.utils.helpers import parse_catalog_date, utcnow

ItemT = TypeVar("ItemT", Movie, Episode)


class ReconcilerService:
    """
    Reconcilie un fichier video avec les entites persistees.

    Coordonne:
    - Les heuristiques de noms de fichiers (titre, annee, saison, episode)
    - L'extracteur technique (IMediaExtractor), au mieux
    - Le catalogue (ICatalogClient), optionnel : premier resultat retenu
    - Les repositories films, series, saisons et episodes

    Toute erreur de persistance est levee sous forme de ReconciliationError
    et n'affecte que le fichier en cours. Les parents deja persistes
    (serie, saison) restent valides meme sans episode.
    """

    def __init__(
        self,
        movie_repo: IMovieRepository,
        series_repo: ISeriesRepository,
        season_repo: ISeasonRepository,
        episode_repo: IEpisodeRepository,
        extractor: IMediaExtractor,
        catalog: Optional[ICatalogClient] = None,
    ) -> None:
        self._movie_repo = movie_repo
        self._series_repo = series_repo
        self._season_repo = season_repo
        self._episode_repo = episode_repo
        self._extractor = extractor
        self._catalog = catalog

    # ------------------------------------------------------------------
    # Films
    # ------------------------------------------------------------------

    async def reconcile_movie(self, library: Library, path: Path) -> Movie:
        """
        Reconcilie un fichier film.

        Args:
            library: Bibliotheque proprietaire
            path: Chemin du fichier video

        Returns:
            Le Movie existant (rafraichi) ou nouvellement cree

        Raises:
            ReconciliationError: Echec de persistance pour ce fichier
        """
        file_path = str(path)

        existing = self._movie_repo.find_by_path(file_path)
        if existing is not None:
            return self._refresh(existing, self._movie_repo, "refresh movie")

        metadata = await self._extract(path)
        info = parse_movie(path)
        match = await self._match_movie(info.title, info.year_int, file_path)

        now = utcnow()
        movie = Movie(
            library_id=library.id,
            file_path=file_path,
            title=info.title,
            date_added=now,
            last_scanned=now,
        )
        self._stamp_technical(movie, metadata)

        if match is not None:
            movie.title = match.title or info.title
            movie.original_title = match.original_title
            movie.tmdb_id = match.id
            movie.overview = match.overview
            movie.release_date = self._parse_date(match.release_date, "release_date", file_path)
            movie.poster_path = match.poster_path or ""
            movie.backdrop_path = match.backdrop_path or ""
            movie.vote_average = match.vote_average
            movie.vote_count = match.vote_count

        try:
            created = self._movie_repo.create(movie)
        except Exception as e:
            raise ReconciliationError(file_path, "store movie", e) from e

        logger.info(
            f"Film ajoute: {created.title}"
            + (f" (tmdb {created.tmdb_id})" if created.tmdb_id else " (sans correspondance)")
        )
        return created

    async def _match_movie(
        self, title: str, year: Optional[int], file_path: str
    ) -> Optional[CatalogMovie]:
        if self._catalog is None:
            return None
        try:
            results = await self._catalog.search_movie(title, year=year)
        except (CatalogError, CatalogUnavailableError) as e:
            logger.warning(f"Recherche TMDB echouee pour '{title}' ({file_path}): {e}")
            return None
        if not results:
            logger.debug(f"Aucun resultat TMDB pour '{title}'")
            return None
        return results[0]

    # ------------------------------------------------------------------
    # Episodes
    # ------------------------------------------------------------------

    async def reconcile_episode(self, library: Library, path: Path) -> Optional[Episode]:
        """
        Reconcilie un fichier episode.

        Args:
            library: Bibliotheque proprietaire
            path: Chemin du fichier video

        Returns:
            L'Episode existant (rafraichi) ou nouvellement cree, None si le nom
            de fichier ne permet pas d'identifier saison et episode

        Raises:
            ReconciliationError: Echec de persistance pour ce fichier
        """
        file_path = str(path)

        existing = self._episode_repo.find_by_path(file_path)
        if existing is not None:
            return self._refresh(existing, self._episode_repo, "refresh episode")

        info = parse_series_episode(path)
        if not info.is_valid:
            logger.warning(f"Saison/episode non reconnus, fichier ignore: {file_path}")
            return None

        metadata = await self._extract(path)
        match = await self._match_series(info.title, file_path)

        series = self._find_or_create_series(library, info, match, file_path)
        season = self._find_or_create_season(library, series, info.season, file_path)

        now = utcnow()
        episode = Episode(
            library_id=library.id,
            file_path=file_path,
            series_id=series.id,
            season_id=season.id,
            episode_number=info.episode,
            title=f"Episode {info.episode}",
            date_added=now,
            last_scanned=now,
        )
        self._stamp_technical(episode, metadata)

        try:
            created = self._episode_repo.create(episode)
        except Exception as e:
            raise ReconciliationError(file_path, "store episode", e) from e

        logger.info(f"Episode ajoute: {series.title} S{info.season:02d}E{info.episode:02d}")
        return created

    async def _match_series(self, title: str, file_path: str) -> Optional[CatalogSeries]:
        if self._catalog is None:
            return None
        try:
            results = await self._catalog.search_series(title, page=1)
        except (CatalogError, CatalogUnavailableError) as e:
            logger.warning(f"Recherche TMDB echouee pour '{title}' ({file_path}): {e}")
            return None
        if not results:
            logger.debug(f"Aucune serie TMDB pour '{title}'")
            return None
        return results[0]

    def _find_or_create_series(
        self,
        library: Library,
        info: EpisodeInfo,
        match: Optional[CatalogSeries],
        file_path: str,
    ) -> Series:
        """Trouve la serie par ID TMDB (ou titre sans correspondance), sinon la cree."""
        try:
            if match is not None:
                series = self._series_repo.get_by_tmdb_id(match.id)
            else:
                series = self._series_repo.find_by_title(library.id, info.title)

            if series is not None:
                series.last_scanned = utcnow()
                return self._series_repo.update(series)

            now = utcnow()
            series = Series(
                library_id=library.id,
                title=info.title,
                date_added=now,
                last_scanned=now,
            )
            if match is not None:
                series.title = match.name or info.title
                series.original_title = match.original_name
                series.tmdb_id = match.id
                series.overview = match.overview
                series.first_air_date = self._parse_date(
                    match.first_air_date, "first_air_date", file_path
                )
                series.poster_path = match.poster_path or ""
                series.backdrop_path = match.backdrop_path or ""
                series.vote_average = match.vote_average
                series.vote_count = match.vote_count

            created = self._series_repo.create(series)
            logger.info(f"Serie ajoutee: {created.title}")
            return created
        except Exception as e:
            raise ReconciliationError(file_path, "store series", e) from e

    def _find_or_create_season(
        self,
        library: Library,
        series: Series,
        season_number: int,
        file_path: str,
    ) -> Season:
        """Trouve la saison par (serie, numero), sinon la cree."""
        try:
            season = self._season_repo.find_by_number(series.id, season_number)
            if season is not None:
                season.last_scanned = utcnow()
                return self._season_repo.update(season)

            now = utcnow()
            return self._season_repo.create(
                Season(
                    series_id=series.id,
                    library_id=library.id,
                    season_number=season_number,
                    date_added=now,
                    last_scanned=now,
                )
            )
        except Exception as e:
            raise ReconciliationError(file_path, "store season", e) from e

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _refresh(
        self,
        item: ItemT,
        repository: Union[IMovieRepository, IEpisodeRepository],
        step: str,
    ) -> ItemT:
        """Rafraichit last_scanned et annule une suppression logique."""
        if item.deleted_at is not None:
            logger.info(f"Fichier de retour, restauration: {item.file_path}")
        item.last_scanned = utcnow()
        item.deleted_at = None
        try:
            return repository.update(item)
        except Exception as e:
            raise ReconciliationError(item.file_path, step, e) from e

    async def _extract(self, path: Path) -> Optional[MediaMetadata]:
        """Sonde le fichier ; une erreur douce est journalisee, pas propagee."""
        result = await self._extractor.extract(path)
        if result.error is not None:
            logger.warning(f"Sondage incomplet pour {path}: {result.error}")
        return result.metadata

    @staticmethod
    def _stamp_technical(item: LibraryItem, metadata: Optional[MediaMetadata]) -> None:
        if metadata is None:
            return
        item.container = metadata.container
        item.codec = metadata.codec
        item.resolution_width = metadata.resolution_width
        item.resolution_height = metadata.resolution_height
        item.audio_channels = metadata.audio_channels

    @staticmethod
    def _parse_date(value: str, label: str, file_path: str):
        try:
            return parse_catalog_date(value)
        except ValueError:
            logger.warning(f"Date TMDB illisible ({label}={value!r}) pour {file_path}")
            return None
