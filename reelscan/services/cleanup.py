"""
Service de nettoyage des bibliotheques.

Marque comme supprimes (suppression logique via deleted_at) les films et
episodes dont le fichier a disparu du disque. Un rescan ulterieur du meme
chemin restaure l'element.
"""

import asyncio
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from reelscan.core.entities.library import Library
from reelscan.core.entities.media import LibraryItem
from reelscan.core.errors import TaskConfigError
from reelscan.core.ports.executor import ITaskExecutor
from reelscan.core.ports.file_system import IFileSystem
from reelscan.core.ports.repositories import (
    IEpisodeRepository,
    ILibraryRepository,
    IMovieRepository,
)
from reelscan.utils.helpers import utcnow


@dataclass
class CleanupReport:
    """
    Bilan d'un nettoyage.

    Attributs:
        checked: Elements verifies
        missing: Elements dont le fichier est absent
        deleted: Elements effectivement marques supprimes
    """

    checked: int = 0
    missing: int = 0
    deleted: int = 0


class CleanupService(ITaskExecutor):
    """
    Executeur de la tache "cleanup".

    Chaque bibliotheque est traitee independamment : un echec est
    journalise et n'interrompt pas les suivantes.
    """

    def __init__(
        self,
        library_repo: ILibraryRepository,
        movie_repo: IMovieRepository,
        episode_repo: IEpisodeRepository,
        file_system: IFileSystem,
        delete_missing: bool = False,
        delete_orphaned: bool = False,
    ) -> None:
        self._library_repo = library_repo
        self._movie_repo = movie_repo
        self._episode_repo = episode_repo
        self._file_system = file_system
        self._delete_missing = delete_missing
        self._delete_orphaned = delete_orphaned
        self.last_report: Optional[CleanupReport] = None

    def description(self) -> str:
        return "Mark library items whose files disappeared as deleted"

    async def execute(self, config: str) -> None:
        """
        Point d'entree du planificateur.

        Args:
            config: JSON optionnel {"delete_missing": bool, "delete_orphaned": bool}
                    surchargeant la configuration globale.

        Raises:
            TaskConfigError: Configuration illisible
        """
        delete_missing, delete_orphaned = self._parse_config(config)
        self.last_report = await self.run(delete_missing, delete_orphaned)

    def _parse_config(self, config: str) -> tuple[bool, bool]:
        if not config or not config.strip():
            return self._delete_missing, self._delete_orphaned
        try:
            data = json.loads(config)
        except json.JSONDecodeError as e:
            raise TaskConfigError(f"invalid cleanup config: {e}") from e
        if not isinstance(data, dict):
            raise TaskConfigError("cleanup config must be a JSON object")
        return (
            bool(data.get("delete_missing", self._delete_missing)),
            bool(data.get("delete_orphaned", self._delete_orphaned)),
        )

    async def run(
        self,
        delete_missing: Optional[bool] = None,
        delete_orphaned: Optional[bool] = None,
    ) -> CleanupReport:
        """Nettoie toutes les bibliotheques."""
        if delete_missing is None:
            delete_missing = self._delete_missing
        if delete_orphaned is None:
            delete_orphaned = self._delete_orphaned

        report = CleanupReport()
        for library in self._library_repo.list_libraries():
            try:
                await self._cleanup_library(library, report, delete_missing)
            except Exception:
                logger.exception(f"Echec du nettoyage de la bibliotheque {library.name}")

        if delete_orphaned:
            logger.info("Nettoyage des fichiers orphelins non pris en charge, ignore")

        logger.info(
            f"Nettoyage termine: {report.checked} verifies, {report.missing} absents, "
            f"{report.deleted} marques supprimes"
        )
        return report

    async def _cleanup_library(
        self,
        library: Library,
        report: CleanupReport,
        delete_missing: bool,
    ) -> None:
        movies = self._movie_repo.list_by_library(library.id)
        episodes = self._episode_repo.list_by_library(library.id)

        missing_movies = await asyncio.to_thread(self._find_missing, movies)
        missing_episodes = await asyncio.to_thread(self._find_missing, episodes)

        report.checked += len(movies) + len(episodes)
        report.missing += len(missing_movies) + len(missing_episodes)

        if not delete_missing:
            for item in missing_movies + missing_episodes:
                logger.info(f"Fichier absent (non supprime): {item.file_path}")
            return

        now = utcnow()
        for movie in missing_movies:
            # Relecture : l'entree a pu changer depuis la verification
            current = self._movie_repo.get_by_id(movie.id)
            if current is None or current.deleted_at is not None:
                continue
            current.deleted_at = now
            self._movie_repo.update(current)
            report.deleted += 1
            logger.info(f"Film marque supprime: {current.file_path}")
        for episode in missing_episodes:
            current = self._episode_repo.get_by_id(episode.id)
            if current is None or current.deleted_at is not None:
                continue
            current.deleted_at = now
            self._episode_repo.update(current)
            report.deleted += 1
            logger.info(f"Episode marque supprime: {current.file_path}")

    def _find_missing(self, items: list[LibraryItem]) -> list[LibraryItem]:
        return [item for item in items if not self._file_system.exists(Path(item.file_path))]
