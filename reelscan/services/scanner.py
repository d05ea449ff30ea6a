"""
Service de scan des bibliotheques.

Orchestre le parcours des repertoires racines de chaque bibliotheque et
la reconciliation de chaque fichier video, via un pool fixe de workers
asyncio alimente par une file. Le pool borne le nombre de sondages ffprobe
et de requetes TMDB simultanes.
"""

import asyncio
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from reelscan.adapters.parsing.filename_parser import is_video_file, looks_like_series_episode
from reelscan.core.entities.library import Library, LibraryKind
from reelscan.core.errors import ReconciliationError, TaskConfigError
from reelscan.core.ports.executor import ITaskExecutor
from reelscan.core.ports.file_system import IFileSystem
from reelscan.core.ports.repositories import ILibraryRepository
from reelscan.services.reconciler import ReconcilerService
from reelscan.utils.helpers import utcnow


@dataclass
class LibraryScanReport:
    """
    Bilan du scan d'une bibliotheque.

    Attributs:
        library_name: Nom de la bibliotheque
        processed: Fichiers reconcilies (nouveaux ou rafraichis)
        skipped: Fichiers video ignores (nom d'episode illisible)
        failed: Fichiers en echec de reconciliation
        path_errors: Repertoires racines illisibles
        completed: True si le parcours s'est termine normalement
    """

    library_name: str
    processed: int = 0
    skipped: int = 0
    failed: int = 0
    path_errors: int = 0
    completed: bool = False


class ScannerService(ITaskExecutor):
    """
    Service orchestrant le scan des bibliotheques.

    Coordonne:
    - Le repository des bibliotheques (ILibraryRepository)
    - Le systeme de fichiers (IFileSystem) pour le parcours recursif
    - Le ReconcilerService pour chaque fichier video

    Implemente ITaskExecutor pour etre declenche par le planificateur
    (type de tache "scanner").
    """

    def __init__(
        self,
        library_repo: ILibraryRepository,
        reconciler: ReconcilerService,
        file_system: IFileSystem,
        workers: int = 4,
    ) -> None:
        """
        Initialise le service de scan.

        Args:
            library_repo: Repository des bibliotheques
            reconciler: Service de reconciliation fichier -> entites
            file_system: Implementation de IFileSystem pour le parcours
            workers: Taille du pool de workers (minimum 1)
        """
        self._library_repo = library_repo
        self._reconciler = reconciler
        self._file_system = file_system
        self._workers = max(1, workers)
        self.last_reports: list[LibraryScanReport] = []

    def description(self) -> str:
        return "Scan library roots and reconcile video files with the catalog"

    async def execute(self, config: str) -> None:
        """
        Point d'entree du planificateur.

        Args:
            config: JSON optionnel {"libraries": ["nom", ...]} restreignant
                    le scan a certaines bibliotheques. Vide: toutes.

        Raises:
            TaskConfigError: Configuration illisible
        """
        names = self._parse_config(config)
        if names is None:
            self.last_reports = await self.scan_libraries()
            return

        reports = []
        for name in names:
            library = self._library_repo.get_by_name(name)
            if library is None:
                logger.warning(f"Bibliotheque inconnue dans la configuration du scan: {name}")
                continue
            try:
                reports.append(await self.scan_library(library))
            except Exception:
                logger.exception(f"Echec du scan de la bibliotheque {name}")
        self.last_reports = reports

    @staticmethod
    def _parse_config(config: str) -> Optional[list[str]]:
        if not config or not config.strip():
            return None
        try:
            data = json.loads(config)
        except json.JSONDecodeError as e:
            raise TaskConfigError(f"invalid scanner config: {e}") from e
        if not isinstance(data, dict):
            raise TaskConfigError("scanner config must be a JSON object")
        names = data.get("libraries")
        if names is None:
            return None
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise TaskConfigError("'libraries' must be a list of library names")
        return names

    async def scan_libraries(self) -> list[LibraryScanReport]:
        """
        Scanne toutes les bibliotheques dont le scan automatique est actif.

        L'echec d'une bibliotheque est journalise et n'interrompt pas les autres.
        """
        reports = []
        for library in self._library_repo.list_libraries():
            if not library.auto_scan:
                logger.debug(f"Scan automatique desactive, bibliotheque ignoree: {library.name}")
                continue
            try:
                reports.append(await self.scan_library(library))
            except Exception:
                logger.exception(f"Echec du scan de la bibliotheque {library.name}")
        return reports

    async def scan_library(self, library: Library) -> LibraryScanReport:
        """
        Scanne une bibliotheque.

        Parcourt chaque repertoire actif, pousse les fichiers video dans une
        file consommee par le pool de workers, puis met a jour last_scanned.
        En cas d'annulation, les workers sont annules et last_scanned n'est
        pas modifie.
        """
        report = LibraryScanReport(library_name=library.name)
        logger.info(f"Scan de la bibliotheque {library.name} ({len(library.enabled_paths)} repertoires)")

        queue: asyncio.Queue[Optional[Path]] = asyncio.Queue(maxsize=self._workers * 4)
        workers = [
            asyncio.create_task(self._worker(library, queue, report))
            for _ in range(self._workers)
        ]

        try:
            for library_path in library.enabled_paths:
                root = Path(library_path.path)
                try:
                    files = await asyncio.to_thread(self._collect_video_files, root)
                except OSError as e:
                    logger.error(f"Parcours impossible de {root}: {e}")
                    report.path_errors += 1
                    continue

                logger.debug(f"{len(files)} fichiers video sous {root}")
                for file_path in files:
                    await queue.put(file_path)

            for _ in workers:
                await queue.put(None)
            await asyncio.gather(*workers)
        finally:
            for worker in workers:
                if not worker.done():
                    worker.cancel()
            await asyncio.gather(*workers, return_exceptions=True)

        report.completed = True
        library.last_scanned = utcnow()
        self._mark_scanned(library)

        logger.info(
            f"Scan termine pour {library.name}: {report.processed} traites, "
            f"{report.skipped} ignores, {report.failed} echecs, "
            f"{report.path_errors} repertoires en erreur"
        )
        return report

    def _mark_scanned(self, library: Library) -> None:
        # Relecture : la bibliotheque a pu etre modifiee pendant le scan
        current = self._library_repo.get_by_id(library.id)
        if current is None:
            logger.warning(f"Bibliotheque {library.name} supprimee pendant le scan")
            return
        current.last_scanned = library.last_scanned
        self._library_repo.update(current)

    def _collect_video_files(self, root: Path) -> list[Path]:
        """Liste les fichiers video d'une racine (execute dans un thread)."""
        return [path for path in self._file_system.walk_files(root) if is_video_file(path)]

    async def _worker(
        self,
        library: Library,
        queue: "asyncio.Queue[Optional[Path]]",
        report: LibraryScanReport,
    ) -> None:
        while True:
            file_path = await queue.get()
            try:
                if file_path is None:
                    return
                await self._process_file(library, file_path, report)
            finally:
                queue.task_done()

    async def _process_file(
        self,
        library: Library,
        file_path: Path,
        report: LibraryScanReport,
    ) -> None:
        """Reconcilie un fichier ; toute erreur est isolee a ce fichier."""
        try:
            if library.kind is LibraryKind.SERIES or looks_like_series_episode(file_path):
                result = await self._reconciler.reconcile_episode(library, file_path)
            else:
                result = await self._reconciler.reconcile_movie(library, file_path)
        except ReconciliationError as e:
            logger.error(f"Reconciliation echouee: {e}")
            report.failed += 1
            return
        except Exception:
            logger.exception(f"Erreur inattendue sur {file_path}")
            report.failed += 1
            return

        if result is None:
            report.skipped += 1
        else:
            report.processed += 1
