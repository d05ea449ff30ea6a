"""
Initialisation des donnees au demarrage.

Cree les taches planifiees par defaut et les bibliotheques declarees dans
la configuration. Les deux fonctions sont idempotentes : un second appel
ne modifie rien.
"""

from pathlib import Path

from loguru import logger

from reelscan.config import Settings
from reelscan.core.entities.library import Library, LibraryKind, LibraryPath
from reelscan.core.entities.task import ScheduledTask, TaskStatus
from reelscan.core.ports.repositories import ILibraryRepository, ITaskRepository
from reelscan.utils.constants import (
    DEFAULT_CLEANUP_TASK_NAME,
    DEFAULT_MOVIE_LIBRARY_NAME,
    DEFAULT_SCAN_TASK_NAME,
    DEFAULT_SERIES_LIBRARY_NAME,
    TASK_TYPE_CLEANUP,
    TASK_TYPE_SCANNER,
)


def ensure_default_tasks(task_repo: ITaskRepository, settings: Settings) -> list[str]:
    """
    Cree les taches par defaut absentes et reinitialise les executions interrompues.

    Une tache restee "running" (arret brutal pendant une execution) passe
    en "failed". Les taches existantes ne sont pas modifiees autrement.

    Returns:
        Noms des taches creees
    """
    defaults = [
        ScheduledTask(
            name=DEFAULT_SCAN_TASK_NAME,
            type=TASK_TYPE_SCANNER,
            description="Scan all libraries and reconcile new files",
            enabled=settings.auto_scan,
            interval=settings.scan_interval,
        ),
        ScheduledTask(
            name=DEFAULT_CLEANUP_TASK_NAME,
            type=TASK_TYPE_CLEANUP,
            description="Mark items whose files disappeared as deleted",
            enabled=settings.cleanup_enabled,
            interval=settings.cleanup_interval,
        ),
    ]

    created = []
    for task in defaults:
        if task_repo.get_by_name(task.name) is None:
            task_repo.create(task)
            created.append(task.name)
            logger.info(f"Tache par defaut creee: {task.name} ({task.interval})")

    for task in task_repo.list_tasks():
        if task.status is TaskStatus.RUNNING:
            logger.warning(f"Execution interrompue detectee, tache marquee en echec: {task.name}")
            task.status = TaskStatus.FAILED
            task_repo.update(task)

    return created


def ensure_config_libraries(library_repo: ILibraryRepository, settings: Settings) -> list[str]:
    """
    Cree ou complete les bibliotheques declarees par configuration.

    Returns:
        Noms des bibliotheques creees ou modifiees
    """
    touched = []
    for name, kind, dirs in (
        (DEFAULT_MOVIE_LIBRARY_NAME, LibraryKind.MOVIE, settings.movie_dirs),
        (DEFAULT_SERIES_LIBRARY_NAME, LibraryKind.SERIES, settings.series_dirs),
    ):
        if dirs and _ensure_library(library_repo, name, kind, dirs):
            touched.append(name)
    return touched


def _ensure_library(
    library_repo: ILibraryRepository,
    name: str,
    kind: LibraryKind,
    dirs: list[Path],
) -> bool:
    paths = [str(d) for d in dirs]
    library = library_repo.get_by_name(name)

    if library is None:
        library_repo.create(
            Library(
                name=name,
                kind=kind,
                paths=[LibraryPath(path=p) for p in paths],
            )
        )
        logger.info(f"Bibliotheque creee: {name} ({len(paths)} repertoires)")
        return True

    known = {p.path for p in library.paths}
    missing = [p for p in paths if p not in known]
    if not missing:
        return False

    library.paths.extend(LibraryPath(library_id=library.id, path=p) for p in missing)
    library_repo.update(library)
    logger.info(f"Bibliotheque {name}: {len(missing)} repertoire(s) ajoute(s)")
    return True
