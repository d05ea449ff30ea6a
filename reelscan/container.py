"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et le planificateur.
Les repositories partagent une session unique, utilisee depuis la boucle asyncio.
"""

from typing import Callable, Optional

from dependency_injector import containers, providers
from loguru import logger
from sqlmodel import Session

from .adapters.api.cache import APICache
from .adapters.api.tmdb_client import TMDBClient
from .adapters.file_system import FileSystemAdapter
from .adapters.parsing.ffprobe_extractor import FFprobeExtractor
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelEpisodeRepository,
    SQLModelLibraryRepository,
    SQLModelMovieRepository,
    SQLModelSeasonRepository,
    SQLModelSeriesRepository,
    SQLModelTaskRepository,
)
from .services.cleanup import CleanupService
from .services.reconciler import ReconcilerService
from .services.scanner import ScannerService
from .services.scheduler import SchedulerService, TaskRegistry
from .utils.constants import TASK_TYPE_CLEANUP, TASK_TYPE_SCANNER


def build_catalog_client(
    settings: Settings, cache: Callable[[], APICache]
) -> Optional[TMDBClient]:
    """Cree le client TMDB, ou None si aucun jeton n'est configure."""
    if not settings.tmdb_enabled:
        logger.info("Jeton TMDB absent, appariement catalogue desactive")
        return None
    return TMDBClient(
        bearer_token=settings.tmdb_bearer_token,
        language=settings.tmdb_language,
        include_adult=settings.tmdb_include_adult,
        cache=cache(),
    )


def build_task_registry(scanner: ScannerService, cleanup: CleanupService) -> TaskRegistry:
    """Enregistre les executeurs connus sous leur type de tache."""
    registry = TaskRegistry()
    registry.register(TASK_TYPE_SCANNER, scanner)
    registry.register(TASK_TYPE_CLEANUP, cleanup)
    return registry


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        scanner = container.scanner_service()
        scheduler = container.scheduler_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database
    engine = providers.Singleton(create_db_engine, database_url=config.provided.database_url)
    database = providers.Resource(init_db, engine=engine)
    session = providers.Singleton(Session, engine)

    # Repositories - partagent la session
    library_repository = providers.Factory(SQLModelLibraryRepository, session=session)
    movie_repository = providers.Factory(SQLModelMovieRepository, session=session)
    series_repository = providers.Factory(SQLModelSeriesRepository, session=session)
    season_repository = providers.Factory(SQLModelSeasonRepository, session=session)
    episode_repository = providers.Factory(SQLModelEpisodeRepository, session=session)
    task_repository = providers.Factory(SQLModelTaskRepository, session=session)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    media_extractor = providers.Singleton(
        FFprobeExtractor,
        ffprobe_path=config.provided.ffprobe_path,
        timeout=config.provided.probe_timeout,
    )

    # Cache API - cree uniquement si le client TMDB est actif
    api_cache = providers.Singleton(
        APICache,
        cache_dir=config.provided.api_cache_dir,
        search_ttl=config.provided.api_cache_ttl,
    )
    tmdb_client = providers.Singleton(
        build_catalog_client,
        settings=config,
        cache=api_cache.provider,
    )

    # Services
    reconciler_service = providers.Singleton(
        ReconcilerService,
        movie_repo=movie_repository,
        series_repo=series_repository,
        season_repo=season_repository,
        episode_repo=episode_repository,
        extractor=media_extractor,
        catalog=tmdb_client,
    )
    scanner_service = providers.Singleton(
        ScannerService,
        library_repo=library_repository,
        reconciler=reconciler_service,
        file_system=file_system,
        workers=config.provided.scan_workers,
    )
    cleanup_service = providers.Singleton(
        CleanupService,
        library_repo=library_repository,
        movie_repo=movie_repository,
        episode_repo=episode_repository,
        file_system=file_system,
        delete_missing=config.provided.cleanup_delete_missing,
        delete_orphaned=config.provided.cleanup_delete_orphaned,
    )

    # Planification
    task_registry = providers.Singleton(
        build_task_registry,
        scanner=scanner_service,
        cleanup=cleanup_service,
    )
    scheduler_service = providers.Singleton(
        SchedulerService,
        task_repo=task_repository,
        registry=task_registry,
    )
