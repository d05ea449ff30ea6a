"""
Fixtures pytest partagees pour les tests Reelscan.

Ce module contient les fixtures communes utilisees dans les tests:
- Base SQLite en memoire et repositories SQLModel
- Mocks des ports (IMediaExtractor, ICatalogClient, IFileSystem)
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from reelscan.config import Settings
from reelscan.core.entities.library import Library, LibraryKind, LibraryPath
from reelscan.core.ports.catalog import ICatalogClient
from reelscan.core.ports.extractor import IMediaExtractor, ProbeResult
from reelscan.core.ports.file_system import IFileSystem
from reelscan.core.value_objects.media_metadata import AudioTrack, MediaMetadata
from reelscan.infrastructure.persistence.database import create_db_engine, init_db
from reelscan.infrastructure.persistence.repositories import (
    SQLModelEpisodeRepository,
    SQLModelLibraryRepository,
    SQLModelMovieRepository,
    SQLModelSeasonRepository,
    SQLModelSeriesRepository,
    SQLModelTaskRepository,
)


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire avec toutes les tables creees."""
    db_engine = init_db(create_db_engine("sqlite://"))
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel partagee par les repositories d'un test."""
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def library_repo(session: Session) -> SQLModelLibraryRepository:
    return SQLModelLibraryRepository(session)


@pytest.fixture
def movie_repo(session: Session) -> SQLModelMovieRepository:
    return SQLModelMovieRepository(session)


@pytest.fixture
def series_repo(session: Session) -> SQLModelSeriesRepository:
    return SQLModelSeriesRepository(session)


@pytest.fixture
def season_repo(session: Session) -> SQLModelSeasonRepository:
    return SQLModelSeasonRepository(session)


@pytest.fixture
def episode_repo(session: Session) -> SQLModelEpisodeRepository:
    return SQLModelEpisodeRepository(session)


@pytest.fixture
def task_repo(session: Session) -> SQLModelTaskRepository:
    return SQLModelTaskRepository(session)


@pytest.fixture
def sample_metadata() -> MediaMetadata:
    """Metadonnees techniques d'un MKV 1080p H.264 en 5.1."""
    return MediaMetadata(
        filename="/media/films/Inception (2010).mkv",
        format_name="matroska,webm",
        duration=8880.0,
        container="matroska,webm",
        codec="h264",
        resolution_width=1920,
        resolution_height=1080,
        frame_rate="24000/1001",
        audio_tracks=(AudioTrack(index=1, codec="ac3", channels=6, language="eng"),),
    )


@pytest.fixture
def mock_extractor(sample_metadata: MediaMetadata) -> AsyncMock:
    """
    Mock de IMediaExtractor.

    Retourne sample_metadata sans erreur par defaut.
    """
    mock = AsyncMock(spec=IMediaExtractor)
    mock.extract.return_value = ProbeResult(metadata=sample_metadata)
    return mock


@pytest.fixture
def mock_catalog() -> AsyncMock:
    """
    Mock de ICatalogClient.

    Aucun resultat par defaut ; configurer search_movie / search_series
    dans chaque test.
    """
    mock = AsyncMock(spec=ICatalogClient)
    mock.search_movie.return_value = []
    mock.search_series.return_value = []
    return mock


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem.

    Tous les fichiers existent et aucun fichier n'est liste par defaut.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = True
    mock.walk_files.return_value = iter([])
    return mock


@pytest.fixture
def movie_library(library_repo: SQLModelLibraryRepository, tmp_path: Path) -> Library:
    """Bibliotheque de films persistee, racine dans tmp_path/films."""
    root = tmp_path / "films"
    root.mkdir()
    return library_repo.create(
        Library(name="Films", kind=LibraryKind.MOVIE, paths=[LibraryPath(path=str(root))])
    )


@pytest.fixture
def series_library(library_repo: SQLModelLibraryRepository, tmp_path: Path) -> Library:
    """Bibliotheque de series persistee, racine dans tmp_path/series."""
    root = tmp_path / "series"
    root.mkdir()
    return library_repo.create(
        Library(name="Séries", kind=LibraryKind.SERIES, paths=[LibraryPath(path=str(root))])
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Ignore le .env eventuel du poste de developpement.
    """
    movies = tmp_path / "movies"
    series = tmp_path / "tv"
    movies.mkdir()
    series.mkdir()

    return Settings(
        _env_file=None,
        database_url="sqlite://",
        movie_dirs=[movies],
        series_dirs=[series],
        scan_interval="12h",
        cleanup_interval="24h",
        api_cache_dir=tmp_path / "cache",
        log_file=tmp_path / "test.log",
    )
