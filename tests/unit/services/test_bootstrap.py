"""
Tests des initialisations de demarrage (taches et bibliotheques par defaut).
"""

from pathlib import Path

from reelscan.core.entities.library import Library, LibraryKind, LibraryPath
from reelscan.core.entities.task import ScheduledTask, TaskStatus
from reelscan.services.bootstrap import ensure_config_libraries, ensure_default_tasks


class TestEnsureDefaultTasks:
    def test_creates_defaults_from_settings(self, task_repo, test_settings) -> None:
        settings = test_settings.model_copy(update={"auto_scan": False, "scan_interval": "6h"})

        created = ensure_default_tasks(task_repo, settings)

        assert created == ["library-scan", "cleanup"]
        scan = task_repo.get_by_name("library-scan")
        assert scan.type == "scanner"
        assert scan.interval == "6h"
        assert scan.enabled is False
        cleanup = task_repo.get_by_name("cleanup")
        assert cleanup.type == "cleanup"
        assert cleanup.interval == "24h"
        assert cleanup.enabled is True

    def test_is_idempotent(self, task_repo, test_settings) -> None:
        ensure_default_tasks(task_repo, test_settings)

        assert ensure_default_tasks(task_repo, test_settings) == []
        assert len(task_repo.list_tasks()) == 2

    def test_existing_task_is_not_overwritten(self, task_repo, test_settings) -> None:
        task_repo.create(ScheduledTask(name="library-scan", type="scanner", interval="1h"))

        created = ensure_default_tasks(task_repo, test_settings)

        assert created == ["cleanup"]
        assert task_repo.get_by_name("library-scan").interval == "1h"

    def test_interrupted_task_is_marked_failed(self, task_repo, test_settings) -> None:
        task_repo.create(
            ScheduledTask(name="custom", type="scanner", interval="1h", status=TaskStatus.RUNNING)
        )

        ensure_default_tasks(task_repo, test_settings)

        assert task_repo.get_by_name("custom").status is TaskStatus.FAILED
        assert task_repo.get_by_name("cleanup").status is TaskStatus.IDLE


class TestEnsureConfigLibraries:
    def test_creates_libraries_from_settings(self, library_repo, test_settings) -> None:
        touched = ensure_config_libraries(library_repo, test_settings)

        assert touched == ["Movies", "Series"]
        movies = library_repo.get_by_name("Movies")
        assert movies.kind is LibraryKind.MOVIE
        assert [p.path for p in movies.paths] == [str(test_settings.movie_dirs[0])]
        assert library_repo.get_by_name("Series").kind is LibraryKind.SERIES

    def test_empty_dirs_create_nothing(self, library_repo, test_settings) -> None:
        settings = test_settings.model_copy(update={"movie_dirs": [], "series_dirs": []})

        assert ensure_config_libraries(library_repo, settings) == []
        assert library_repo.list_libraries() == []

    def test_second_call_changes_nothing(self, library_repo, test_settings) -> None:
        ensure_config_libraries(library_repo, test_settings)

        assert ensure_config_libraries(library_repo, test_settings) == []

    def test_new_directory_is_appended(
        self, library_repo, test_settings, tmp_path: Path
    ) -> None:
        library_repo.create(
            Library(
                name="Movies",
                kind=LibraryKind.MOVIE,
                paths=[LibraryPath(path="/already/known")],
            )
        )

        touched = ensure_config_libraries(library_repo, test_settings)

        assert touched == ["Movies", "Series"]
        paths = [p.path for p in library_repo.get_by_name("Movies").paths]
        assert paths == ["/already/known", str(tmp_path / "movies")]
