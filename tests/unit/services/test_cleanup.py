"""
Tests unitaires pour CleanupService.

Verifie:
- Detection des fichiers absents (films et episodes)
- Suppression logique uniquement si delete_missing est actif
- Surcharge par la configuration JSON de la tache
- Isolation des echecs par bibliotheque
"""

from pathlib import Path

import pytest

from reelscan.adapters.file_system import FileSystemAdapter
from reelscan.core.entities.library import Library
from reelscan.core.entities.media import Episode, Movie, Season, Series
from reelscan.core.errors import TaskConfigError
from reelscan.services.cleanup import CleanupService


@pytest.fixture
def films(movie_library, movie_repo) -> tuple[Movie, Movie]:
    """Deux films : l'un present sur disque, l'autre disparu."""
    root = Path(movie_library.paths[0].path)
    present = root / "Heat (1995).mkv"
    present.write_bytes(b"\x00")
    kept = movie_repo.create(
        Movie(library_id=movie_library.id, file_path=str(present), title="Heat")
    )
    gone = movie_repo.create(
        Movie(library_id=movie_library.id, file_path=str(root / "Gone (2001).mkv"), title="Gone")
    )
    return kept, gone


@pytest.fixture
def lost_episode(series_library, series_repo, season_repo, episode_repo) -> Episode:
    series = series_repo.create(Series(library_id=series_library.id, title="Show"))
    season = season_repo.create(
        Season(series_id=series.id, library_id=series_library.id, season_number=1)
    )
    return episode_repo.create(
        Episode(
            library_id=series_library.id,
            file_path=str(Path(series_library.paths[0].path) / "Show.S01E01.mkv"),
            series_id=series.id,
            season_id=season.id,
            episode_number=1,
        )
    )


def _service(library_repo, movie_repo, episode_repo, **kwargs) -> CleanupService:
    return CleanupService(library_repo, movie_repo, episode_repo, FileSystemAdapter(), **kwargs)


class TestCleanupRun:
    @pytest.mark.asyncio
    async def test_report_only_by_default(
        self, library_repo, movie_repo, episode_repo, films, movie_library
    ) -> None:
        service = _service(library_repo, movie_repo, episode_repo)

        report = await service.run()

        assert (report.checked, report.missing, report.deleted) == (2, 1, 0)
        assert len(movie_repo.list_by_library(movie_library.id)) == 2

    @pytest.mark.asyncio
    async def test_missing_files_are_soft_deleted(
        self, library_repo, movie_repo, episode_repo, films, lost_episode, movie_library,
        series_library,
    ) -> None:
        kept, gone = films
        service = _service(library_repo, movie_repo, episode_repo, delete_missing=True)

        report = await service.run()

        assert (report.checked, report.missing, report.deleted) == (3, 2, 2)
        assert [m.id for m in movie_repo.list_by_library(movie_library.id)] == [kept.id]
        assert movie_repo.get_by_id(gone.id).deleted_at is not None
        assert episode_repo.list_by_library(series_library.id) == []
        assert episode_repo.get_by_id(lost_episode.id).deleted_at is not None

    @pytest.mark.asyncio
    async def test_already_deleted_items_are_not_rechecked(
        self, library_repo, movie_repo, episode_repo, films
    ) -> None:
        service = _service(library_repo, movie_repo, episode_repo, delete_missing=True)
        await service.run()

        report = await service.run()

        assert (report.checked, report.missing, report.deleted) == (1, 0, 0)

    @pytest.mark.asyncio
    async def test_soft_delete_keeps_concurrent_changes(
        self, library_repo, movie_repo, episode_repo, films, movie_library, monkeypatch
    ) -> None:
        _, gone = films
        listed = movie_repo.list_by_library(movie_library.id)
        renamed = movie_repo.get_by_id(gone.id)
        renamed.title = "Gone Baby Gone"
        movie_repo.update(renamed)
        monkeypatch.setattr(movie_repo, "list_by_library", lambda library_id: listed)
        service = _service(library_repo, movie_repo, episode_repo, delete_missing=True)

        report = await service.run()

        stored = movie_repo.get_by_id(gone.id)
        assert report.deleted == 1
        assert stored.deleted_at is not None
        assert stored.title == "Gone Baby Gone"

    @pytest.mark.asyncio
    async def test_explicit_argument_overrides_default(
        self, library_repo, movie_repo, episode_repo, films
    ) -> None:
        service = _service(library_repo, movie_repo, episode_repo, delete_missing=True)

        report = await service.run(delete_missing=False)

        assert report.deleted == 0

    @pytest.mark.asyncio
    async def test_delete_orphaned_is_accepted(
        self, library_repo, movie_repo, episode_repo, films
    ) -> None:
        service = _service(library_repo, movie_repo, episode_repo, delete_orphaned=True)

        report = await service.run()

        assert report.missing == 1

    @pytest.mark.asyncio
    async def test_failing_library_does_not_stop_others(
        self, library_repo, movie_repo, episode_repo, films, mock_file_system
    ) -> None:
        library_repo.create(Library(name="Cassee"))
        calls = []

        def exists(path: Path) -> bool:
            calls.append(path)
            if "Gone" in path.name:
                raise PermissionError(13, "Permission denied")
            return True

        mock_file_system.exists.side_effect = exists
        other = library_repo.get_by_name("Cassee")
        movie_repo.create(
            Movie(library_id=other.id, file_path="/nas/cassee/Lost (2000).mkv", title="Lost")
        )
        service = CleanupService(
            library_repo, movie_repo, episode_repo, mock_file_system, delete_missing=True
        )

        report = await service.run()

        # La premiere bibliotheque echoue, la seconde est traitee
        assert report.checked == 1
        assert report.deleted == 0
        assert any(p.name == "Lost (2000).mkv" for p in calls)


class TestCleanupExecute:
    @pytest.mark.asyncio
    async def test_blank_config_uses_defaults(
        self, library_repo, movie_repo, episode_repo, films
    ) -> None:
        service = _service(library_repo, movie_repo, episode_repo)

        await service.execute("")

        assert service.last_report.missing == 1
        assert service.last_report.deleted == 0

    @pytest.mark.asyncio
    async def test_config_enables_deletion(
        self, library_repo, movie_repo, episode_repo, films
    ) -> None:
        service = _service(library_repo, movie_repo, episode_repo)

        await service.execute('{"delete_missing": true}')

        assert service.last_report.deleted == 1

    @pytest.mark.asyncio
    async def test_config_disables_deletion(
        self, library_repo, movie_repo, episode_repo, films
    ) -> None:
        service = _service(library_repo, movie_repo, episode_repo, delete_missing=True)

        await service.execute('{"delete_missing": false}')

        assert service.last_report.deleted == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("config", ["{oops", '"delete"', "[true]"])
    async def test_invalid_config(self, library_repo, movie_repo, episode_repo, config) -> None:
        service = _service(library_repo, movie_repo, episode_repo)

        with pytest.raises(TaskConfigError):
            await service.execute(config)

        assert service.last_report is None

    def test_description(self, library_repo, movie_repo, episode_repo) -> None:
        assert _service(library_repo, movie_repo, episode_repo).description()
