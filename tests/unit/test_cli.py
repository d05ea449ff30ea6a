"""
Tests des commandes CLI (typer) avec un container configure pour les tests.

La base est en memoire, TMDB est desactive et l'extracteur est simule.
"""

from pathlib import Path

import pytest
from dependency_injector import providers
from rich.console import Console
from typer.testing import CliRunner

from reelscan import __version__
from reelscan import main as cli
from reelscan.core.entities.task import TaskStatus

runner = CliRunner()


@pytest.fixture
def cli_container(monkeypatch, test_settings, mock_extractor):
    """Container surcharge : settings de test, ffprobe simule, console large."""
    settings = test_settings.model_copy(update={"tmdb_bearer_token": None})
    container = cli.container
    container.config.override(providers.Object(settings))
    container.media_extractor.override(providers.Object(mock_extractor))
    monkeypatch.setattr(cli, "console", Console(width=200))

    yield container

    container.shutdown_resources()
    container.reset_singletons()
    container.media_extractor.reset_override()
    container.config.reset_override()


class TestInfoAndVersion:
    def test_version(self, cli_container) -> None:
        result = runner.invoke(cli.app, ["version"])

        assert result.exit_code == 0
        assert f"Reelscan v{__version__}" in result.output

    def test_info(self, cli_container, test_settings) -> None:
        result = runner.invoke(cli.app, ["info"])

        assert result.exit_code == 0
        assert "sqlite://" in result.output
        assert str(test_settings.movie_dirs[0]) in result.output
        assert "désactivée" in result.output


class TestScanCommand:
    def test_scan_all_libraries(self, cli_container, test_settings) -> None:
        movies: Path = test_settings.movie_dirs[0]
        (movies / "Heat (1995).mkv").write_bytes(b"\x00")
        (movies / "notes.txt").write_text("x")

        result = runner.invoke(cli.app, ["scan"])

        assert result.exit_code == 0, result.output
        assert "Bilan du scan" in result.output
        assert "Movies" in result.output
        assert "Series" in result.output
        library = cli_container.library_repository().get_by_name("Movies")
        titles = [m.title for m in cli_container.movie_repository().list_by_library(library.id)]
        assert titles == ["Heat"]
        assert library.last_scanned is not None

    def test_scan_single_library(self, cli_container, test_settings) -> None:
        (test_settings.series_dirs[0] / "Show.S01E01.mkv").write_bytes(b"\x00")

        result = runner.invoke(cli.app, ["scan", "--library", "Series"])

        assert result.exit_code == 0, result.output
        assert "Series" in result.output
        assert "Movies" not in result.output

    def test_scan_unknown_library(self, cli_container) -> None:
        result = runner.invoke(cli.app, ["scan", "-l", "Inconnue"])

        assert result.exit_code == 1
        assert "Bibliothèque inconnue" in result.output


class TestTasksCommand:
    def test_lists_default_tasks(self, cli_container) -> None:
        result = runner.invoke(cli.app, ["tasks"])

        assert result.exit_code == 0, result.output
        assert "library-scan" in result.output
        assert "cleanup" in result.output
        assert "12h" in result.output
        tasks = cli_container.task_repository().list_tasks()
        assert {t.status for t in tasks} == {TaskStatus.IDLE}
