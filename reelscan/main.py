"""
Point d'entrée CLI de Reelscan.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import asyncio
import contextlib
import signal
from datetime import datetime
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .logging_config import configure_logging
from .services.bootstrap import ensure_config_libraries, ensure_default_tasks
from .services.scanner import LibraryScanReport

app = typer.Typer(
    name="reelscan",
    help="Scanner de bibliothèques vidéo",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def _prepare() -> Settings:
    """Initialise la base et les bibliothèques déclarées par configuration."""
    settings = get_config()
    container.database.init()
    ensure_config_libraries(container.library_repository(), settings)
    return settings


async def _close_adapters() -> None:
    client = container.tmdb_client()
    if client is not None:
        await client.close()
        container.api_cache().close()


def _format_date(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else "-"


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Reelscan")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Films : {', '.join(str(d) for d in config.movie_dirs) or '-'}")
    typer.echo(f"Séries : {', '.join(str(d) for d in config.series_dirs) or '-'}")
    typer.echo(f"Scan automatique : {'oui' if config.auto_scan else 'non'} ({config.scan_interval})")
    typer.echo(f"Nettoyage : {'oui' if config.cleanup_enabled else 'non'} ({config.cleanup_interval})")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"ffprobe : {config.ffprobe_path}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Reelscan v{__version__}")


@app.command()
def scan(
    library: Annotated[
        Optional[str],
        typer.Option("--library", "-l", help="Nom de la bibliothèque à scanner (défaut: toutes)"),
    ] = None,
) -> None:
    """Scanne les bibliothèques une fois et affiche le bilan."""
    _prepare()
    reports = asyncio.run(_scan_async(library))
    _display_scan_reports(reports)


async def _scan_async(library_name: Optional[str]) -> list[LibraryScanReport]:
    """Implementation async de la commande scan."""
    scanner = container.scanner_service()
    try:
        if library_name is None:
            return await scanner.scan_libraries()

        library = container.library_repository().get_by_name(library_name)
        if library is None:
            console.print(f"[red]Bibliothèque inconnue: {library_name}[/red]")
            raise typer.Exit(1)
        return [await scanner.scan_library(library)]
    finally:
        await _close_adapters()


def _display_scan_reports(reports: list[LibraryScanReport]) -> None:
    if not reports:
        console.print("[yellow]Aucune bibliothèque scannée[/yellow]")
        return

    table = Table(title="Bilan du scan")
    table.add_column("Bibliothèque", style="cyan")
    table.add_column("Traités", justify="right", style="green")
    table.add_column("Ignorés", justify="right")
    table.add_column("Échecs", justify="right", style="red")
    table.add_column("Répertoires en erreur", justify="right", style="red")

    for report in reports:
        table.add_row(
            report.library_name,
            str(report.processed),
            str(report.skipped),
            str(report.failed),
            str(report.path_errors),
        )
    console.print(table)


@app.command()
def tasks() -> None:
    """Liste les tâches planifiées et leur état."""
    settings = _prepare()
    task_repo = container.task_repository()
    ensure_default_tasks(task_repo, settings)

    table = Table(title="Tâches planifiées")
    table.add_column("Nom", style="cyan")
    table.add_column("Type")
    table.add_column("Active")
    table.add_column("Intervalle")
    table.add_column("Statut")
    table.add_column("Dernière exécution")
    table.add_column("Prochaine exécution")

    status_styles = {"idle": "green", "running": "yellow", "failed": "red"}
    for task in task_repo.list_tasks():
        style = status_styles.get(task.status.value, "white")
        table.add_row(
            task.name,
            task.type,
            "oui" if task.enabled else "non",
            task.interval,
            f"[{style}]{task.status.value}[/{style}]",
            _format_date(task.last_run),
            _format_date(task.next_run),
        )
    console.print(table)


@app.command()
def run() -> None:
    """Lance le planificateur jusqu'à interruption (Ctrl-C)."""
    settings = _prepare()
    ensure_default_tasks(container.task_repository(), settings)
    asyncio.run(_run_async())


async def _run_async() -> None:
    """Implementation async de la commande run."""
    scheduler = container.scheduler_service()
    names = scheduler.load_tasks()
    if not names:
        console.print("[yellow]Aucune tâche active à planifier[/yellow]")

    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop.set)

    scheduler.start()
    console.print(f"[green]Planificateur démarré[/green] ({len(names)} tâche(s)), Ctrl-C pour arrêter")
    try:
        await stop.wait()
    finally:
        await scheduler.shutdown(wait=False)
        await _close_adapters()
        logger.info("Arrêt de Reelscan")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    container.database.init()

    logger.info("Démarrage de Reelscan", version=__version__)

    app()


if __name__ == "__main__":
    main()
