"""
Configuration du logging de l'application via loguru.

Deux sorties :
- stderr : colorée, pour suivre un scan ou le planificateur en direct
- fichier : une ligne JSON par événement, avec rotation, pour relire les
  exécutions planifiées après coup

Les bibliothèques qui journalisent via le module logging standard
(APScheduler, SQLAlchemy) sont redirigées vers loguru.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

# Loggers standards trop bavards au niveau INFO
_QUIET_LOGGERS = ("apscheduler.executors", "apscheduler.scheduler", "httpx", "sqlalchemy.engine")


class _LoguruHandler(logging.Handler):
    """Transmet les enregistrements du module logging à loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/reelscan.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum sur stderr (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # sondages ffprobe et requêtes TMDB
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logging.basicConfig(handlers=[_LoguruHandler()], level=logging.INFO, force=True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
