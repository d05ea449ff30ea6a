"""
Configuration de la base de donnees SQLite pour Reelscan.

Ce module fournit :
- La creation de l'engine (partage de connexion pour les bases en memoire)
- La fonction d'initialisation des tables

L'engine est construit par le container a partir de REELSCAN_DATABASE_URL
(defaut: sqlite:///reelscan.db).
"""

from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine


def create_db_engine(database_url: str) -> Engine:
    """
    Cree un engine SQLAlchemy pour l'URL donnee.

    Une base en memoire partage une connexion unique (StaticPool) pour
    que toutes les sessions voient les memes tables.
    """
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    # Creer le repertoire parent si l'URL est un fichier SQLite
    if database_url.startswith("sqlite:///"):
        db_path = Path(database_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False} if database_url.startswith("sqlite") else {},
    )


def init_db(engine: Engine) -> Engine:
    """
    Initialise la base de donnees en creant toutes les tables absentes.

    Doit etre appelee une fois au demarrage de l'application.

    Returns:
        L'engine, pour usage comme ressource du container
    """
    # L'import enregistre les tables dans SQLModel.metadata
    from reelscan.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug(f"Base de donnees initialisee ({engine.url})")
    return engine
