"""
Module de persistance SQLite pour Reelscan.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine SQLite, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports repository

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from sqlmodel import Session
    from reelscan.infrastructure.persistence import create_db_engine, init_db

    engine = init_db(create_db_engine("sqlite:///reelscan.db"))
    session = Session(engine)
"""

from reelscan.infrastructure.persistence.database import create_db_engine, init_db

__all__ = [
    "create_db_engine",
    "init_db",
]
