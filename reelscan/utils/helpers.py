"""
Fonctions utilitaires partagees.
"""

from datetime import date, datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """
    Retourne l'instant courant en UTC, sans tzinfo.

    SQLite ne conserve pas le fuseau : toutes les dates de l'application
    sont donc des datetimes naifs exprimes en UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_catalog_date(value: Optional[str]) -> Optional[datetime]:
    """
    Convertit une date catalogue "YYYY-MM-DD" en datetime.

    Retourne None pour une valeur vide.

    Raises:
        ValueError: Si la date n'est pas au format attendu
    """
    if not value:
        return None
    parsed = date.fromisoformat(value)
    return datetime(parsed.year, parsed.month, parsed.day)
