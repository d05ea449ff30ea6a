"""
Utilitaires et constantes pour Reelscan.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from reelscan.utils.constants import (
    TASK_TYPE_CLEANUP,
    TASK_TYPE_SCANNER,
    VIDEO_EXTENSIONS,
)
from reelscan.utils.durations import is_valid_interval, parse_interval

__all__ = [
    "VIDEO_EXTENSIONS",
    "TASK_TYPE_SCANNER",
    "TASK_TYPE_CLEANUP",
    "parse_interval",
    "is_valid_interval",
]
