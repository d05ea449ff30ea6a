"""
Entité tâche planifiée.

Une tâche planifiée est une unité de travail récurrente (scan, nettoyage)
exécutée par le planificateur à intervalle fixe. Son état d'exécution
est persisté à chaque déclenchement.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class TaskStatus(str, Enum):
    """
    Statut d'exécution d'une tâche.

    Transitions : idle -> running -> (idle | failed) -> running ...
    """

    IDLE = "idle"
    RUNNING = "running"
    FAILED = "failed"


@dataclass
class ScheduledTask:
    """
    Tâche récurrente persistée.

    Attributs :
        id : ID interne en base de données
        name : Nom unique de la tâche
        type : Clé de l'exécuteur dans le registre (ex: "scanner")
        description : Description lisible
        enabled : Si False, la tâche n'est pas planifiée
        interval : Intervalle entre deux exécutions (ex: "24h", "1h30m")
        last_run : Début de la dernière exécution
        next_run : Prochaine exécution prévue (fin + intervalle)
        status : Statut de la dernière exécution
        config : Configuration opaque transmise à l'exécuteur
    """

    id: Optional[int] = None
    name: str = ""
    type: str = ""
    description: str = ""
    enabled: bool = True
    interval: str = ""
    last_run: Optional[datetime] = None
    next_run: Optional[datetime] = None
    status: TaskStatus = TaskStatus.IDLE
    config: str = ""
