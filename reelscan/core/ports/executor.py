"""
Interface port pour les exécuteurs de tâches planifiées.

Un exécuteur réalise le travail d'un type de tâche ("scanner", "cleanup").
Il reçoit la configuration opaque de la tâche et lève une exception en
cas d'échec, ce qui fait passer la tâche au statut "failed".
"""

from abc import ABC, abstractmethod


class ITaskExecutor(ABC):
    """Contrat d'un exécuteur de tâche."""

    @abstractmethod
    async def execute(self, config: str) -> None:
        """
        Exécute la tâche.

        Args :
            config : Configuration opaque de la tâche (JSON ou chaîne vide)

        Lève :
            Toute exception signale un échec de l'exécution.
        """
        ...

    @abstractmethod
    def description(self) -> str:
        """Description lisible de l'exécuteur."""
        ...
