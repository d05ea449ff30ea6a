"""
Interface port pour le système de fichiers.

Interface abstraite (port) définissant les opérations fichiers dont ont
besoin le scanner (parcours récursif) et le nettoyage (existence).
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path


class IFileSystem(ABC):
    """
    Interface pour les opérations de lecture sur le système de fichiers.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        ...

    @abstractmethod
    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Parcourt récursivement un répertoire racine.

        Args :
            root : Répertoire racine d'une bibliothèque

        Retourne :
            Itérateur sur les fichiers réguliers

        Lève :
            OSError : Si la racine est absente ou illisible
        """
        ...
