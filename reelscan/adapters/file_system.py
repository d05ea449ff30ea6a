"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour le parcours des bibliotheques.
"""

import os
from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from reelscan.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Les erreurs sur la racine sont levees (l'appelant les compte comme
    erreur de chemin). Les erreurs sur un sous-repertoire sont journalisees
    et le parcours continue.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Parcourt recursivement un repertoire, fichiers tries par nom.

        Les liens symboliques vers des repertoires ne sont pas suivis.

        Raises:
            FileNotFoundError: Si la racine n'existe pas
            NotADirectoryError: Si la racine n'est pas un repertoire
        """
        if not root.exists():
            raise FileNotFoundError(f"Library root not found: {root}")
        if not root.is_dir():
            raise NotADirectoryError(f"Library root is not a directory: {root}")

        def _on_error(error: OSError) -> None:
            logger.warning(f"Repertoire illisible ignore: {error.filename} ({error.strerror})")

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if path.is_file():
                    yield path
