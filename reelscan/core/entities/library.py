"""
Entités bibliothèque.

Une bibliothèque regroupe un ensemble de répertoires racines scannés
ensemble, pour un type de contenu donné (films ou séries).
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class LibraryKind(str, Enum):
    """Type de contenu d'une bibliothèque."""

    MOVIE = "movie"
    SERIES = "series"


@dataclass
class LibraryPath:
    """
    Répertoire racine d'une bibliothèque.

    Attributs :
        id : ID interne en base de données
        library_id : Bibliothèque propriétaire
        path : Chemin absolu du répertoire racine
        enabled : Si False, le répertoire est ignoré lors du scan
    """

    id: Optional[int] = None
    library_id: Optional[int] = None
    path: str = ""
    enabled: bool = True


@dataclass
class Library:
    """
    Bibliothèque média.

    Attributs :
        id : ID interne en base de données
        name : Nom unique de la bibliothèque
        kind : Type de contenu (films ou séries)
        description : Description libre
        paths : Répertoires racines, dans l'ordre de déclaration
        auto_scan : Inclure la bibliothèque dans les scans planifiés
        scan_interval : Intervalle de scan souhaité (chaîne de durée)
        last_scanned : Date de fin du dernier scan complet
    """

    id: Optional[int] = None
    name: str = ""
    kind: LibraryKind = LibraryKind.MOVIE
    description: str = ""
    paths: list[LibraryPath] = field(default_factory=list)
    auto_scan: bool = True
    scan_interval: str = ""
    last_scanned: Optional[datetime] = None

    @property
    def enabled_paths(self) -> list[LibraryPath]:
        """Retourne les répertoires actifs, dans l'ordre."""
        return [p for p in self.paths if p.enabled]
