"""
Objets valeur pour les informations de parsing de noms de fichiers.

Objets valeur immutables representant les informations extraites
d'un nom de fichier video par les heuristiques regex.
"""

from dataclasses import dataclass
from enum import Enum


class FileKind(Enum):
    """Classification d'un fichier rencontre lors du parcours.

    Valeurs:
        VIDEO: Conteneur video reconnu (candidat a la reconciliation)
        IGNORED: Tout autre fichier (sous-titres, images, nfo...)
    """

    VIDEO = "video"
    IGNORED = "ignored"


@dataclass(frozen=True)
class MovieInfo:
    """
    Informations extraites du nom de fichier d'un film.

    Attributs:
        title: Titre nettoye (jamais vide pour un nom non vide)
        year: Annee sur 4 chiffres, "" si absente
    """

    title: str
    year: str = ""

    @property
    def year_int(self) -> int | None:
        """Retourne l'annee en entier, None si absente."""
        return int(self.year) if self.year else None


@dataclass(frozen=True)
class EpisodeInfo:
    """
    Informations extraites du nom de fichier d'un episode.

    Attributs:
        title: Titre de la serie nettoye
        season: Numero de saison (0 si non reconnu)
        episode: Numero d'episode (0 si non reconnu)
    """

    title: str
    season: int = 0
    episode: int = 0

    @property
    def is_valid(self) -> bool:
        """Un episode est exploitable si saison et episode sont non nuls."""
        return self.season > 0 and self.episode > 0
