"""
Interface port pour l'extraction des metadonnees techniques.

L'implementation concrete invoque ffprobe dans un sous-processus
(adapters/parsing/ffprobe_extractor.py).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from reelscan.core.errors import ProbeError
from reelscan.core.value_objects.media_metadata import MediaMetadata


@dataclass(frozen=True)
class ProbeResult:
    """
    Resultat d'un sondage.

    Les deux champs peuvent etre renseignes a la fois : un sondage partiel
    (code de sortie non nul) renvoie les metadonnees encore lisibles ET
    l'erreur. L'appelant journalise l'erreur et utilise les metadonnees.

    Attributs:
        metadata: Metadonnees extraites, None si rien n'est exploitable
        error: Erreur douce rencontree, None si le sondage a reussi
    """

    metadata: Optional[MediaMetadata] = None
    error: Optional[ProbeError] = None

    @property
    def ok(self) -> bool:
        return self.metadata is not None and self.error is None


class IMediaExtractor(ABC):
    """
    Interface pour l'extraction des metadonnees techniques d'un fichier video.
    """

    @abstractmethod
    async def extract(self, file_path: Path) -> ProbeResult:
        """
        Extrait les metadonnees techniques d'un fichier video.

        Ne leve pas d'exception pour un echec de sondage : l'erreur est
        portee par ProbeResult.error. L'annulation de la tache se propage.

        Args:
            file_path: Chemin complet vers le fichier video

        Retourne:
            ProbeResult avec metadonnees et/ou erreur
        """
        ...
