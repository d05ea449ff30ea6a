"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Client catalogue TMDB (httpx, tenacity, diskcache)
- parsing/ : Heuristiques de noms de fichiers et sondage ffprobe
- file_system : Parcours des bibliothèques

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from reelscan.adapters.file_system import FileSystemAdapter
from reelscan.adapters.parsing.ffprobe_extractor import FFprobeExtractor

__all__ = [
    "FileSystemAdapter",
    "FFprobeExtractor",
]
