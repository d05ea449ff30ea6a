"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- ILibraryRepository, IMovieRepository, ISeriesRepository,
  ISeasonRepository, IEpisodeRepository, ITaskRepository

Ports externes :
- ICatalogClient : Catalogue de métadonnées (TMDB)
- IMediaExtractor : Sondage technique des fichiers (ffprobe)
- IFileSystem : Parcours des répertoires de bibliothèque
- ITaskExecutor : Exécuteur d'un type de tâche planifiée
"""

from reelscan.core.ports.catalog import CatalogMovie, CatalogSeries, ICatalogClient
from reelscan.core.ports.executor import ITaskExecutor
from reelscan.core.ports.extractor import IMediaExtractor, ProbeResult
from reelscan.core.ports.file_system import IFileSystem
from reelscan.core.ports.repositories import (
    IEpisodeRepository,
    ILibraryRepository,
    IMovieRepository,
    ISeasonRepository,
    ISeriesRepository,
    ITaskRepository,
)

__all__ = [
    # Repositories
    "ILibraryRepository",
    "IMovieRepository",
    "ISeriesRepository",
    "ISeasonRepository",
    "IEpisodeRepository",
    "ITaskRepository",
    # Catalogue
    "ICatalogClient",
    "CatalogMovie",
    "CatalogSeries",
    # Sondage
    "IMediaExtractor",
    "ProbeResult",
    # Système de fichiers
    "IFileSystem",
    # Tâches
    "ITaskExecutor",
]
