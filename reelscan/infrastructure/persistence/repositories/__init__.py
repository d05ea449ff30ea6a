"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans reelscan/core/ports/repositories.py, utilisant SQLModel pour
la persistance SQLite.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from reelscan.infrastructure.persistence.repositories.episode_repository import (
    SQLModelEpisodeRepository,
)
from reelscan.infrastructure.persistence.repositories.library_repository import (
    SQLModelLibraryRepository,
)
from reelscan.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)
from reelscan.infrastructure.persistence.repositories.season_repository import (
    SQLModelSeasonRepository,
)
from reelscan.infrastructure.persistence.repositories.series_repository import (
    SQLModelSeriesRepository,
)
from reelscan.infrastructure.persistence.repositories.task_repository import (
    SQLModelTaskRepository,
)

__all__ = [
    "SQLModelLibraryRepository",
    "SQLModelMovieRepository",
    "SQLModelSeriesRepository",
    "SQLModelSeasonRepository",
    "SQLModelEpisodeRepository",
    "SQLModelTaskRepository",
]
