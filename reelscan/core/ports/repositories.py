"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel, mocks pour les tests).

Convention : toute recherche retourne None quand l'entité n'existe pas.
L'absence n'est jamais une erreur. Les exceptions sont réservées aux
échecs du stockage lui-même.
"""

from abc import ABC, abstractmethod
from typing import Optional

from reelscan.core.entities.library import Library
from reelscan.core.entities.media import Episode, Movie, Season, Series
from reelscan.core.entities.task import ScheduledTask


class ILibraryRepository(ABC):
    """
    Interface de stockage des bibliothèques.

    Une bibliothèque est toujours chargée avec ses répertoires racines.
    """

    @abstractmethod
    def list_libraries(self) -> list[Library]:
        """Liste toutes les bibliothèques, avec leurs répertoires."""
        ...

    @abstractmethod
    def get_by_id(self, library_id: int) -> Optional[Library]:
        """Récupère une bibliothèque par son ID."""
        ...

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Library]:
        """Récupère une bibliothèque par son nom."""
        ...

    @abstractmethod
    def create(self, library: Library) -> Library:
        """Crée une bibliothèque et ses répertoires. Retourne l'entité avec ID."""
        ...

    @abstractmethod
    def update(self, library: Library) -> Library:
        """Met à jour une bibliothèque (répertoires ajoutés inclus)."""
        ...


class IMovieRepository(ABC):
    """
    Interface de stockage des films.

    Le chemin de fichier est la clé d'identité d'un film.
    """

    @abstractmethod
    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Récupère un film par son ID interne."""
        ...

    @abstractmethod
    def find_by_path(self, file_path: str) -> Optional[Movie]:
        """Récupère un film par chemin de fichier (supprimés logiquement inclus)."""
        ...

    @abstractmethod
    def get_by_tmdb_id(self, tmdb_id: int) -> Optional[Movie]:
        """Récupère le premier film correspondant à un ID TMDB."""
        ...

    @abstractmethod
    def create(self, movie: Movie) -> Movie:
        """Insère un film. Lève une exception si le chemin existe déjà."""
        ...

    @abstractmethod
    def update(self, movie: Movie) -> Movie:
        """Met à jour un film existant."""
        ...

    @abstractmethod
    def list_by_library(self, library_id: int, include_deleted: bool = False) -> list[Movie]:
        """Liste les films d'une bibliothèque."""
        ...


class ISeriesRepository(ABC):
    """Interface de stockage des séries."""

    @abstractmethod
    def get_by_id(self, series_id: int) -> Optional[Series]:
        """Récupère une série par son ID interne."""
        ...

    @abstractmethod
    def get_by_tmdb_id(self, tmdb_id: int) -> Optional[Series]:
        """Récupère une série par son ID TMDB."""
        ...

    @abstractmethod
    def find_by_title(self, library_id: int, title: str) -> Optional[Series]:
        """Récupère une série non référencée au catalogue par son titre."""
        ...

    @abstractmethod
    def create(self, series: Series) -> Series:
        """Insère une série."""
        ...

    @abstractmethod
    def update(self, series: Series) -> Series:
        """Met à jour une série existante."""
        ...


class ISeasonRepository(ABC):
    """Interface de stockage des saisons."""

    @abstractmethod
    def get_by_id(self, season_id: int) -> Optional[Season]:
        """Récupère une saison par son ID interne."""
        ...

    @abstractmethod
    def find_by_number(self, series_id: int, season_number: int) -> Optional[Season]:
        """Récupère une saison par (série, numéro)."""
        ...

    @abstractmethod
    def create(self, season: Season) -> Season:
        """Insère une saison. Unique par (série, numéro)."""
        ...

    @abstractmethod
    def update(self, season: Season) -> Season:
        """Met à jour une saison existante."""
        ...


class IEpisodeRepository(ABC):
    """
    Interface de stockage des épisodes.

    Le chemin de fichier est la clé d'identité d'un épisode.
    """

    @abstractmethod
    def get_by_id(self, episode_id: int) -> Optional[Episode]:
        """Récupère un épisode par son ID interne."""
        ...

    @abstractmethod
    def find_by_path(self, file_path: str) -> Optional[Episode]:
        """Récupère un épisode par chemin de fichier."""
        ...

    @abstractmethod
    def find_by_number(self, season_id: int, episode_number: int) -> Optional[Episode]:
        """Récupère un épisode par (saison, numéro)."""
        ...

    @abstractmethod
    def create(self, episode: Episode) -> Episode:
        """Insère un épisode. Unique par chemin et par (saison, numéro)."""
        ...

    @abstractmethod
    def update(self, episode: Episode) -> Episode:
        """Met à jour un épisode existant."""
        ...

    @abstractmethod
    def list_by_library(self, library_id: int, include_deleted: bool = False) -> list[Episode]:
        """Liste les épisodes d'une bibliothèque."""
        ...


class ITaskRepository(ABC):
    """Interface de stockage des tâches planifiées."""

    @abstractmethod
    def list_tasks(self) -> list[ScheduledTask]:
        """Liste toutes les tâches, activées ou non."""
        ...

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[ScheduledTask]:
        """Récupère une tâche par son nom unique."""
        ...

    @abstractmethod
    def create(self, task: ScheduledTask) -> ScheduledTask:
        """Insère une tâche."""
        ...

    @abstractmethod
    def update(self, task: ScheduledTask) -> ScheduledTask:
        """Met à jour l'état d'une tâche."""
        ...
