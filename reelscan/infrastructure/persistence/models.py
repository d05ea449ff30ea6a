"""
Modeles SQLModel pour la base de donnees Reelscan.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- libraries / library_paths: Bibliotheques configurees et leurs racines
- movies: Films (un par chemin de fichier)
- series / seasons / episodes: Graphe des series
- scheduled_tasks: Taches recurrentes et leur etat d'execution

Contraintes d'unicite:
- movies.file_path, episodes.file_path
- (seasons.series_id, seasons.season_number)
- (episodes.season_id, episodes.episode_number)
- scheduled_tasks.name, libraries.name
"""

from typing import Any

from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel, UniqueConstraint

from reelscan.utils.helpers import utcnow


def date_field(**kwargs: Any) -> Any:
    """Colonne date en UTC naif (SQLite ne conserve pas le fuseau)."""
    if "default_factory" not in kwargs:
        kwargs.setdefault("default", None)
    return Field(sa_type=DateTime(), **kwargs)


class LibraryModel(SQLModel, table=True):
    """Modele representant une bibliotheque."""

    __tablename__ = "libraries"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)
    kind: str = Field(default="movie")  # "movie" ou "series"
    description: str = ""
    auto_scan: bool = True
    scan_interval: str = ""
    last_scanned: NaiveDatetime | None = date_field()
    created_at: NaiveDatetime | None = date_field(default_factory=utcnow)


class LibraryPathModel(SQLModel, table=True):
    """Modele representant un repertoire racine d'une bibliotheque."""

    __tablename__ = "library_paths"
    __table_args__ = (
        UniqueConstraint("library_id", "path", name="uq_library_paths_library_path"),
    )

    id: int | None = Field(default=None, primary_key=True)
    library_id: int = Field(foreign_key="libraries.id", index=True)
    path: str
    enabled: bool = True


class MovieModel(SQLModel, table=True):
    """
    Modele representant un film dans la base de donnees.

    Le chemin du fichier est la cle d'idempotence des rescans.
    deleted_at est renseigne par le nettoyage quand le fichier a disparu.
    """

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    library_id: int = Field(foreign_key="libraries.id", index=True)
    file_path: str = Field(unique=True, index=True)
    container: str = ""
    codec: str = ""
    resolution_width: int = 0
    resolution_height: int = 0
    audio_channels: int = 0
    title: str = Field(index=True)
    original_title: str = ""
    tmdb_id: int | None = Field(default=None, index=True)
    overview: str = ""
    release_date: NaiveDatetime | None = date_field()
    poster_path: str = ""
    backdrop_path: str = ""
    vote_average: float = 0.0
    vote_count: int = 0
    date_added: NaiveDatetime | None = date_field(default_factory=utcnow)
    last_scanned: NaiveDatetime | None = date_field()
    deleted_at: NaiveDatetime | None = date_field(index=True)


class SeriesModel(SQLModel, table=True):
    """
    Modele representant une serie TV.

    Identite: tmdb_id si la serie a ete trouvee au catalogue, sinon le titre.
    """

    __tablename__ = "series"

    id: int | None = Field(default=None, primary_key=True)
    library_id: int = Field(foreign_key="libraries.id", index=True)
    title: str = Field(index=True)
    original_title: str = ""
    tmdb_id: int | None = Field(default=None, index=True)
    overview: str = ""
    first_air_date: NaiveDatetime | None = date_field()
    poster_path: str = ""
    backdrop_path: str = ""
    vote_average: float = 0.0
    vote_count: int = 0
    date_added: NaiveDatetime | None = date_field(default_factory=utcnow)
    last_scanned: NaiveDatetime | None = date_field()


class SeasonModel(SQLModel, table=True):
    """Modele representant une saison, unique par (serie, numero)."""

    __tablename__ = "seasons"
    __table_args__ = (
        UniqueConstraint("series_id", "season_number", name="uq_seasons_series_number"),
    )

    id: int | None = Field(default=None, primary_key=True)
    series_id: int = Field(foreign_key="series.id", index=True)
    library_id: int | None = Field(default=None, foreign_key="libraries.id")
    season_number: int
    date_added: NaiveDatetime | None = date_field(default_factory=utcnow)
    last_scanned: NaiveDatetime | None = date_field()


class EpisodeModel(SQLModel, table=True):
    """
    Modele representant un episode de serie TV.

    Lie a sa saison et (de maniere redondante) a sa serie.
    """

    __tablename__ = "episodes"
    __table_args__ = (
        UniqueConstraint("season_id", "episode_number", name="uq_episodes_season_number"),
    )

    id: int | None = Field(default=None, primary_key=True)
    library_id: int = Field(foreign_key="libraries.id", index=True)
    series_id: int = Field(foreign_key="series.id", index=True)
    season_id: int = Field(foreign_key="seasons.id", index=True)
    episode_number: int
    title: str = ""
    file_path: str = Field(unique=True, index=True)
    container: str = ""
    codec: str = ""
    resolution_width: int = 0
    resolution_height: int = 0
    audio_channels: int = 0
    date_added: NaiveDatetime | None = date_field(default_factory=utcnow)
    last_scanned: NaiveDatetime | None = date_field()
    deleted_at: NaiveDatetime | None = date_field(index=True)


class ScheduledTaskModel(SQLModel, table=True):
    """Modele representant une tache planifiee et son dernier etat."""

    __tablename__ = "scheduled_tasks"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)
    type: str
    description: str = ""
    enabled: bool = True
    interval: str = ""
    last_run: NaiveDatetime | None = date_field()
    next_run: NaiveDatetime | None = date_field()
    status: str = Field(default="idle")  # idle, running, failed
    config: str = ""
