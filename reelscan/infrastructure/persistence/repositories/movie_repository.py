"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance des films
dans la base de donnees SQLite via SQLModel.
"""

from typing import Optional

from sqlmodel import select

from reelscan.core.entities.media import Movie
from reelscan.core.ports.repositories import IMovieRepository
from reelscan.infrastructure.persistence.models import MovieModel
from reelscan.infrastructure.persistence.repositories.base import SQLModelRepository


class SQLModelMovieRepository(SQLModelRepository, IMovieRepository):
    """
    Repository SQLModel pour les films.

    Implemente IMovieRepository avec conversion bidirectionnelle
    entre l'entite Movie (domaine) et MovieModel (persistance).
    """

    def _to_entity(self, model: MovieModel) -> Movie:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele MovieModel depuis la DB

        Retourne :
            L'entite Movie correspondante
        """
        return Movie(
            id=model.id,
            library_id=model.library_id,
            file_path=model.file_path,
            container=model.container,
            codec=model.codec,
            resolution_width=model.resolution_width,
            resolution_height=model.resolution_height,
            audio_channels=model.audio_channels,
            date_added=model.date_added,
            last_scanned=model.last_scanned,
            deleted_at=model.deleted_at,
            title=model.title,
            original_title=model.original_title,
            tmdb_id=model.tmdb_id,
            overview=model.overview,
            release_date=model.release_date,
            poster_path=model.poster_path,
            backdrop_path=model.backdrop_path,
            vote_average=model.vote_average,
            vote_count=model.vote_count,
        )

    def _apply(self, model: MovieModel, entity: Movie) -> MovieModel:
        """Copie les champs de l'entite sur le modele DB."""
        model.library_id = entity.library_id
        model.file_path = entity.file_path
        model.container = entity.container
        model.codec = entity.codec
        model.resolution_width = entity.resolution_width
        model.resolution_height = entity.resolution_height
        model.audio_channels = entity.audio_channels
        model.title = entity.title
        model.original_title = entity.original_title
        model.tmdb_id = entity.tmdb_id
        model.overview = entity.overview
        model.release_date = entity.release_date
        model.poster_path = entity.poster_path
        model.backdrop_path = entity.backdrop_path
        model.vote_average = entity.vote_average
        model.vote_count = entity.vote_count
        if entity.date_added is not None:
            model.date_added = entity.date_added
        model.last_scanned = entity.last_scanned
        model.deleted_at = entity.deleted_at
        return model

    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Recupere un film par son ID interne."""
        model = self._session.get(MovieModel, movie_id)
        if model:
            return self._to_entity(model)
        return None

    def find_by_path(self, file_path: str) -> Optional[Movie]:
        """Recupere un film par chemin de fichier."""
        statement = select(MovieModel).where(MovieModel.file_path == file_path)
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def get_by_tmdb_id(self, tmdb_id: int) -> Optional[Movie]:
        """Recupere le premier film correspondant a un ID TMDB."""
        statement = (
            select(MovieModel).where(MovieModel.tmdb_id == tmdb_id).order_by(MovieModel.id)
        )
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def create(self, movie: Movie) -> Movie:
        """Insere un film (le chemin doit etre nouveau)."""
        model = MovieModel(
            library_id=movie.library_id, file_path=movie.file_path, title=movie.title
        )
        return self._to_entity(self._persist(self._apply(model, movie)))

    def update(self, movie: Movie) -> Movie:
        """Met a jour un film existant."""
        model = self._require(MovieModel, movie.id)
        return self._to_entity(self._persist(self._apply(model, movie)))

    def list_by_library(self, library_id: int, include_deleted: bool = False) -> list[Movie]:
        """Liste les films d'une bibliotheque, par ordre d'insertion."""
        statement = select(MovieModel).where(MovieModel.library_id == library_id)
        if not include_deleted:
            statement = statement.where(MovieModel.deleted_at.is_(None))
        models = self._session.exec(statement.order_by(MovieModel.id)).all()
        return [self._to_entity(model) for model in models]
