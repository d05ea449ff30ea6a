"""
Implementation SQLModel du repository Series.
"""

from typing import Optional

from sqlmodel import select

from reelscan.core.entities.media import Series
from reelscan.core.ports.repositories import ISeriesRepository
from reelscan.infrastructure.persistence.models import SeriesModel
from reelscan.infrastructure.persistence.repositories.base import SQLModelRepository


class SQLModelSeriesRepository(SQLModelRepository, ISeriesRepository):
    """
    Repository SQLModel pour les series TV.

    Implemente ISeriesRepository avec conversion bidirectionnelle
    entre l'entite Series (domaine) et SeriesModel (persistance).
    """

    def _to_entity(self, model: SeriesModel) -> Series:
        """Convertit un modele DB en entite domaine."""
        return Series(
            id=model.id,
            library_id=model.library_id,
            title=model.title,
            original_title=model.original_title,
            tmdb_id=model.tmdb_id,
            overview=model.overview,
            first_air_date=model.first_air_date,
            poster_path=model.poster_path,
            backdrop_path=model.backdrop_path,
            vote_average=model.vote_average,
            vote_count=model.vote_count,
            date_added=model.date_added,
            last_scanned=model.last_scanned,
        )

    def _apply(self, model: SeriesModel, entity: Series) -> SeriesModel:
        """Copie les champs de l'entite sur le modele DB."""
        model.library_id = entity.library_id
        model.title = entity.title
        model.original_title = entity.original_title
        model.tmdb_id = entity.tmdb_id
        model.overview = entity.overview
        model.first_air_date = entity.first_air_date
        model.poster_path = entity.poster_path
        model.backdrop_path = entity.backdrop_path
        model.vote_average = entity.vote_average
        model.vote_count = entity.vote_count
        if entity.date_added is not None:
            model.date_added = entity.date_added
        model.last_scanned = entity.last_scanned
        return model

    def get_by_id(self, series_id: int) -> Optional[Series]:
        """Recupere une serie par son ID interne."""
        model = self._session.get(SeriesModel, series_id)
        if model:
            return self._to_entity(model)
        return None

    def get_by_tmdb_id(self, tmdb_id: int) -> Optional[Series]:
        """Recupere une serie par son ID TMDB."""
        statement = (
            select(SeriesModel).where(SeriesModel.tmdb_id == tmdb_id).order_by(SeriesModel.id)
        )
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def find_by_title(self, library_id: int, title: str) -> Optional[Series]:
        """
        Recupere une serie sans ID TMDB par titre exact, dans une bibliotheque.

        Les series identifiees au catalogue ne sont jamais retournees ici :
        leur identite est l'ID TMDB.
        """
        statement = (
            select(SeriesModel)
            .where(SeriesModel.library_id == library_id)
            .where(SeriesModel.title == title)
            .where(SeriesModel.tmdb_id.is_(None))
            .order_by(SeriesModel.id)
        )
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def create(self, series: Series) -> Series:
        """Insere une serie."""
        model = self._apply(SeriesModel(title=series.title, library_id=series.library_id), series)
        return self._to_entity(self._persist(model))

    def update(self, series: Series) -> Series:
        """Met a jour une serie existante."""
        model = self._require(SeriesModel, series.id)
        return self._to_entity(self._persist(self._apply(model, series)))
