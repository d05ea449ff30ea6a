"""
Implementation SQLModel du repository Season.
"""

from typing import Optional

from sqlmodel import select

from reelscan.core.entities.media import Season
from reelscan.core.ports.repositories import ISeasonRepository
from reelscan.infrastructure.persistence.models import SeasonModel
from reelscan.infrastructure.persistence.repositories.base import SQLModelRepository


class SQLModelSeasonRepository(SQLModelRepository, ISeasonRepository):
    """Repository SQLModel pour les saisons, uniques par (serie, numero)."""

    def _to_entity(self, model: SeasonModel) -> Season:
        return Season(
            id=model.id,
            series_id=model.series_id,
            library_id=model.library_id,
            season_number=model.season_number,
            date_added=model.date_added,
            last_scanned=model.last_scanned,
        )

    def _apply(self, model: SeasonModel, entity: Season) -> SeasonModel:
        model.series_id = entity.series_id
        model.library_id = entity.library_id
        model.season_number = entity.season_number
        if entity.date_added is not None:
            model.date_added = entity.date_added
        model.last_scanned = entity.last_scanned
        return model

    def get_by_id(self, season_id: int) -> Optional[Season]:
        """Recupere une saison par son ID interne."""
        model = self._session.get(SeasonModel, season_id)
        if model:
            return self._to_entity(model)
        return None

    def find_by_number(self, series_id: int, season_number: int) -> Optional[Season]:
        """Recupere une saison par (serie, numero)."""
        statement = (
            select(SeasonModel)
            .where(SeasonModel.series_id == series_id)
            .where(SeasonModel.season_number == season_number)
        )
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def create(self, season: Season) -> Season:
        """Insere une saison."""
        model = SeasonModel(series_id=season.series_id, season_number=season.season_number)
        return self._to_entity(self._persist(self._apply(model, season)))

    def update(self, season: Season) -> Season:
        """Met a jour une saison existante."""
        model = self._require(SeasonModel, season.id)
        return self._to_entity(self._persist(self._apply(model, season)))
