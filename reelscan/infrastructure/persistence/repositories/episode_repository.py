"""
Implementation SQLModel du repository Episode.

Implemente l'interface IEpisodeRepository pour la persistance des episodes
dans la base de donnees SQLite via SQLModel.
"""

from typing import Optional

from sqlmodel import select

from reelscan.core.entities.media import Episode
from reelscan.core.ports.repositories import IEpisodeRepository
from reelscan.infrastructure.persistence.models import EpisodeModel
from reelscan.infrastructure.persistence.repositories.base import SQLModelRepository


class SQLModelEpisodeRepository(SQLModelRepository, IEpisodeRepository):
    """
    Repository SQLModel pour les episodes de series.

    Implemente IEpisodeRepository avec conversion bidirectionnelle
    entre l'entite Episode (domaine) et EpisodeModel (persistance).
    """

    def _to_entity(self, model: EpisodeModel) -> Episode:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele EpisodeModel depuis la DB

        Retourne :
            L'entite Episode correspondante
        """
        return Episode(
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
            series_id=model.series_id,
            season_id=model.season_id,
            episode_number=model.episode_number,
            title=model.title,
        )

    def _apply(self, model: EpisodeModel, entity: Episode) -> EpisodeModel:
        """Copie les champs de l'entite sur le modele DB."""
        model.library_id = entity.library_id
        model.series_id = entity.series_id
        model.season_id = entity.season_id
        model.episode_number = entity.episode_number
        model.title = entity.title
        model.file_path = entity.file_path
        model.container = entity.container
        model.codec = entity.codec
        model.resolution_width = entity.resolution_width
        model.resolution_height = entity.resolution_height
        model.audio_channels = entity.audio_channels
        if entity.date_added is not None:
            model.date_added = entity.date_added
        model.last_scanned = entity.last_scanned
        model.deleted_at = entity.deleted_at
        return model

    def get_by_id(self, episode_id: int) -> Optional[Episode]:
        """Recupere un episode par son ID interne."""
        model = self._session.get(EpisodeModel, episode_id)
        if model:
            return self._to_entity(model)
        return None

    def find_by_path(self, file_path: str) -> Optional[Episode]:
        """Recupere un episode par chemin de fichier."""
        statement = select(EpisodeModel).where(EpisodeModel.file_path == file_path)
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def find_by_number(self, season_id: int, episode_number: int) -> Optional[Episode]:
        """Recupere un episode par (saison, numero)."""
        statement = (
            select(EpisodeModel)
            .where(EpisodeModel.season_id == season_id)
            .where(EpisodeModel.episode_number == episode_number)
        )
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def create(self, episode: Episode) -> Episode:
        """Insere un episode."""
        model = EpisodeModel(
            library_id=episode.library_id,
            series_id=episode.series_id,
            season_id=episode.season_id,
            episode_number=episode.episode_number,
            file_path=episode.file_path,
        )
        return self._to_entity(self._persist(self._apply(model, episode)))

    def update(self, episode: Episode) -> Episode:
        """Met a jour un episode existant."""
        model = self._require(EpisodeModel, episode.id)
        return self._to_entity(self._persist(self._apply(model, episode)))

    def list_by_library(self, library_id: int, include_deleted: bool = False) -> list[Episode]:
        """Liste les episodes d'une bibliotheque, par ordre d'insertion."""
        statement = select(EpisodeModel).where(EpisodeModel.library_id == library_id)
        if not include_deleted:
            statement = statement.where(EpisodeModel.deleted_at.is_(None))
        models = self._session.exec(statement.order_by(EpisodeModel.id)).all()
        return [self._to_entity(model) for model in models]
