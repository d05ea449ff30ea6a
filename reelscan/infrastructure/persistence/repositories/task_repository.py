"""
Implementation SQLModel du repository des taches planifiees.
"""

from typing import Optional

from sqlmodel import select

from reelscan.core.entities.task import ScheduledTask, TaskStatus
from reelscan.core.ports.repositories import ITaskRepository
from reelscan.infrastructure.persistence.models import ScheduledTaskModel
from reelscan.infrastructure.persistence.repositories.base import SQLModelRepository


class SQLModelTaskRepository(SQLModelRepository, ITaskRepository):
    """
    Repository SQLModel pour les taches planifiees.

    Le statut est stocke sous forme de chaine ("idle", "running", "failed").
    """

    def _to_entity(self, model: ScheduledTaskModel) -> ScheduledTask:
        return ScheduledTask(
            id=model.id,
            name=model.name,
            type=model.type,
            description=model.description,
            enabled=model.enabled,
            interval=model.interval,
            last_run=model.last_run,
            next_run=model.next_run,
            status=TaskStatus(model.status),
            config=model.config,
        )

    def _apply(self, model: ScheduledTaskModel, entity: ScheduledTask) -> ScheduledTaskModel:
        model.name = entity.name
        model.type = entity.type
        model.description = entity.description
        model.enabled = entity.enabled
        model.interval = entity.interval
        model.last_run = entity.last_run
        model.next_run = entity.next_run
        model.status = entity.status.value
        model.config = entity.config
        return model

    def list_tasks(self) -> list[ScheduledTask]:
        """Liste toutes les taches, par ordre de creation."""
        models = self._session.exec(
            select(ScheduledTaskModel).order_by(ScheduledTaskModel.id)
        ).all()
        return [self._to_entity(model) for model in models]

    def get_by_name(self, name: str) -> Optional[ScheduledTask]:
        """Recupere une tache par son nom."""
        statement = select(ScheduledTaskModel).where(ScheduledTaskModel.name == name)
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def create(self, task: ScheduledTask) -> ScheduledTask:
        """Insere une tache."""
        model = ScheduledTaskModel(name=task.name, type=task.type)
        return self._to_entity(self._persist(self._apply(model, task)))

    def update(self, task: ScheduledTask) -> ScheduledTask:
        """Met a jour une tache existante."""
        model = self._require(ScheduledTaskModel, task.id)
        return self._to_entity(self._persist(self._apply(model, task)))
