"""
Planificateur des taches recurrentes.

Charge les taches persistees, associe chaque type de tache a un executeur
enregistre, et planifie chacune sur son propre intervalle avec APScheduler.

Cycle d'une tache: idle -> running -> (idle | failed) -> running ...
L'etat "running" est persiste AVANT l'appel a l'executeur ; le statut final
et next_run = fin + intervalle sont persistes apres, et le job APScheduler
est recale sur ce next_run. Deux declenchements d'une meme tache ne se
chevauchent jamais (max_instances=1), mais des taches differentes peuvent
s'executer en parallele.
"""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from loguru import logger

from reelscan.core.entities.task import ScheduledTask, TaskStatus
from reelscan.core.errors import InvalidIntervalError
from reelscan.core.ports.executor import ITaskExecutor
from reelscan.core.ports.repositories import ITaskRepository
from reelscan.utils.durations import parse_interval
from reelscan.utils.helpers import utcnow


class TaskRegistry:
    """
    Table type de tache -> executeur.

    Injectee dans le planificateur ; un enregistrement ulterieur pour le
    meme type remplace le precedent.
    """

    def __init__(self) -> None:
        self._executors: dict[str, ITaskExecutor] = {}

    def register(self, task_type: str, executor: ITaskExecutor) -> None:
        self._executors[task_type] = executor

    def get(self, task_type: str) -> Optional[ITaskExecutor]:
        return self._executors.get(task_type)

    def types(self) -> list[str]:
        return sorted(self._executors)

    def __contains__(self, task_type: str) -> bool:
        return task_type in self._executors


class SchedulerService:
    """
    Service de planification des taches.

    Attributes:
        JOB_PREFIX: Prefixe des identifiants de job APScheduler
    """

    JOB_PREFIX = "task:"

    def __init__(
        self,
        task_repo: ITaskRepository,
        registry: TaskRegistry,
        scheduler: Optional[AsyncIOScheduler] = None,
    ) -> None:
        """
        Initialise le planificateur.

        Args:
            task_repo: Repository des taches planifiees
            registry: Registre des executeurs
            scheduler: Instance APScheduler (creee si absente)
        """
        self._task_repo = task_repo
        self._registry = registry
        self._scheduler = scheduler or AsyncIOScheduler(timezone="UTC")

    @property
    def running(self) -> bool:
        return self._scheduler.running

    def register_task(self, task_type: str, executor: ITaskExecutor) -> None:
        """Enregistre l'executeur d'un type de tache."""
        self._registry.register(task_type, executor)
        logger.debug(f"Executeur enregistre pour '{task_type}': {executor.description()}")

    def load_tasks(self) -> list[str]:
        """
        Planifie toutes les taches actives.

        Les taches desactivees sont ignorees. Un type inconnu ou un intervalle
        invalide est journalise et la tache est ignoree, sans interrompre le
        chargement des autres.

        Returns:
            Noms des taches planifiees

        Raises:
            Exception: Si la lecture des taches echoue
        """
        scheduled = []
        for task in self._task_repo.list_tasks():
            if not task.enabled:
                logger.debug(f"Tache desactivee, ignoree: {task.name}")
                continue

            executor = self._registry.get(task.type)
            if executor is None:
                logger.warning(f"Type de tache inconnu '{task.type}', tache ignoree: {task.name}")
                continue

            try:
                interval = parse_interval(task.interval)
            except InvalidIntervalError as e:
                logger.error(f"Intervalle invalide pour la tache {task.name}: {e}")
                continue

            job_kwargs = {}
            if task.next_run is not None and task.next_run > utcnow():
                job_kwargs["next_run_time"] = task.next_run.replace(tzinfo=timezone.utc)

            self._scheduler.add_job(
                self.run_task,
                trigger=IntervalTrigger(seconds=interval.total_seconds()),
                args=[task, executor],
                id=f"{self.JOB_PREFIX}{task.name}",
                name=task.name,
                replace_existing=True,
                max_instances=1,
                coalesce=True,
                **job_kwargs,
            )
            scheduled.append(task.name)
            logger.info(f"Tache planifiee: {task.name} ({task.type}) toutes les {task.interval}")

        return scheduled

    def start(self) -> None:
        """Demarre le planificateur (doit etre appele dans une boucle asyncio)."""
        if not self._scheduler.running:
            self._scheduler.start()
            logger.info("Planificateur demarre")

    async def shutdown(self, wait: bool = True) -> None:
        """
        Arrete le planificateur.

        AsyncIOScheduler peut differer l'arret sur la boucle : on lui cede
        la main avant de constater l'arret.
        """
        if self._scheduler.running:
            self._scheduler.shutdown(wait=wait)
            await asyncio.sleep(0)
            logger.info("Planificateur arrete")

    def _reschedule(self, name: str, next_run: datetime) -> None:
        """Recale le prochain declenchement du job sur next_run (UTC naif)."""
        job_id = f"{self.JOB_PREFIX}{name}"
        if self._scheduler.get_job(job_id) is None:
            return
        self._scheduler.modify_job(job_id, next_run_time=next_run.replace(tzinfo=timezone.utc))

    def scheduled_jobs(self) -> list[tuple[str, Optional[str]]]:
        """Retourne (nom, prochaine execution ISO) pour chaque tache planifiee."""
        jobs = []
        for job in self._scheduler.get_jobs():
            next_run = getattr(job, "next_run_time", None)
            jobs.append((job.name, next_run.isoformat() if next_run else None))
        return jobs

    async def run_task(self, task: ScheduledTask, executor: ITaskExecutor) -> bool:
        """
        Execute un declenchement d'une tache.

        Une erreur de l'executeur est un echec de la tache, pas du
        planificateur. Une erreur de persistance est journalisee et
        signalee par le retour, jamais propagee.

        Returns:
            True si l'etat final a ete persiste
        """
        logger.info(f"Tache {task.name} demarree")

        task.status = TaskStatus.RUNNING
        task.last_run = utcnow()
        try:
            self._task_repo.update(task)
        except Exception:
            logger.exception(f"Impossible de persister le statut running de {task.name}")
            return False

        try:
            await executor.execute(task.config)
        except Exception:
            task.status = TaskStatus.FAILED
            logger.exception(f"Tache {task.name} en echec")
        else:
            task.status = TaskStatus.IDLE
            logger.info(f"Tache {task.name} terminee")

        try:
            interval = parse_interval(task.interval)
        except InvalidIntervalError as e:
            logger.error(f"Intervalle invalide pour la tache {task.name}: {e}")
            interval = None

        if interval is not None:
            task.next_run = utcnow() + interval
            self._reschedule(task.name, task.next_run)

        try:
            self._task_repo.update(task)
        except Exception:
            logger.exception(f"Impossible de persister l'etat final de {task.name}")
            return False

        return interval is not None
