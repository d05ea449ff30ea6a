"""
Implementation SQLModel du repository Library.

Une bibliotheque est toujours chargee et sauvegardee avec ses repertoires
racines (table library_paths).
"""

from typing import Optional

from sqlmodel import select

from reelscan.core.entities.library import Library, LibraryKind, LibraryPath
from reelscan.core.ports.repositories import ILibraryRepository
from reelscan.infrastructure.persistence.models import LibraryModel, LibraryPathModel
from reelscan.infrastructure.persistence.repositories.base import SQLModelRepository


class SQLModelLibraryRepository(SQLModelRepository, ILibraryRepository):
    """
    Repository SQLModel pour les bibliotheques.

    Implemente ILibraryRepository avec conversion bidirectionnelle
    entre l'entite Library (domaine) et LibraryModel + LibraryPathModel.
    """

    def _to_entity(self, model: LibraryModel) -> Library:
        """Convertit un modele DB (et ses repertoires) en entite domaine."""
        statement = (
            select(LibraryPathModel)
            .where(LibraryPathModel.library_id == model.id)
            .order_by(LibraryPathModel.id)
        )
        paths = [
            LibraryPath(id=p.id, library_id=p.library_id, path=p.path, enabled=p.enabled)
            for p in self._session.exec(statement).all()
        ]
        return Library(
            id=model.id,
            name=model.name,
            kind=LibraryKind(model.kind),
            description=model.description,
            paths=paths,
            auto_scan=model.auto_scan,
            scan_interval=model.scan_interval,
            last_scanned=model.last_scanned,
        )

    def _apply(self, model: LibraryModel, entity: Library) -> LibraryModel:
        model.name = entity.name
        model.kind = entity.kind.value
        model.description = entity.description
        model.auto_scan = entity.auto_scan
        model.scan_interval = entity.scan_interval
        model.last_scanned = entity.last_scanned
        return model

    def _save_paths(self, library_id: int, paths: list[LibraryPath]) -> None:
        """Synchronise les repertoires: ajoute les nouveaux, met a jour les autres."""
        existing = {
            p.path: p
            for p in self._session.exec(
                select(LibraryPathModel).where(LibraryPathModel.library_id == library_id)
            ).all()
        }
        for path in paths:
            model = existing.get(path.path)
            if model is None:
                model = LibraryPathModel(library_id=library_id, path=path.path)
            model.enabled = path.enabled
            self._persist(model)

    def list_libraries(self) -> list[Library]:
        """Liste toutes les bibliotheques, par ordre de creation."""
        models = self._session.exec(select(LibraryModel).order_by(LibraryModel.id)).all()
        return [self._to_entity(model) for model in models]

    def get_by_id(self, library_id: int) -> Optional[Library]:
        """Recupere une bibliotheque par son ID."""
        model = self._session.get(LibraryModel, library_id)
        if model:
            return self._to_entity(model)
        return None

    def get_by_name(self, name: str) -> Optional[Library]:
        """Recupere une bibliotheque par son nom."""
        statement = select(LibraryModel).where(LibraryModel.name == name)
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def create(self, library: Library) -> Library:
        """Cree une bibliotheque et ses repertoires."""
        model = self._persist(self._apply(LibraryModel(name=library.name), library))
        self._save_paths(model.id, library.paths)
        return self._to_entity(model)

    def update(self, library: Library) -> Library:
        """Met a jour une bibliotheque et synchronise ses repertoires."""
        model = self._require(LibraryModel, library.id)
        model = self._persist(self._apply(model, library))
        self._save_paths(model.id, library.paths)
        return self._to_entity(model)
