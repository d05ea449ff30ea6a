"""
Base commune des repositories SQLModel.
"""

from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel

ModelT = TypeVar("ModelT", bound=SQLModel)


class SQLModelRepository:
    """
    Repository adosse a une session SQLModel.

    Chaque ecriture est validee immediatement (commit). En cas d'echec,
    la session est remise en etat (rollback) puis l'erreur est propagee :
    une contrainte violee sur un fichier ne bloque pas les suivants.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _persist(self, model: ModelT) -> ModelT:
        """Ajoute ou met a jour un modele, commit et refresh."""
        try:
            self._session.add(model)
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise
        self._session.refresh(model)
        return model

    def _require(self, model_type: type[ModelT], entity_id: int | None) -> ModelT:
        """Charge un modele existant pour une mise a jour."""
        model = self._session.get(model_type, entity_id) if entity_id is not None else None
        if model is None:
            raise LookupError(f"{model_type.__tablename__} #{entity_id} introuvable pour mise a jour")
        return model
