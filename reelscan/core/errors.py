"""
Erreurs du domaine Reelscan.

Taxonomie :
- L'absence d'une entite n'est JAMAIS une erreur : les repositories
  retournent None.
- ProbeError : echec (souvent partiel) de l'outil de sondage media.
  Erreur "douce", journalisee, le pipeline continue.
- CatalogError / CatalogUnavailableError : echec du catalogue de
  metadonnees. CatalogError porte le code renvoye par le fournisseur,
  CatalogUnavailableError couvre les pannes de transport (timeout, DNS,
  connexion coupee). Les deux classes sont volontairement disjointes.
- ReconciliationError : echec dur pour un fichier, isole a ce fichier.
- InvalidIntervalError / TaskConfigError : erreurs de configuration,
  remontees au chargement des taches.
"""

from typing import Optional


class ReelscanError(Exception):
    """Classe de base de toutes les erreurs Reelscan."""


class ProbeError(ReelscanError):
    """
    Echec de l'extraction des metadonnees techniques.

    Attributes:
        exit_code: Code de sortie de l'outil de sondage (None si non lance)
        stderr: Sortie d'erreur capturee (peut etre vide)
    """

    def __init__(
        self,
        message: str,
        exit_code: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(message)


class CatalogError(ReelscanError):
    """
    Erreur renvoyee par le catalogue (reponse HTTP non 2xx).

    Attributes:
        status_code: Code d'erreur du fournisseur (status_code TMDB si present,
                     sinon le code HTTP)
        message: Message du fournisseur (status_message TMDB)
        http_status: Code HTTP de la reponse
    """

    def __init__(self, status_code: int, message: str, http_status: Optional[int] = None) -> None:
        self.status_code = status_code
        self.message = message
        self.http_status = http_status if http_status is not None else status_code
        super().__init__(f"Catalog error: {message} (code: {status_code})")


class CatalogUnavailableError(ReelscanError):
    """Le catalogue est injoignable (timeout, DNS, connexion reinitialisee)."""


class ReconciliationError(ReelscanError):
    """
    Echec de reconciliation d'un fichier.

    Attributes:
        path: Chemin du fichier concerne
        step: Etape de reconciliation en echec (ex: "store season")
    """

    def __init__(self, path: str, step: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.step = step
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{step} failed for {path}{detail}")


class InvalidIntervalError(ReelscanError):
    """Chaine de duree invalide (ex: "24x", "", "-1h")."""

    def __init__(self, value: str, reason: str = "invalid duration") -> None:
        self.value = value
        super().__init__(f"{reason}: {value!r}")


class TaskConfigError(ReelscanError):
    """Configuration opaque d'une tache illisible par son executeur."""
