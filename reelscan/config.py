"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe REELSCAN_,
et peut optionnellement être fournie via un fichier .env.

Le jeton TMDB est optionnel - l'appariement au catalogue est désactivé s'il n'est pas fourni.
Les listes de répertoires s'écrivent en JSON : REELSCAN_MOVIE_DIRS='["/media/films"]'
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reelscan.core.errors import InvalidIntervalError
from reelscan.utils.durations import parse_interval

# Fichier .env à la racine du projet (parent de reelscan/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe REELSCAN_.
    Exemple : REELSCAN_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="REELSCAN_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Base de données
    database_url: str = Field(default="sqlite:///reelscan.db")

    # Bibliothèques déclarées par configuration
    movie_dirs: list[Path] = Field(default_factory=list)
    series_dirs: list[Path] = Field(default_factory=list)
    # Accepté pour compatibilité, la surveillance temps réel n'est pas implémentée
    watch_dirs: bool = Field(default=False)

    # Scan
    auto_scan: bool = Field(default=True)
    scan_interval: str = Field(default="12h")
    scan_workers: int = Field(default=4, ge=1, le=64)

    # Nettoyage
    cleanup_enabled: bool = Field(default=True)
    cleanup_interval: str = Field(default="24h")
    cleanup_delete_missing: bool = Field(default=False)
    cleanup_delete_orphaned: bool = Field(default=False)

    # TMDB (OPTIONNEL - appariement désactivé si non défini)
    tmdb_bearer_token: Optional[str] = Field(default=None)
    tmdb_language: str = Field(default="en-US")
    tmdb_include_adult: bool = Field(default=False)
    api_cache_dir: Path = Field(default=Path("~/.cache/reelscan/api"))
    api_cache_ttl: int = Field(default=24 * 60 * 60, ge=0)

    # Sondage technique
    ffprobe_path: str = Field(default="ffprobe")
    probe_timeout: float = Field(default=60.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/reelscan.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("api_cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("movie_dirs", "series_dirs", mode="after")
    @classmethod
    def expand_dirs(cls, v: list[Path]) -> list[Path]:
        return [path.expanduser() for path in v]

    @field_validator("scan_interval", "cleanup_interval")
    @classmethod
    def check_interval(cls, v: str) -> str:
        """Rejette les intervalles illisibles dès le chargement."""
        try:
            parse_interval(v)
        except InvalidIntervalError as e:
            raise ValueError(str(e)) from e
        return v

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_bearer_token)
