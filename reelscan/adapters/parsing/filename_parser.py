"""
Heuristiques regex sur les noms de fichiers video.

Ce module fournit des fonctions pures pour :
- classer un fichier (conteneur video ou fichier ignore)
- detecter un nom d'episode (pre-filtre rapide)
- extraire titre et annee d'un film
- extraire titre, saison et episode d'une serie

Les patterns sont testes dans l'ordre : le premier qui correspond gagne.
Toutes les fonctions travaillent sur le nom du fichier sans extension.
"""

import re
from pathlib import Path
from typing import Union

from reelscan.core.value_objects.parsed_info import EpisodeInfo, FileKind, MovieInfo
from reelscan.utils.constants import VIDEO_EXTENSIONS

PathLike = Union[str, Path]

# Film : annee entre parentheses, entre crochets, puis delimitee par des points
MOVIE_PATTERNS = (
    re.compile(r"^(.*?)\s*\((\d{4})\)"),
    re.compile(r"^(.*?)\s*\[(\d{4})\]"),
    re.compile(r"^(.*?)\.(\d{4})(?:\.|$)"),
)

# Serie : S01E02, 1x02, puis forme compacte 102 (une saison, deux episodes)
EPISODE_PATTERNS = (
    re.compile(r"^(.+?)[\. _-]+S(\d{1,2})E(\d{1,2})", re.IGNORECASE),
    re.compile(r"^(.+?)[\. _-]+(\d{1,2})x(\d{1,2})", re.IGNORECASE),
    re.compile(r"^(.+?)[\. _-]+(\d)(\d{2})(?!\d)", re.IGNORECASE),
)

_EPISODE_HINT = re.compile(
    r"(?<![a-z0-9])(?:s\d{1,2}e\d{1,2}|\d{1,2}x\d{2})(?!\d)",
    re.IGNORECASE,
)

_SEPARATORS = re.compile(r"[._]")
_WHITESPACE = re.compile(r"\s+")


def clean_title(raw: str) -> str:
    """
    Normalise un titre brut.

    Remplace points et underscores par des espaces, fusionne les espaces
    multiples et retire les separateurs en bordure.

    Exemple: "The.Office_US" -> "The Office US"
    """
    title = _SEPARATORS.sub(" ", raw)
    title = _WHITESPACE.sub(" ", title)
    return title.strip(" -")


def is_video_file(path: PathLike) -> bool:
    """Indique si l'extension (insensible a la casse) est un conteneur video."""
    return Path(path).suffix.lower() in VIDEO_EXTENSIONS


def classify_file(path: PathLike) -> FileKind:
    """Classe un fichier rencontre lors du parcours d'une bibliotheque."""
    return FileKind.VIDEO if is_video_file(path) else FileKind.IGNORED


def looks_like_series_episode(path: PathLike) -> bool:
    """
    Pre-filtre rapide : le nom contient-il un marqueur SxxEyy ou NNxMM ?

    Ne garantit pas que parse_series_episode reussira.
    """
    return _EPISODE_HINT.search(Path(path).stem) is not None


def parse_movie(path: PathLike) -> MovieInfo:
    """
    Extrait titre et annee du nom de fichier d'un film.

    Exemples:
        "Inception (2010).mkv" -> MovieInfo("Inception", "2010")
        "The.Matrix.1999.1080p.mkv" -> MovieInfo("The Matrix", "1999")
        "Unknown.Movie.mkv" -> MovieInfo("Unknown Movie", "")

    Sans correspondance, le titre est le nom nettoye et l'annee est vide.
    """
    stem = Path(path).stem

    for pattern in MOVIE_PATTERNS:
        match = pattern.match(stem)
        if match:
            title = clean_title(match.group(1)) or clean_title(stem)
            return MovieInfo(title=title, year=match.group(2))

    return MovieInfo(title=clean_title(stem))


def parse_series_episode(path: PathLike) -> EpisodeInfo:
    """
    Extrait titre de serie, saison et episode du nom de fichier.

    Exemples:
        "The.Office.S02E05.mkv" -> EpisodeInfo("The Office", 2, 5)
        "Show_Name_1x03.avi" -> EpisodeInfo("Show Name", 1, 3)
        "Show Name - 305.mp4" -> EpisodeInfo("Show Name", 3, 5)

    Sans correspondance, saison et episode valent 0 : l'appelant doit
    ignorer le fichier.
    """
    stem = Path(path).stem

    for pattern in EPISODE_PATTERNS:
        match = pattern.match(stem)
        if match:
            return EpisodeInfo(
                title=clean_title(match.group(1)),
                season=int(match.group(2)),
                episode=int(match.group(3)),
            )

    return EpisodeInfo(title=clean_title(stem))
