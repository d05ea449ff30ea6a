"""
Constantes globales pour Reelscan.

Ce module contient les constantes partagees par les adaptateurs et services:
- Extensions video supportees
- Noms et types des taches par defaut
- Parametres du catalogue TMDB
"""

# Extensions video reconnues (conteneurs uniquement)
VIDEO_EXTENSIONS = frozenset({
    ".mp4",
    ".mkv",
    ".avi",
    ".mov",
    ".m4v",
    ".webm",
    ".wmv",
    ".flv",
    ".ts",
})

# Types de taches (cles du registre d'executeurs)
TASK_TYPE_SCANNER = "scanner"
TASK_TYPE_CLEANUP = "cleanup"

# Taches creees au demarrage
DEFAULT_SCAN_TASK_NAME = "library-scan"
DEFAULT_CLEANUP_TASK_NAME = "cleanup"

# Bibliotheques creees depuis la configuration
DEFAULT_MOVIE_LIBRARY_NAME = "Movies"
DEFAULT_SERIES_LIBRARY_NAME = "Series"

# Catalogue TMDB
TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_MIN_YEAR = 1000
TMDB_MAX_YEAR = 9999
