"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- MediaMetadata : Composite des informations techniques (ffprobe)
- VideoTrack, AudioTrack, SubtitleTrack : Pistes du conteneur
- FileKind : Classification d'un fichier (VIDEO, IGNORED)
- MovieInfo : Titre et annee extraits d'un nom de fichier de film
- EpisodeInfo : Titre, saison et episode extraits d'un nom de fichier
"""

from reelscan.core.value_objects.media_metadata import (
    AudioTrack,
    MediaMetadata,
    SubtitleTrack,
    VideoTrack,
)
from reelscan.core.value_objects.parsed_info import (
    EpisodeInfo,
    FileKind,
    MovieInfo,
)

__all__ = [
    "MediaMetadata",
    "VideoTrack",
    "AudioTrack",
    "SubtitleTrack",
    "FileKind",
    "MovieInfo",
    "EpisodeInfo",
]
