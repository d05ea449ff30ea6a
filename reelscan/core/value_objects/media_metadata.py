"""
Objets valeur pour les métadonnées techniques.

Objets valeur immutables représentant le résultat d'un sondage ffprobe :
format du conteneur, pistes vidéo, audio et sous-titres.
Tous les objets valeur utilisent @dataclass(frozen=True).
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class VideoTrack:
    """
    Piste vidéo.

    Attributs :
        index : Index du flux dans le conteneur
        codec_name : Nom court du codec (ex: "hevc", "h264")
        codec_long_name : Nom complet du codec
        profile : Profil du codec (ex: "Main 10")
        width / height : Dimensions d'affichage en pixels
        coded_width / coded_height : Dimensions codées
        frame_rate : Cadence moyenne sous forme de fraction (ex: "24000/1001")
        side_data : Données annexes brutes (Dolby Vision, HDR...)
    """

    index: int = 0
    codec_name: str = ""
    codec_long_name: str = ""
    profile: str = ""
    width: int = 0
    height: int = 0
    coded_width: int = 0
    coded_height: int = 0
    has_b_frames: int = 0
    frame_rate: str = ""
    sample_aspect_ratio: str = ""
    display_aspect_ratio: str = ""
    pix_fmt: str = ""
    level: int = 0
    color_range: str = ""
    color_space: str = ""
    color_transfer: str = ""
    color_primaries: str = ""
    chroma_location: str = ""
    field_order: str = ""
    refs: int = 0
    tags: dict[str, str] = field(default_factory=dict)
    disposition: dict[str, int] = field(default_factory=dict)
    side_data: tuple[dict, ...] = ()


@dataclass(frozen=True)
class AudioTrack:
    """
    Piste audio.

    Attributs :
        index : Index du flux dans le conteneur
        codec : Nom court du codec (ex: "aac", "dts")
        channels : Nombre de canaux
        sample_rate : Fréquence d'échantillonnage (chaîne brute ffprobe)
        language : Code langue issu de tags.language ("" si absent)
        bit_rate : Débit en bits/s (0 si absent ou illisible)
    """

    index: int = 0
    codec: str = ""
    channels: int = 0
    sample_rate: str = ""
    language: str = ""
    bit_rate: int = 0
    tags: dict[str, str] = field(default_factory=dict)
    disposition: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class SubtitleTrack:
    """Piste de sous-titres."""

    index: int = 0
    codec_name: str = ""
    codec_long_name: str = ""
    language: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    disposition: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class MediaMetadata:
    """
    Objet valeur composite contenant les métadonnées techniques d'un fichier.

    Les champs codec, resolution_width, resolution_height et frame_rate
    reprennent la PREMIÈRE piste vidéo. Les champs numériques du format
    (duration, size, bit_rate) restent à zéro si ffprobe renvoie une valeur
    illisible ; chaque échec est alors décrit dans warnings.

    Attributs :
        filename : Chemin du fichier sondé
        container : Nom du format (format_name ffprobe, ex: "matroska,webm")
        duration : Durée en secondes
        size : Taille en octets
        bit_rate : Débit global en bits/s
        warnings : Champs non décodés, sous forme lisible
    """

    filename: str = ""
    format_name: str = ""
    format_long_name: str = ""
    duration: float = 0.0
    size: int = 0
    bit_rate: int = 0
    probe_score: int = 0
    container: str = ""
    codec: str = ""
    resolution_width: int = 0
    resolution_height: int = 0
    frame_rate: str = ""
    video_tracks: tuple[VideoTrack, ...] = ()
    audio_tracks: tuple[AudioTrack, ...] = ()
    subtitle_tracks: tuple[SubtitleTrack, ...] = ()
    tags: dict[str, str] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()

    @property
    def audio_channels(self) -> int:
        """Nombre de canaux de la première piste audio (0 si aucune)."""
        if not self.audio_tracks:
            return 0
        return self.audio_tracks[0].channels

    @property
    def primary_audio_language(self) -> Optional[str]:
        """Langue de la première piste audio, None si inconnue."""
        if not self.audio_tracks or not self.audio_tracks[0].language:
            return None
        return self.audio_tracks[0].language
