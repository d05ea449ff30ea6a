"""
Parsing de la sortie JSON de ffprobe.

Ce module fournit :
- Un schema pydantic tolerant (ProbeDocument) pour la sortie
  `ffprobe -print_format json -show_format -show_streams`
- parse_probe_output() qui convertit ce document en MediaMetadata

Les echecs de parsing sont par champ et non fatals : une duree, une taille
ou un debit illisible est journalise, laisse a zero et decrit dans
MediaMetadata.warnings. Seul un document JSON invalide leve ProbeError.
"""

import math
from collections.abc import Callable
from typing import Any, Optional, TypeVar, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from reelscan.core.errors import ProbeError
from reelscan.core.value_objects.media_metadata import (
    AudioTrack,
    MediaMetadata,
    SubtitleTrack,
    VideoTrack,
)

T = TypeVar("T")


def _lenient_int(value: Any) -> Optional[int]:
    """Convertit en entier, None si la valeur est absente ou illisible."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class _ProbeModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class ProbeFormat(_ProbeModel):
    """Bloc `format` de la sortie ffprobe."""

    filename: str = ""
    format_name: str = ""
    format_long_name: str = ""
    duration: Optional[str] = None
    size: Optional[str] = None
    bit_rate: Optional[str] = None
    probe_score: Optional[int] = None
    tags: dict[str, str] = Field(default_factory=dict)

    @field_validator("probe_score", mode="before")
    @classmethod
    def _int_fields(cls, value: Any) -> Optional[int]:
        return _lenient_int(value)


class ProbeStream(_ProbeModel):
    """Un element du tableau `streams` de la sortie ffprobe."""

    index: Optional[int] = None
    codec_name: str = ""
    codec_long_name: str = ""
    codec_type: str = ""
    profile: str = ""

    width: Optional[int] = None
    height: Optional[int] = None
    coded_width: Optional[int] = None
    coded_height: Optional[int] = None
    has_b_frames: Optional[int] = None
    avg_frame_rate: str = ""
    sample_aspect_ratio: str = ""
    display_aspect_ratio: str = ""
    pix_fmt: str = ""
    level: Optional[int] = None
    color_range: str = ""
    color_space: str = ""
    color_transfer: str = ""
    color_primaries: str = ""
    chroma_location: str = ""
    field_order: str = ""
    refs: Optional[int] = None

    channels: Optional[int] = None
    sample_rate: str = ""
    bit_rate: Optional[str] = None

    disposition: dict[str, int] = Field(default_factory=dict)
    tags: dict[str, str] = Field(default_factory=dict)
    side_data_list: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator(
        "index",
        "width",
        "height",
        "coded_width",
        "coded_height",
        "has_b_frames",
        "level",
        "refs",
        "channels",
        mode="before",
    )
    @classmethod
    def _int_fields(cls, value: Any) -> Optional[int]:
        return _lenient_int(value)

    @field_validator("disposition", mode="before")
    @classmethod
    def _disposition(cls, value: Any) -> dict[str, int]:
        if not isinstance(value, dict):
            return {}
        return {k: v for k, v in ((k, _lenient_int(v)) for k, v in value.items()) if v is not None}

    @property
    def language(self) -> str:
        return self.tags.get("language", "")


class ProbeDocument(_ProbeModel):
    """Document complet : un bloc format et N flux."""

    format: ProbeFormat = Field(default_factory=ProbeFormat)
    streams: list[ProbeStream] = Field(default_factory=list)

    @field_validator("format", mode="before")
    @classmethod
    def _null_format(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("streams", mode="before")
    @classmethod
    def _null_streams(cls, value: Any) -> Any:
        return [] if value is None else value


def _parse_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"non-finite value {raw!r}")
    return value


def _parse_field(
    label: str,
    raw: Optional[str],
    convert: Callable[[str], T],
    default: T,
    warnings: list[str],
) -> T:
    """
    Convertit un champ numerique textuel, sans jamais lever.

    Un champ absent vaut default sans avertissement. Un champ present mais
    illisible vaut default et ajoute un avertissement.
    """
    if raw is None or raw == "":
        return default
    try:
        return convert(raw)
    except (TypeError, ValueError) as e:
        message = f"could not parse {label} {raw!r}: {e}"
        logger.warning(f"ffprobe: {message}")
        warnings.append(message)
        return default


def _video_track(stream: ProbeStream) -> VideoTrack:
    return VideoTrack(
        index=stream.index or 0,
        codec_name=stream.codec_name,
        codec_long_name=stream.codec_long_name,
        profile=stream.profile,
        width=stream.width or 0,
        height=stream.height or 0,
        coded_width=stream.coded_width or 0,
        coded_height=stream.coded_height or 0,
        has_b_frames=stream.has_b_frames or 0,
        frame_rate=stream.avg_frame_rate,
        sample_aspect_ratio=stream.sample_aspect_ratio,
        display_aspect_ratio=stream.display_aspect_ratio,
        pix_fmt=stream.pix_fmt,
        level=stream.level or 0,
        color_range=stream.color_range,
        color_space=stream.color_space,
        color_transfer=stream.color_transfer,
        color_primaries=stream.color_primaries,
        chroma_location=stream.chroma_location,
        field_order=stream.field_order,
        refs=stream.refs or 0,
        tags=dict(stream.tags),
        disposition=dict(stream.disposition),
        side_data=tuple(stream.side_data_list),
    )


def _audio_track(stream: ProbeStream, warnings: list[str]) -> AudioTrack:
    bit_rate = _parse_field(
        f"audio bit_rate (stream {stream.index})", stream.bit_rate, int, 0, warnings
    )
    return AudioTrack(
        index=stream.index or 0,
        codec=stream.codec_name,
        channels=stream.channels or 0,
        sample_rate=stream.sample_rate,
        language=stream.language,
        bit_rate=bit_rate,
        tags=dict(stream.tags),
        disposition=dict(stream.disposition),
    )


def _subtitle_track(stream: ProbeStream) -> SubtitleTrack:
    return SubtitleTrack(
        index=stream.index or 0,
        codec_name=stream.codec_name,
        codec_long_name=stream.codec_long_name,
        language=stream.language,
        tags=dict(stream.tags),
        disposition=dict(stream.disposition),
    )


def parse_probe_output(raw: Union[bytes, str], filename: str = "") -> MediaMetadata:
    """
    Convertit la sortie JSON de ffprobe en MediaMetadata.

    Args:
        raw: Sortie standard de ffprobe
        filename: Chemin du fichier sonde (reporte dans le resultat)

    Returns:
        MediaMetadata ; la premiere piste video alimente codec, resolution
        et frame_rate.

    Raises:
        ProbeError: Si le document n'est pas un JSON exploitable
    """
    try:
        document = ProbeDocument.model_validate_json(raw)
    except ValidationError as e:
        raise ProbeError(f"failed to parse ffprobe output: {e}") from e

    warnings: list[str] = []
    fmt = document.format

    duration = _parse_field("duration", fmt.duration, _parse_float, 0.0, warnings)
    size = _parse_field("size", fmt.size, int, 0, warnings)
    bit_rate = _parse_field("bit_rate", fmt.bit_rate, int, 0, warnings)

    video_tracks: list[VideoTrack] = []
    audio_tracks: list[AudioTrack] = []
    subtitle_tracks: list[SubtitleTrack] = []

    for stream in document.streams:
        if stream.codec_type == "video":
            video_tracks.append(_video_track(stream))
        elif stream.codec_type == "audio":
            audio_tracks.append(_audio_track(stream, warnings))
        elif stream.codec_type == "subtitle":
            subtitle_tracks.append(_subtitle_track(stream))
        else:
            logger.debug(
                f"ffprobe: stream {stream.index} de type '{stream.codec_type}' ignore"
            )

    first_video = video_tracks[0] if video_tracks else None

    return MediaMetadata(
        filename=filename or fmt.filename,
        format_name=fmt.format_name,
        format_long_name=fmt.format_long_name,
        duration=duration,
        size=size,
        bit_rate=bit_rate,
        probe_score=fmt.probe_score or 0,
        container=fmt.format_name,
        codec=first_video.codec_name if first_video else "",
        resolution_width=first_video.width if first_video else 0,
        resolution_height=first_video.height if first_video else 0,
        frame_rate=first_video.frame_rate if first_video else "",
        video_tracks=tuple(video_tracks),
        audio_tracks=tuple(audio_tracks),
        subtitle_tracks=tuple(subtitle_tracks),
        tags=dict(fmt.tags),
        warnings=tuple(warnings),
    )
