"""
Media entities.

Movies, series, seasons and episodes discovered on disk and reconciled
against the TMDB catalog. Relations are expressed with foreign keys only
(series_id, season_id), never with back-pointers.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class LibraryItem:
    """
    Technical fields shared by every file-backed item.

    Attributes:
        id: Internal database ID
        library_id: Owning library
        file_path: Absolute path of the video file (unique)
        container: Container format name reported by ffprobe
        codec: Codec of the first video stream
        resolution_width: Width of the first video stream
        resolution_height: Height of the first video stream
        audio_channels: Channel count of the first audio stream
        date_added: First time the file was reconciled
        last_scanned: Last time a scan saw the file
        deleted_at: Soft-delete marker set by cleanup when the file vanished
    """

    id: Optional[int] = None
    library_id: Optional[int] = None
    file_path: str = ""
    container: str = ""
    codec: str = ""
    resolution_width: int = 0
    resolution_height: int = 0
    audio_channels: int = 0
    date_added: Optional[datetime] = None
    last_scanned: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


@dataclass
class Movie(LibraryItem):
    """
    Movie file with its TMDB metadata.

    Attributes:
        title: Catalog title, or the title parsed from the filename
        original_title: Original language title
        tmdb_id: The Movie Database ID (None when unmatched)
        overview: Plot summary
        release_date: Release date (None when missing or unparseable)
        poster_path: Poster path on the TMDB CDN
        backdrop_path: Backdrop path on the TMDB CDN
        vote_average: TMDB average rating (0-10)
        vote_count: Number of TMDB votes
    """

    title: str = ""
    original_title: str = ""
    tmdb_id: Optional[int] = None
    overview: str = ""
    release_date: Optional[datetime] = None
    poster_path: str = ""
    backdrop_path: str = ""
    vote_average: float = 0.0
    vote_count: int = 0


@dataclass
class Series:
    """
    TV series, the parent of seasons and episodes.

    Not file-backed: a series exists once at least one of its episodes
    has been reconciled.
    """

    id: Optional[int] = None
    library_id: Optional[int] = None
    title: str = ""
    original_title: str = ""
    tmdb_id: Optional[int] = None
    overview: str = ""
    first_air_date: Optional[datetime] = None
    poster_path: str = ""
    backdrop_path: str = ""
    vote_average: float = 0.0
    vote_count: int = 0
    date_added: Optional[datetime] = None
    last_scanned: Optional[datetime] = None


@dataclass
class Season:
    """Season of a series, unique per (series_id, season_number)."""

    id: Optional[int] = None
    series_id: Optional[int] = None
    library_id: Optional[int] = None
    season_number: int = 0
    date_added: Optional[datetime] = None
    last_scanned: Optional[datetime] = None


@dataclass
class Episode(LibraryItem):
    """
    Episode file, unique per (season_id, episode_number).

    Attributes:
        series_id: Parent series
        season_id: Parent season
        episode_number: Episode number within the season
        title: Episode title ("Episode N" placeholder until enriched)
    """

    series_id: Optional[int] = None
    season_id: Optional[int] = None
    episode_number: int = 0
    title: str = ""
