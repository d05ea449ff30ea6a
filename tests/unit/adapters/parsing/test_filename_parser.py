"""
Tests unitaires pour les heuristiques de noms de fichiers.

Ces tests verifient:
- La classification video / ignore par extension
- L'extraction titre + annee des films (parentheses, crochets, points)
- L'extraction serie + saison + episode (SxxEyy, NxM, compact)
- Le pre-filtre looks_like_series_episode
"""

from pathlib import Path

import pytest

from reelscan.adapters.parsing.filename_parser import (
    classify_file,
    clean_title,
    is_video_file,
    looks_like_series_episode,
    parse_movie,
    parse_series_episode,
)
from reelscan.core.value_objects.parsed_info import EpisodeInfo, FileKind, MovieInfo


class TestClassification:
    @pytest.mark.parametrize(
        "name",
        ["film.mkv", "film.MP4", "clip.webm", "old.avi", "show.ts", "movie.M4V"],
    )
    def test_video_extensions(self, name: str) -> None:
        assert is_video_file(name)
        assert classify_file(Path("/media") / name) is FileKind.VIDEO

    @pytest.mark.parametrize(
        "name", ["movie.nfo", "poster.jpg", "movie.srt", "README", "archive.mkv.part"]
    )
    def test_other_files_are_ignored(self, name: str) -> None:
        assert not is_video_file(name)
        assert classify_file(name) is FileKind.IGNORED


class TestCleanTitle:
    def test_separators_become_spaces(self) -> None:
        assert clean_title("The.Office_US") == "The Office US"

    def test_whitespace_is_collapsed_and_trimmed(self) -> None:
        assert clean_title("  Show   Name - ") == "Show Name"


class TestParseMovie:
    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("Inception (2010).mkv", MovieInfo("Inception", "2010")),
            ("Blade Runner [1982].mp4", MovieInfo("Blade Runner", "1982")),
            ("The.Matrix.1999.1080p.BluRay.mkv", MovieInfo("The Matrix", "1999")),
            ("Heat.1995.mkv", MovieInfo("Heat", "1995")),
            ("Unknown.Movie.mkv", MovieInfo("Unknown Movie", "")),
        ],
    )
    def test_title_and_year(self, filename: str, expected: MovieInfo) -> None:
        assert parse_movie(filename) == expected

    def test_first_pattern_wins(self) -> None:
        """Les parentheses priment sur une annee en points plus loin."""
        info = parse_movie("2001.A.Space.Odyssey (1968).mkv")
        assert info.year == "1968"
        assert info.title == "2001 A Space Odyssey"

    def test_year_only_name_keeps_a_title(self) -> None:
        """Un nom reduit a l'annee garde un titre non vide."""
        info = parse_movie("(1984).mkv")
        assert info.year == "1984"
        assert info.title == "(1984)"

    def test_directory_is_ignored(self) -> None:
        assert parse_movie("/media/Films 2020/Tenet (2020).mkv").title == "Tenet"

    def test_year_int(self) -> None:
        assert parse_movie("Inception (2010).mkv").year_int == 2010
        assert parse_movie("Inception.mkv").year_int is None


class TestParseSeriesEpisode:
    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("The.Office.S02E05.mkv", EpisodeInfo("The Office", 2, 5)),
            ("the office s2e5 720p.mkv", EpisodeInfo("the office", 2, 5)),
            ("Show_Name_1x03.avi", EpisodeInfo("Show Name", 1, 3)),
            ("Show Name - 305.mp4", EpisodeInfo("Show Name", 3, 5)),
            ("Breaking.Bad.S05E16.Felina.1080p.mkv", EpisodeInfo("Breaking Bad", 5, 16)),
        ],
    )
    def test_patterns(self, filename: str, expected: EpisodeInfo) -> None:
        assert parse_series_episode(filename) == expected

    def test_unrecognised_name_is_invalid(self) -> None:
        info = parse_series_episode("Home.Video.mkv")
        assert info == EpisodeInfo("Home Video", 0, 0)
        assert not info.is_valid

    def test_season_zero_is_invalid(self) -> None:
        info = parse_series_episode("Doctor.Who.S00E01.mkv")
        assert info.season == 0
        assert not info.is_valid

    def test_four_digit_number_is_not_compact_episode(self) -> None:
        assert not parse_series_episode("The.Matrix.1999.mkv").is_valid


class TestLooksLikeSeriesEpisode:
    @pytest.mark.parametrize(
        "name", ["Show.S01E01.mkv", "show.s1e2.mp4", "Show 3x07.avi", "Show.10x12.mkv"]
    )
    def test_markers_are_detected(self, name: str) -> None:
        assert looks_like_series_episode(name)

    @pytest.mark.parametrize(
        "name",
        [
            "Inception (2010).mkv",
            "Show Name - 305.mp4",  # forme compacte : pas un marqueur fiable
            "Sxe.Movie.mkv",
            "Movie.1920x1080.mkv",
        ],
    )
    def test_other_names_are_not_episodes(self, name: str) -> None:
        assert not looks_like_series_episode(name)
