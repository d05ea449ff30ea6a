"""
Tests unitaires pour le parsing de la sortie ffprobe.

Ces tests verifient:
- La repartition des flux en pistes video, audio et sous-titres
- La premiere piste video alimente codec, resolution et frame_rate
- Les champs numeriques illisibles deviennent 0 avec un avertissement
- Un document non JSON leve ProbeError
"""

import json

import pytest

from reelscan.adapters.parsing.probe_parser import parse_probe_output
from reelscan.core.errors import ProbeError
from tests.fixtures.ffprobe_outputs import (
    FFPROBE_AUDIO_ONLY,
    FFPROBE_MKV_1080P,
    FFPROBE_WITH_BAD_NUMBERS,
    as_bytes,
)


class TestParseProbeOutput:
    def test_format_fields(self) -> None:
        metadata = parse_probe_output(as_bytes(FFPROBE_MKV_1080P))

        assert metadata.filename == "/media/films/Inception (2010).mkv"
        assert metadata.format_name == "matroska,webm"
        assert metadata.format_long_name == "Matroska / WebM"
        assert metadata.container == "matroska,webm"
        assert metadata.duration == pytest.approx(8880.032)
        assert metadata.size == 4294967296
        assert metadata.bit_rate == 3869345
        assert metadata.probe_score == 100
        assert metadata.tags["encoder"].startswith("libebml")
        assert metadata.warnings == ()

    def test_tracks_are_split_by_type(self) -> None:
        metadata = parse_probe_output(as_bytes(FFPROBE_MKV_1080P))

        assert len(metadata.video_tracks) == 1
        assert len(metadata.audio_tracks) == 1
        assert len(metadata.subtitle_tracks) == 1

    def test_first_video_track_drives_summary(self) -> None:
        metadata = parse_probe_output(as_bytes(FFPROBE_MKV_1080P))

        video = metadata.video_tracks[0]
        assert video.codec_name == "h264"
        assert video.profile == "High"
        assert video.coded_height == 1088
        assert video.level == 41
        assert video.disposition == {"default": 1, "forced": 0}
        assert metadata.codec == "h264"
        assert metadata.resolution_width == 1920
        assert metadata.resolution_height == 1080
        assert metadata.frame_rate == "24000/1001"

    def test_audio_and_subtitle_tracks(self) -> None:
        metadata = parse_probe_output(as_bytes(FFPROBE_MKV_1080P))

        audio = metadata.audio_tracks[0]
        assert audio.codec == "ac3"
        assert audio.channels == 6
        assert audio.sample_rate == "48000"
        assert audio.bit_rate == 640000
        assert audio.language == "fre"
        assert metadata.audio_channels == 6
        assert metadata.primary_audio_language == "fre"

        subtitle = metadata.subtitle_tracks[0]
        assert subtitle.codec_name == "subrip"
        assert subtitle.language == "fre"
        assert subtitle.disposition["forced"] == 1

    def test_filename_argument_overrides_format_filename(self) -> None:
        metadata = parse_probe_output(as_bytes(FFPROBE_MKV_1080P), filename="/other.mkv")
        assert metadata.filename == "/other.mkv"

    def test_unparseable_numbers_become_warnings(self) -> None:
        metadata = parse_probe_output(as_bytes(FFPROBE_WITH_BAD_NUMBERS))

        assert metadata.duration == 0.0
        assert metadata.bit_rate == 0
        assert metadata.size == 734003200
        assert metadata.audio_tracks[0].bit_rate == 0
        assert len(metadata.warnings) == 3
        assert any("duration" in w for w in metadata.warnings)
        assert any("audio bit_rate" in w for w in metadata.warnings)

    def test_absent_numbers_do_not_warn(self) -> None:
        metadata = parse_probe_output(as_bytes(FFPROBE_AUDIO_ONLY))

        assert metadata.size == 0
        assert metadata.bit_rate == 0
        assert metadata.warnings == ()

    def test_audio_only_file_has_empty_video_summary(self) -> None:
        metadata = parse_probe_output(as_bytes(FFPROBE_AUDIO_ONLY))

        assert metadata.video_tracks == ()
        assert metadata.codec == ""
        assert metadata.resolution_width == 0
        assert metadata.resolution_height == 0
        assert metadata.duration == pytest.approx(180.5)
        assert metadata.audio_channels == 2

    def test_numbers_given_as_json_numbers(self) -> None:
        document = {
            "format": {"format_name": "mp4", "duration": 42.5, "size": 1000},
            "streams": [{"index": "0", "codec_type": "video", "width": "640", "height": 480}],
        }

        metadata = parse_probe_output(json.dumps(document))

        assert metadata.duration == pytest.approx(42.5)
        assert metadata.size == 1000
        assert metadata.resolution_width == 640
        assert metadata.resolution_height == 480

    def test_null_sections_are_tolerated(self) -> None:
        metadata = parse_probe_output('{"format": null, "streams": null}')

        assert metadata.format_name == ""
        assert metadata.video_tracks == ()

    def test_empty_object(self) -> None:
        metadata = parse_probe_output("{}")
        assert metadata.duration == 0.0
        assert metadata.warnings == ()

    @pytest.mark.parametrize("raw", [b"", b"not json", b"[1, 2]"])
    def test_invalid_document_raises(self, raw: bytes) -> None:
        with pytest.raises(ProbeError):
            parse_probe_output(raw)
