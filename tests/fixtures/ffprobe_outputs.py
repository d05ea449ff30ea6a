"""
Sorties ffprobe realistes pour les tests.

Format: ffprobe -v quiet -print_format json -show_format -show_streams
"""

import json

# MKV 1080p H.264, une piste audio AC3 5.1 (fre), un sous-titre SRT, une police
FFPROBE_MKV_1080P = {
    "streams": [
        {
            "index": 0,
            "codec_name": "h264",
            "codec_long_name": "H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10",
            "profile": "High",
            "codec_type": "video",
            "width": 1920,
            "height": 1080,
            "coded_width": 1920,
            "coded_height": 1088,
            "has_b_frames": 2,
            "sample_aspect_ratio": "1:1",
            "display_aspect_ratio": "16:9",
            "pix_fmt": "yuv420p",
            "level": 41,
            "color_range": "tv",
            "chroma_location": "left",
            "field_order": "progressive",
            "refs": 1,
            "avg_frame_rate": "24000/1001",
            "disposition": {"default": 1, "forced": 0},
            "tags": {"language": "und"},
        },
        {
            "index": 1,
            "codec_name": "ac3",
            "codec_type": "audio",
            "sample_rate": "48000",
            "channels": 6,
            "channel_layout": "5.1(side)",
            "bit_rate": "640000",
            "disposition": {"default": 1},
            "tags": {"language": "fre", "title": "VF"},
        },
        {
            "index": 2,
            "codec_name": "subrip",
            "codec_long_name": "SubRip subtitle",
            "codec_type": "subtitle",
            "disposition": {"default": 0, "forced": 1},
            "tags": {"language": "fre"},
        },
        {
            "index": 3,
            "codec_type": "attachment",
            "tags": {"filename": "font.ttf", "mimetype": "application/x-truetype-font"},
        },
    ],
    "format": {
        "filename": "/media/films/Inception (2010).mkv",
        "nb_streams": 4,
        "format_name": "matroska,webm",
        "format_long_name": "Matroska / WebM",
        "start_time": "0.000000",
        "duration": "8880.032000",
        "size": "4294967296",
        "bit_rate": "3869345",
        "probe_score": 100,
        "tags": {"encoder": "libebml v1.4.2 + libmatroska v1.6.4"},
    },
}

# Champs numeriques illisibles (ffprobe renvoie "N/A")
FFPROBE_WITH_BAD_NUMBERS = {
    "streams": [
        {
            "index": 0,
            "codec_name": "mpeg4",
            "codec_type": "video",
            "width": 720,
            "height": 576,
        },
        {
            "index": 1,
            "codec_name": "mp3",
            "codec_type": "audio",
            "channels": 2,
            "bit_rate": "N/A",
        },
    ],
    "format": {
        "format_name": "avi",
        "duration": "N/A",
        "size": "734003200",
        "bit_rate": "not-a-number",
    },
}

# Fichier audio seul (aucune piste video)
FFPROBE_AUDIO_ONLY = {
    "streams": [
        {"index": 0, "codec_name": "aac", "codec_type": "audio", "channels": 2},
    ],
    "format": {"format_name": "mov,mp4,m4a,3gp,3g2,mj2", "duration": "180.5"},
}


def as_bytes(document: dict) -> bytes:
    """Serialise un document ffprobe comme sur la sortie standard."""
    return json.dumps(document).encode()
