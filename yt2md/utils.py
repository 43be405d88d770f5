"""Video ID parsing and filesystem-safe naming helpers."""

import re
from datetime import date
from typing import Optional

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

_VIDEO_ID_RE = re.compile(r'^[A-Za-z0-9_-]{11}$')
_URL_ID_RE = re.compile(
    r'(?:youtube\.com\/(?:[^\/\n\s]+\/\S+\/|(?:v|e(?:mbed)?|shorts)\/|\S*?[?&]v=)|youtu\.be\/)'
    r'([A-Za-z0-9_-]{11})'
)
# Windows-reserved characters plus ASCII control characters
_RESERVED_RE = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_UNDERSCORES_RE = re.compile(r'_{2,}')


def is_valid_video_id(candidate) -> bool:
    """Return True if ``candidate`` is an 11-character YouTube video ID."""
    if not isinstance(candidate, str):
        return False
    # fullmatch, since "$" would also accept a trailing newline
    return _VIDEO_ID_RE.fullmatch(candidate) is not None


def watch_url(video_id) -> str:
    """Canonical watch URL for a video ID, valid or not."""
    return WATCH_URL.format(video_id=video_id)


def extract_video_id(value: str) -> Optional[str]:
    """Extract the video ID from a YouTube URL, or accept a bare ID."""
    if not value:
        return None
    value = value.strip()
    if is_valid_video_id(value):
        return value
    match = _URL_ID_RE.search(value)
    if match:
        return match.group(1)
    return None


def sanitize_filename(value: str) -> str:
    """Convert text to a filesystem-safe name.

    Reserved and control characters become ``_``, runs of underscores
    collapse to one, and surrounding whitespace is trimmed.
    """
    value = _RESERVED_RE.sub('_', value)
    value = _UNDERSCORES_RE.sub('_', value)
    return value.strip()


def date_stamp(today: Optional[date] = None) -> str:
    """Format a date as YYYY-MM-DD for output filename prefixes."""
    return (today or date.today()).strftime('%Y-%m-%d')
