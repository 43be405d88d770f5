"""Transcript fetching via youtube-transcript-api and entity decoding."""

import html
from typing import Iterable, List, Optional
from youtube_transcript_api import YouTubeTranscriptApi

from yt2md.config import Config
from yt2md.models import TranscriptSegment


def fetch_transcript(video_id: str, config: Optional[Config] = None) -> List[dict]:
    """
    Fetch the raw timed text segments of a video.

    Errors from the provider propagate to the caller.

    Args:
        video_id: YouTube video ID
        config: Configuration (preferred languages); read from the environment if omitted

    Returns:
        List of dicts with ``text``, ``duration`` and ``offset`` (seconds),
        in playback order
    """
    config = config or Config.from_env()
    api = YouTubeTranscriptApi()
    fetched = api.fetch(video_id, languages=list(config.TRANSCRIPT_LANGUAGES))
    return [
        {
            'text': snippet.text,
            'duration': snippet.duration,
            'offset': snippet.start,
        }
        for snippet in fetched.snippets
    ]


def decode_entities(raw: str) -> str:
    """Decode HTML named and numeric character references."""
    return html.unescape(raw)


def normalize_segments(raw_segments: Iterable[dict]) -> tuple:
    """Decode the text of every segment, keeping order, count and timings."""
    return tuple(
        TranscriptSegment(
            text=decode_entities(segment['text']),
            duration=segment['duration'],
            offset=segment['offset'],
        )
        for segment in raw_segments
    )
