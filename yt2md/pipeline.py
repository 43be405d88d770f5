"""Transcript acquisition: validate, look up the title, fetch and normalize."""

import sys
from functools import partial
from typing import Callable, Optional

from yt2md.config import Config
from yt2md.metadata import fetch_title as default_fetch_title
from yt2md.models import TranscriptFailure, TranscriptResult, TranscriptSuccess
from yt2md.transcripts import fetch_transcript as default_fetch_transcript
from yt2md.transcripts import normalize_segments
from yt2md.utils import is_valid_video_id, watch_url

INVALID_VIDEO_ID_ERROR = "Invalid YouTube Video ID format provided."


def acquire(
    video_id: str,
    config: Optional[Config] = None,
    fetch_title: Optional[Callable] = None,
    fetch_transcript: Optional[Callable] = None,
) -> TranscriptResult:
    """
    Fetch and normalize the transcript of a video.

    A failed title lookup only leaves ``title`` unset; a failed transcript
    fetch yields a TranscriptFailure. Provider errors are never raised.

    Args:
        video_id: YouTube video ID as given by the caller
        config: Configuration passed to the default providers
        fetch_title: Callable ``video_id -> Optional[str]``
        fetch_transcript: Callable ``video_id -> list of raw segments``

    Returns:
        TranscriptSuccess or TranscriptFailure
    """
    url = watch_url(video_id)

    if not is_valid_video_id(video_id):
        return TranscriptFailure(url=url, video_id=video_id, error=INVALID_VIDEO_ID_ERROR)

    if fetch_title is None or fetch_transcript is None:
        config = config or Config.from_env()
    if fetch_title is None:
        fetch_title = partial(default_fetch_title, config=config)
    if fetch_transcript is None:
        fetch_transcript = partial(default_fetch_transcript, config=config)

    try:
        title = fetch_title(video_id)
    except Exception as e:
        print(f"⚠ Warning: Failed to fetch video title: {str(e)}.")
        print("Proceeding without title.")
        title = None

    try:
        print(f"Fetching transcript for ID: {video_id} (URL: {url})")
        raw_segments = fetch_transcript(video_id)
    except Exception as e:
        reason = str(e) or "Unknown error"
        print(f"✗ Error fetching transcript: {reason}", file=sys.stderr)
        return TranscriptFailure(
            url=url,
            video_id=video_id,
            title=title,
            error=f"Failed to fetch transcript. Reason: {reason}.",
        )

    return TranscriptSuccess(
        url=url,
        video_id=video_id,
        title=title,
        transcript=normalize_segments(raw_segments),
    )
