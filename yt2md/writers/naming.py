"""Output file base names derived from titles and video IDs."""

from yt2md.models import TranscriptResult
from yt2md.utils import sanitize_filename


def output_basename(result: TranscriptResult) -> str:
    """Sanitized title if one was fetched, otherwise the video ID."""
    base = sanitize_filename(result.title or str(result.video_id or 'error'))
    if not base:
        base = sanitize_filename(str(result.video_id or 'error'))
    return base
