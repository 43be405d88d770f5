"""Best-effort video title lookup using yt-dlp."""

from pathlib import Path
from typing import Optional
import yt_dlp

from yt2md.config import Config
from yt2md.utils import watch_url


def _ydl_options(config: Config) -> dict:
    """yt-dlp options for a metadata-only lookup."""
    ydl_opts = {
        'quiet': True,  # Suppress yt-dlp output
        'no_warnings': True,
        'skip_download': True,
        'noplaylist': True,
        'extract_flat': False,
    }

    # Add cookies if provided (for bypassing YouTube bot detection)
    cookies_path = config.YOUTUBE_COOKIES_TXT
    if cookies_path and Path(cookies_path).exists():
        ydl_opts['cookiefile'] = cookies_path

    return ydl_opts


def fetch_title(video_id: str, config: Optional[Config] = None) -> Optional[str]:
    """
    Look up the display title of a video.

    Failures never propagate: any error from yt-dlp is reported as a
    warning and the title is treated as absent.

    Args:
        video_id: YouTube video ID
        config: Configuration (cookies file); read from the environment if omitted

    Returns:
        The video title, or None if it could not be fetched
    """
    config = config or Config.from_env()
    url = watch_url(video_id)

    try:
        print(f"Attempting to fetch video info for ID: {video_id} (URL: {url})")
        with yt_dlp.YoutubeDL(_ydl_options(config)) as ydl:
            info = ydl.extract_info(url, download=False)
        title = (info or {}).get('title')
        if not title:
            raise ValueError("no title in video info")
    except Exception as e:
        print(f"⚠ Warning: Failed to fetch video title: {str(e)}.")
        print("Proceeding without title.")
        return None

    print(f"✓ Successfully fetched title: {title}")
    return title
