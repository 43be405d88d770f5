"""Command-line transcript fetcher: saves a video's transcript as JSON and plain text."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from yt2md.config import Config
from yt2md.models import TranscriptFailure, TranscriptResult
from yt2md.pipeline import acquire
from yt2md.utils import date_stamp, extract_video_id
from yt2md.writers.json_writer import write_json
from yt2md.writers.naming import output_basename
from yt2md.writers.txt_writer import write_txt

INVALID_URL_ERROR = "Invalid YouTube URL format provided."


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt2md-transcript",
        description="Fetches a YouTube video transcript and saves it as JSON and plain text.",
    )
    parser.add_argument("video", nargs="?", help="YouTube video URL or 11-character video ID")
    parser.add_argument("-u", "--url", help="YouTube video URL (alternative to the positional argument)")
    parser.add_argument(
        "-o", "--output-dir",
        type=Path,
        default=config.TRANSCRIPT_DIR,
        help=f"Directory to save the output files (default: {config.TRANSCRIPT_DIR})",
    )
    parser.add_argument("--no-date", action="store_true", help="Do not prefix file names with today's date")
    return parser


def result_basename(result: TranscriptResult, prefix: Optional[str]) -> str:
    """File base name for a result: title or ID, with an error suffix on failure."""
    if result.video_id is None:
        base = "invalid_url"
    else:
        base = output_basename(result)
        if not result.ok:
            base = f"{base}_transcript_error"
    if prefix:
        return f"{prefix}_{base}"
    return base


def save_result(result: TranscriptResult, output_dir: Path, basename: str) -> Optional[Path]:
    """
    Write the JSON result and, when segments exist, the plain text transcript.

    Returns:
        Path of the text file, or None if none was written
    """
    json_path = output_dir / f"{basename}.json"
    try:
        write_json(result, json_path)
        print(f"✓ Successfully saved JSON data to: {json_path}")
    except OSError as e:
        print(f"✗ Failed to write JSON output file: {str(e)}", file=sys.stderr)

    if not result.ok or not result.transcript:
        return None

    text_path = output_dir / f"{basename}-text.txt"
    try:
        write_txt(result.full_text, text_path)
        print(f"✓ Successfully saved plain text transcript to: {text_path}")
    except OSError as e:
        print(f"✗ Failed to write text output file: {str(e)}", file=sys.stderr)
        return None
    return text_path


def main(argv=None, config: Optional[Config] = None) -> int:
    """Fetch one transcript and write it to disk. Returns the exit code."""
    config = config or Config.from_env()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    raw_input = args.url or args.video
    if not raw_input:
        parser.print_usage(sys.stderr)
        print("✗ A YouTube URL or video ID is required.", file=sys.stderr)
        return 2

    output_dir = args.output_dir
    if not output_dir.exists():
        print(f"Creating output directory: {output_dir}")
        output_dir.mkdir(parents=True, exist_ok=True)

    prefix = None if args.no_date else date_stamp()
    video_id = extract_video_id(raw_input)

    if video_id is None:
        parser.print_usage(sys.stderr)
        print(f"✗ Not a YouTube URL or video ID: {raw_input}", file=sys.stderr)
        result = TranscriptFailure(url=raw_input, video_id=None, error=INVALID_URL_ERROR)
    else:
        result = acquire(video_id, config=config)

    save_result(result, output_dir, result_basename(result, prefix))

    if not result.ok:
        print(f"✗ {result.error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
