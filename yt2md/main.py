"""Local pipeline: fetch transcripts, summarize them and write the results."""

import argparse
import sys
from pathlib import Path
from typing import Optional
from tqdm import tqdm

from yt2md.config import Config
from yt2md.pipeline import acquire
from yt2md.summarizer import create_summary
from yt2md.utils import extract_video_id, sanitize_filename
from yt2md.writers.json_writer import write_json
from yt2md.writers.naming import output_basename
from yt2md.writers.txt_writer import write_txt


def process_video(video: str, config: Config, output_dir: Path, summarize=create_summary) -> bool:
    """
    Process a single video: fetch transcript, summarize, and write outputs.

    Failed and empty results are saved as JSON for diagnostics.

    Args:
        video: YouTube video URL or ID
        config: Application configuration
        output_dir: Directory for the output files
        summarize: Callable ``(text, config) -> Optional[str]``

    Returns:
        True if a summary was written
    """
    video_id = extract_video_id(video) or video
    print(f"--- Processing video ID: {video_id} ---")
    output_dir.mkdir(parents=True, exist_ok=True)

    result = acquire(video_id, config=config)

    if not result.ok:
        print(f"✗ Failed to fetch transcript data: {result.error}", file=sys.stderr)
        error_path = output_dir / f"{sanitize_filename(f'error_{video_id}')}.json"
        try:
            write_json(result, error_path)
            print(f"Error details saved to: {error_path}")
        except OSError as e:
            print(f"✗ Failed to write error file: {str(e)}", file=sys.stderr)
        return False

    basename = output_basename(result)

    if not result.transcript:
        print("✗ Error: Transcript data is missing or empty.", file=sys.stderr)
        info_path = output_dir / f"{basename}_no_transcript.json"
        try:
            write_json(result, info_path)
            print(f"Info (no transcript) saved to: {info_path}")
        except OSError as e:
            print(f"✗ Failed to write info file: {str(e)}", file=sys.stderr)
        return False

    print(f"✓ Successfully fetched transcript data for title: \"{result.title or '(No Title)'}\"")

    full_text = result.full_text
    summary = summarize(full_text, config)
    if not summary:
        print("✗ Failed to generate summary.", file=sys.stderr)
        return False

    print("✓ Successfully generated summary.")

    try:
        json_path = output_dir / f"{basename}.json"
        write_json(result, json_path)
        print(f"✓ Transcript JSON saved to: {json_path}")

        text_path = output_dir / f"{basename}.txt"
        write_txt(full_text, text_path)
        print(f"✓ Transcript text saved to: {text_path}")

        summary_path = output_dir / f"{basename}-summary.md"
        write_txt(summary, summary_path)
        print(f"✓ Summary markdown saved to: {summary_path}")
    except OSError as e:
        print(f"✗ Failed to write output files: {str(e)}", file=sys.stderr)
        return False

    print(f"--- Finished processing video ID: {video_id} ---")
    return True


def main(argv=None, config: Optional[Config] = None) -> int:
    """Summarize one or more videos, one at a time. Returns the exit code."""
    config = config or Config.from_env()

    parser = argparse.ArgumentParser(
        prog="yt2md",
        description="Fetch YouTube transcripts and write Markdown summaries.",
    )
    parser.add_argument("videos", nargs="+", metavar="VIDEO", help="YouTube video URL or ID")
    parser.add_argument(
        "-o", "--output-dir",
        type=Path,
        default=config.OUT_DIR,
        help=f"Directory for output files (default: {config.OUT_DIR})",
    )
    args = parser.parse_args(argv)

    # Validate configuration
    try:
        config.validate()
    except ValueError as e:
        print(f"✗ Configuration Error: {str(e)}", file=sys.stderr)
        print("\nPlease create a .env file with your OPENAI_API_KEY.")
        return 1

    succeeded = 0
    for video in tqdm(args.videos, desc="Videos", unit="video", disable=len(args.videos) < 2):
        if process_video(video, config, args.output_dir):
            succeeded += 1

    print()
    print("=" * 60)
    print(f"Summarized {succeeded}/{len(args.videos)} video(s). Files saved to: {args.output_dir}")
    print("=" * 60)
    return 0 if succeeded == len(args.videos) else 1


if __name__ == "__main__":
    sys.exit(main())
