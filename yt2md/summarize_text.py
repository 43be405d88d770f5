"""Summarize an existing transcript text file into a Markdown file beside it."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from yt2md.config import Config
from yt2md.summarizer import create_summary
from yt2md.utils import sanitize_filename
from yt2md.writers.txt_writer import write_txt


def summarize_file(transcript_path: Path, config: Config, base_name: Optional[str] = None,
                   summarize=create_summary) -> Optional[Path]:
    """
    Read a transcript file, summarize it, and save ``<base>-summary.md``.

    Returns:
        Path of the summary file, or None on failure
    """
    print(f"Reading transcript from: {transcript_path}")
    transcript_text = transcript_path.read_text(encoding='utf-8')
    print(f"Successfully read transcript. Length: {len(transcript_text)} characters.")

    if not transcript_text.strip():
        print("✗ Error: Transcript file is empty or contains only whitespace.", file=sys.stderr)
        return None

    summary = summarize(transcript_text, config)
    if not summary:
        return None

    base = sanitize_filename(base_name or transcript_path.stem)
    summary_path = transcript_path.parent / f"{base}-summary.md"
    print(f"Saving summary to: {summary_path}")
    write_txt(summary, summary_path)
    print("✓ Summary saved successfully!")
    return summary_path


def main(argv=None, config: Optional[Config] = None) -> int:
    config = config or Config.from_env()

    parser = argparse.ArgumentParser(
        prog="yt2md-summarize",
        description="Summarize a transcript text file as Markdown.",
    )
    parser.add_argument("transcript", type=Path, help="Path to the transcript text file")
    parser.add_argument("--name", help="Base name for the summary file (default: transcript file name)")
    args = parser.parse_args(argv)

    if not args.transcript.is_file():
        print(f"✗ Transcript file not found: {args.transcript}", file=sys.stderr)
        return 1

    try:
        config.validate()
    except ValueError as e:
        print(f"✗ Configuration Error: {str(e)}", file=sys.stderr)
        return 1

    try:
        summary_path = summarize_file(args.transcript, config, args.name)
    except (OSError, UnicodeDecodeError) as e:
        print(f"✗ An error occurred: {str(e)}", file=sys.stderr)
        return 1
    return 0 if summary_path else 1


if __name__ == "__main__":
    sys.exit(main())
