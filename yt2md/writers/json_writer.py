"""Writer for JSON format."""

import json
from pathlib import Path
from yt2md.models import TranscriptResult


def write_json(result: TranscriptResult, output_path: Path) -> None:
    """Write a pipeline result (success or failure) to a JSON file."""
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
