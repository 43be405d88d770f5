"""Writer for plain text and Markdown outputs."""

from pathlib import Path


def write_txt(text: str, output_path: Path) -> None:
    """
    Write text to a file as given.

    Used for the transcript (segment texts joined with " \\n") and for
    the Markdown summary.
    """
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(text)
