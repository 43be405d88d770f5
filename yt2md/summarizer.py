"""OpenAI API integration for transcript summarization."""

import sys
from typing import Optional
from openai import OpenAI
from openai import APIError, APIConnectionError

from yt2md.config import Config
from yt2md.models import TranscriptResult


SUMMARY_PROMPT = """Please summarize the following video transcript concisely. Focus on the key points and main topics. Output the summary directly in Markdown format, without any introductory phrases like "Here's a summary:".

Transcript:
{transcript_text}"""


def transcript_text(result: TranscriptResult) -> str:
    """
    Convert a pipeline result into the text sent for summarization.

    Returns an empty string for failed results.
    """
    if not result.ok:
        return ""
    return result.full_text


def create_summary(
    transcript_text: str,
    config: Config,
    client: Optional[OpenAI] = None,
) -> Optional[str]:
    """
    Summarize transcript text as Markdown using the OpenAI chat API.

    Blank input returns None without contacting the API. Every other
    failure is reported and also returns None; nothing is retried.

    Args:
        transcript_text: Segment texts joined with " \\n"
        config: Configuration (API key, model, token limit)
        client: OpenAI client to use instead of building one

    Returns:
        Markdown summary, or None on failure
    """
    print(f"Received transcript text. Length: {len(transcript_text)} characters.")

    if not transcript_text.strip():
        print("✗ Error: Transcript text is empty or contains only whitespace.", file=sys.stderr)
        return None

    if client is None:
        if not config.OPENAI_API_KEY:
            print("✗ Error: OPENAI_API_KEY environment variable is not set.", file=sys.stderr)
            return None
        client = OpenAI(api_key=config.OPENAI_API_KEY, timeout=config.OPENAI_TIMEOUT)

    try:
        print(f"Sending transcript to OpenAI API (model: {config.SUMMARY_MODEL})...")
        response = client.chat.completions.create(
            model=config.SUMMARY_MODEL,
            max_tokens=config.SUMMARY_MAX_TOKENS,
            messages=[
                {
                    "role": "user",
                    "content": SUMMARY_PROMPT.format(transcript_text=transcript_text),
                }
            ],
        )
    except APIConnectionError as e:
        print(f"✗ Connection error during summarization: {str(e)}", file=sys.stderr)
        return None
    except APIError as e:
        print(f"✗ OpenAI API error: {str(e)}", file=sys.stderr)
        return None
    except Exception as e:
        print(f"✗ Unexpected error during summarization: {str(e)}", file=sys.stderr)
        return None

    try:
        summary = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError):
        summary = None

    if not isinstance(summary, str) or not summary.strip():
        print("✗ Error: Unexpected response format from OpenAI API.", file=sys.stderr)
        return None

    print("✓ Received summary from OpenAI API.")
    return summary
