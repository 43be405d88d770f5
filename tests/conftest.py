from pathlib import Path

import pytest

from yt2md.config import Config
from yt2md.models import TranscriptFailure, TranscriptSegment, TranscriptSuccess

VIDEO_ID = "h5J3YOnBiZ8"
URL = f"https://www.youtube.com/watch?v={VIDEO_ID}"


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(
        OPENAI_API_KEY="test-key",
        OUT_DIR=tmp_path / "outputs",
        TRANSCRIPT_DIR=tmp_path / "transcripts",
    )


@pytest.fixture
def success_result() -> TranscriptSuccess:
    return TranscriptSuccess(
        url=URL,
        video_id=VIDEO_ID,
        title="Demo Title",
        transcript=(
            TranscriptSegment(text="Hello & world", duration=2.0, offset=0.0),
            TranscriptSegment(text="Second line", duration=1.5, offset=2.0),
        ),
    )


@pytest.fixture
def failure_result() -> TranscriptFailure:
    return TranscriptFailure(
        url=URL,
        video_id=VIDEO_ID,
        title="Demo Title",
        error="Failed to fetch transcript. Reason: Subtitles are disabled.",
    )
