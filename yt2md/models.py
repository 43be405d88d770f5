"""Data models for transcripts and segments."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class TranscriptSegment:
    """A single timed span of transcript text.

    ``duration`` and ``offset`` keep whatever unit the transcript provider
    emits (seconds for youtube-transcript-api).
    """
    text: str
    duration: float
    offset: float  # Start time

    def to_dict(self) -> dict:
        return {'text': self.text, 'duration': self.duration, 'offset': self.offset}


@dataclass(frozen=True)
class TranscriptSuccess:
    """Pipeline result when the transcript was fetched."""
    url: str
    video_id: Optional[str]
    transcript: tuple
    title: Optional[str] = None

    ok = True

    @property
    def full_text(self) -> str:
        """Segment texts joined the way the summarizer expects them."""
        return " \n".join(segment.text for segment in self.transcript)

    def to_dict(self) -> dict:
        data = {'url': self.url, 'videoId': self.video_id}
        if self.title is not None:
            data['title'] = self.title
        data['transcript'] = [segment.to_dict() for segment in self.transcript]
        return data


@dataclass(frozen=True)
class TranscriptFailure:
    """Pipeline result when a stage failed; ``error`` says which and why."""
    url: str
    video_id: Optional[str]
    error: str
    title: Optional[str] = None

    ok = False

    def to_dict(self) -> dict:
        data = {'url': self.url, 'videoId': self.video_id}
        if self.title is not None:
            data['title'] = self.title
        data['error'] = self.error
        return data


TranscriptResult = Union[TranscriptSuccess, TranscriptFailure]
