"""Tests for output writers and file naming."""

import json

from yt2md.models import TranscriptFailure, TranscriptSuccess
from yt2md.writers.json_writer import write_json
from yt2md.writers.naming import output_basename
from yt2md.writers.txt_writer import write_txt

VIDEO_ID = "h5J3YOnBiZ8"


class TestOutputBasename:
    def test_uses_sanitized_title(self, success_result):
        result = TranscriptSuccess(url="u", video_id=VIDEO_ID, title="What? A: Demo", transcript=())

        assert output_basename(success_result) == "Demo Title"
        assert output_basename(result) == "What_ A_ Demo"

    def test_falls_back_to_video_id(self):
        assert output_basename(TranscriptFailure(url="u", video_id=VIDEO_ID, error="e")) == VIDEO_ID

    def test_blank_title_falls_back_to_video_id(self):
        result = TranscriptSuccess(url="u", video_id=VIDEO_ID, title="   ", transcript=())

        assert output_basename(result) == VIDEO_ID


def test_write_json_keeps_unicode(tmp_path, success_result):
    path = tmp_path / "out.json"
    result = TranscriptSuccess(url="u", video_id=VIDEO_ID, title="Café", transcript=success_result.transcript)

    write_json(result, path)

    content = path.read_text(encoding="utf-8")
    assert "Café" in content
    assert json.loads(content)["transcript"][0] == {"text": "Hello & world", "duration": 2.0, "offset": 0.0}


def test_write_txt_writes_text_verbatim(tmp_path):
    path = tmp_path / "summary.md"

    write_txt("# Summary\n\n- point", path)

    assert path.read_text(encoding="utf-8") == "# Summary\n\n- point"
