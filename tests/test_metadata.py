"""Tests for the yt-dlp title lookup."""

from unittest.mock import patch

from yt2md.config import Config
from yt2md.metadata import _ydl_options, fetch_title


def _patch_ydl():
    return patch("yt2md.metadata.yt_dlp.YoutubeDL")


def test_returns_title():
    with _patch_ydl() as ydl_cls:
        ydl = ydl_cls.return_value.__enter__.return_value
        ydl.extract_info.return_value = {"title": "Demo Title", "uploader": "someone"}

        title = fetch_title("h5J3YOnBiZ8", Config())

    assert title == "Demo Title"
    ydl.extract_info.assert_called_once_with("https://www.youtube.com/watch?v=h5J3YOnBiZ8", download=False)


def test_provider_error_degrades_to_none(capsys):
    with _patch_ydl() as ydl_cls:
        ydl_cls.return_value.__enter__.return_value.extract_info.side_effect = Exception("Video unavailable")

        title = fetch_title("h5J3YOnBiZ8", Config())

    assert title is None
    out = capsys.readouterr().out
    assert "Failed to fetch video title: Video unavailable." in out
    assert "Proceeding without title." in out


def test_missing_title_is_none():
    with _patch_ydl() as ydl_cls:
        ydl_cls.return_value.__enter__.return_value.extract_info.return_value = {"title": ""}

        assert fetch_title("h5J3YOnBiZ8", Config()) is None


def test_cookies_file_used_when_present(tmp_path):
    cookies = tmp_path / "cookies.txt"
    cookies.write_text("# Netscape HTTP Cookie File\n", encoding="utf-8")

    opts = _ydl_options(Config(YOUTUBE_COOKIES_TXT=str(cookies)))
    assert opts["cookiefile"] == str(cookies)
    assert opts["skip_download"] is True

    opts = _ydl_options(Config(YOUTUBE_COOKIES_TXT=str(tmp_path / "missing.txt")))
    assert "cookiefile" not in opts
