"""Tests for configuration loading."""

from pathlib import Path

import pytest

from yt2md.config import Config


def test_from_env_reads_values():
    config = Config.from_env({
        "OPENAI_API_KEY": "key",
        "SUMMARY_MODEL": "gpt-4.1-mini",
        "SUMMARY_MAX_TOKENS": "512",
        "OUT_DIR": "/tmp/yt2md-out",
        "TRANSCRIPT_LANGUAGES": "de, en ,",
    })

    assert config.OPENAI_API_KEY == "key"
    assert config.SUMMARY_MODEL == "gpt-4.1-mini"
    assert config.SUMMARY_MAX_TOKENS == 512
    assert config.OUT_DIR == Path("/tmp/yt2md-out").resolve()
    assert config.TRANSCRIPT_LANGUAGES == ("de", "en")


def test_from_env_defaults():
    config = Config.from_env({})

    assert config.OPENAI_API_KEY == ""
    assert config.SUMMARY_MODEL == "gpt-4o-mini"
    assert config.SUMMARY_MAX_TOKENS == 1024
    assert config.TRANSCRIPT_LANGUAGES == ("en",)


def test_validate_requires_api_key():
    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        Config().validate()

    Config(OPENAI_API_KEY="key").validate()
