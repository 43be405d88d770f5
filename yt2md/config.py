"""Configuration management and environment variable loading."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file (don't override existing env vars)
load_dotenv(override=False)


def _split_languages(value: str) -> tuple:
    languages = tuple(code.strip() for code in value.split(",") if code.strip())
    return languages or ("en",)


@dataclass
class Config:
    """Application configuration.

    Build one with ``Config.from_env()`` and pass it to the summarizer,
    the providers and the HTTP app. Tests construct it directly.
    """

    OPENAI_API_KEY: str = ""
    SUMMARY_MODEL: str = "gpt-4o-mini"
    SUMMARY_MAX_TOKENS: int = 1024
    OPENAI_TIMEOUT: float = 300.0
    OUT_DIR: Path = field(default_factory=lambda: Path("./outputs").resolve())
    TRANSCRIPT_DIR: Path = field(default_factory=lambda: Path("./transcripts").resolve())
    TRANSCRIPT_LANGUAGES: tuple = ("en",)

    # YouTube cookies for bypassing bot detection (optional)
    # Set to path of cookies.txt file exported from browser
    YOUTUBE_COOKIES_TXT: str = ""

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Config":
        """Read configuration from the environment (``os.environ`` by default)."""
        env = os.environ if environ is None else environ
        return cls(
            OPENAI_API_KEY=env.get("OPENAI_API_KEY", ""),
            SUMMARY_MODEL=env.get("SUMMARY_MODEL", "gpt-4o-mini"),
            SUMMARY_MAX_TOKENS=int(env.get("SUMMARY_MAX_TOKENS", "1024")),
            OPENAI_TIMEOUT=float(env.get("OPENAI_TIMEOUT", "300")),
            OUT_DIR=Path(env.get("OUT_DIR", "./outputs")).resolve(),
            TRANSCRIPT_DIR=Path(env.get("TRANSCRIPT_DIR", "./transcripts")).resolve(),
            TRANSCRIPT_LANGUAGES=_split_languages(env.get("TRANSCRIPT_LANGUAGES", "en")),
            YOUTUBE_COOKIES_TXT=env.get("YOUTUBE_COOKIES_TXT", ""),
        )

    def validate(self) -> None:
        """Validate that required configuration is present."""
        if not self.OPENAI_API_KEY:
            raise ValueError(
                "OPENAI_API_KEY is required. Please set it in your .env file or environment variables."
            )
