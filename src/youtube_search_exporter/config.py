"""Configuration utilities for loading API keys and settings."""

import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_QUERY = "games"
DEFAULT_TARGET_COUNT = 500
# YouTube Data API caps both search pages and video id lists at 50
MAX_API_PAGE_SIZE = 50
DEFAULT_PAGE_SIZE = 50
DEFAULT_BATCH_SIZE = 50
DEFAULT_OUTPUT_PATH = "sorted_youtube_data.csv"


@dataclass
class ExportSettings:
    """
    Settings for one search-and-export run.

    Attributes:
        query: Free-text search query
        target_count: Stop paginating once at least this many results are collected
        page_size: Results requested per search page
        batch_size: Video IDs per details request
        output_path: CSV file to write (overwritten)
        languages: Preferred transcript languages, or None for any
    """

    query: str = DEFAULT_QUERY
    target_count: int = DEFAULT_TARGET_COUNT
    page_size: int = DEFAULT_PAGE_SIZE
    batch_size: int = DEFAULT_BATCH_SIZE
    output_path: str = DEFAULT_OUTPUT_PATH
    languages: Optional[List[str]] = None


def load_config_from_env() -> str:
    """
    Load YouTube API key from environment variables (.env file).

    Returns:
        YouTube API key

    Raises:
        ValueError: If YOUTUBE_API_KEY is not set
    """
    api_key = os.getenv("YOUTUBE_API_KEY")

    if not api_key:
        raise ValueError(
            "YOUTUBE_API_KEY not found in environment variables. "
            "Please set it in your .env file or as an environment variable."
        )

    return api_key


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}") from None


def _size_from_env(name: str, default: int) -> int:
    value = _int_from_env(name, default)
    if not 1 <= value <= MAX_API_PAGE_SIZE:
        raise ValueError(f"{name} must be between 1 and {MAX_API_PAGE_SIZE}, got {value}")
    return value


def load_settings_from_env() -> ExportSettings:
    """
    Build ExportSettings, letting environment variables override the defaults.

    Recognised variables: YOUTUBE_SEARCH_QUERY, YOUTUBE_TARGET_COUNT,
    YOUTUBE_PAGE_SIZE, YOUTUBE_BATCH_SIZE, YOUTUBE_OUTPUT_PATH and
    YOUTUBE_TRANSCRIPT_LANGUAGES (comma-separated, e.g. "en,es").

    Raises:
        ValueError: If a numeric variable is not an integer, or a page or
            batch size is outside 1-50
    """
    languages_raw = os.getenv("YOUTUBE_TRANSCRIPT_LANGUAGES", "")
    languages = [lang.strip() for lang in languages_raw.split(",") if lang.strip()]

    return ExportSettings(
        query=os.getenv("YOUTUBE_SEARCH_QUERY") or DEFAULT_QUERY,
        target_count=_int_from_env("YOUTUBE_TARGET_COUNT", DEFAULT_TARGET_COUNT),
        page_size=_size_from_env("YOUTUBE_PAGE_SIZE", DEFAULT_PAGE_SIZE),
        batch_size=_size_from_env("YOUTUBE_BATCH_SIZE", DEFAULT_BATCH_SIZE),
        output_path=os.getenv("YOUTUBE_OUTPUT_PATH") or DEFAULT_OUTPUT_PATH,
        languages=languages or None,
    )
