"""Writing export records to CSV."""

from pathlib import Path
from typing import Dict, List

import pandas as pd

CSV_FIELDS = [
    "videoUrl",
    "title",
    "description",
    "channelTitle",
    "keywordTags",
    "youtubeVideoCategory",
    "topicDetails",
    "videoPublishedAt",
    "videoDuration",
    "viewCount",
    "commentCount",
    "captionsAvailable",
    "captionText",
    "locationOfRecording",
]


def records_to_dataframe(records: List[Dict]) -> pd.DataFrame:
    """One row per record, columns fixed to CSV_FIELDS in order."""
    return pd.DataFrame(records, columns=CSV_FIELDS)


def save_records_csv(records: List[Dict], output_path: str) -> Path:
    """
    Save records to a CSV file, replacing any existing file.

    Args:
        records: Export rows keyed by CSV_FIELDS
        output_path: Destination file

    Returns:
        Path to the saved file
    """
    file_path = Path(output_path)
    if file_path.parent != Path("."):
        file_path.parent.mkdir(parents=True, exist_ok=True)

    records_to_dataframe(records).to_csv(file_path, index=False, encoding="utf-8")
    return file_path
